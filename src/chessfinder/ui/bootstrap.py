"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from chessfinder.core.board import Board
    from chessfinder.ui.settings import ViewerSettings

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessfinder.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chess Finder")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    board: Board | None = None,
    settings: ViewerSettings | None = None,
    argv: list[str] | None = None,
) -> int:
    """Create and run the viewer application."""
    from PyQt6.QtWidgets import QApplication

    from chessfinder.ui.main_window import ViewerWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = ViewerWindow(board, settings)
    window.show()
    _LOGGER.debug("Viewer started with %d pieces", len(window.board_view.board_scene.board))

    return app.exec()
