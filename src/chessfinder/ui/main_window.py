"""ViewerWindow — board view plus a FEN entry line and a move listing."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessfinder.core.board import Board
from chessfinder.core.errors import MalformedInputError
from chessfinder.core.types import square_name
from chessfinder.ui.board.board_view import BoardView
from chessfinder.ui.settings import ViewerSettings
from chessfinder.ui.styles.theme import theme_by_name

_LOGGER = logging.getLogger(__name__)


class ViewerWindow(QMainWindow):
    """Top-level window of the pseudo-move viewer."""

    def __init__(
        self,
        board: Board | None = None,
        settings: ViewerSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Chess Finder")
        self._settings = settings or ViewerSettings()

        self._board_view = BoardView()
        self._fen_edit = QLineEdit()
        self._fen_edit.setPlaceholderText("FEN piece placement")
        self._load_button = QPushButton("Load")
        self._status = QLabel()
        self._status.setWordWrap(True)

        fen_row = QHBoxLayout()
        fen_row.addWidget(self._fen_edit)
        fen_row.addWidget(self._load_button)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self._board_view)
        layout.addLayout(fen_row)
        layout.addWidget(self._status)
        self.setCentralWidget(central)

        self._load_button.clicked.connect(self._on_load_clicked)
        self._fen_edit.returnPressed.connect(self._on_load_clicked)
        self._board_view.board_scene.square_selected.connect(self._on_square_selected)

        self.apply_settings()
        self.set_board(board if board is not None else Board.initial())

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def settings(self) -> ViewerSettings:
        return self._settings

    @property
    def status_text(self) -> str:
        return self._status.text()

    def set_board(self, board: Board) -> None:
        self._board_view.board_scene.set_board(board)
        self._status.setText(f"{len(board)} pieces")

    def load_fen(self, fen: str) -> bool:
        """Load *fen* into a fresh board; report malformed input in the status line."""
        try:
            board = Board.from_fen(fen)
        except MalformedInputError as exc:
            _LOGGER.warning("Rejected FEN %r: %s", fen, exc)
            self._status.setText(str(exc))
            return False
        self.set_board(board)
        return True

    def apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(theme_by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_pseudo_moves(s.show_pseudo_moves)
        scene.set_flipped(s.flipped)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_load_clicked(self) -> None:
        self.load_fen(self._fen_edit.text())

    def _on_square_selected(self, square: str) -> None:
        scene = self._board_view.board_scene
        targets = " ".join(square_name(c) for c in sorted(scene.pseudo_moves))
        placed = scene.board.locate(square) if scene.board is not None else None
        label = str(placed) if placed is not None else square
        self._status.setText(f"{label}: {targets or '(none)'}")
