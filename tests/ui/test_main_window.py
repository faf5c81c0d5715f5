"""Tests for ViewerWindow FEN loading and status reporting."""

from __future__ import annotations

import logging

import pytest

from chessfinder.core.board import Board
from chessfinder.core.enums import Color, PieceType
from chessfinder.ui.main_window import ViewerWindow
from chessfinder.ui.settings import ViewerSettings


def test_defaults_to_starting_position() -> None:
    window = ViewerWindow()
    assert window.board_view.board_scene.board == Board.initial()
    assert window.status_text == "32 pieces"


def test_load_valid_fen_replaces_board() -> None:
    window = ViewerWindow()
    assert window.load_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
    assert len(window.board_view.board_scene.board) == 2
    assert window.status_text == "2 pieces"


def test_load_malformed_fen_keeps_board(caplog: pytest.LogCaptureFixture) -> None:
    window = ViewerWindow()
    with caplog.at_level(logging.WARNING, logger="chessfinder.ui.main_window"):
        assert not window.load_fen("8/8/8")
    assert window.board_view.board_scene.board == Board.initial()
    assert "8 ranks" in window.status_text
    assert "Rejected FEN" in caplog.text


def test_selection_reports_pseudo_moves() -> None:
    window = ViewerWindow(Board.initial())
    window.board_view.board_scene.select_square("b1")
    assert window.status_text == "white knight on b1: a3 c3"


def test_selection_reports_blocked_piece() -> None:
    window = ViewerWindow(Board.initial())
    window.board_view.board_scene.select_square("a8")
    assert window.status_text == "black rook on a8: (none)"


def test_settings_are_applied() -> None:
    board = Board()
    board.place_piece(PieceType.KING, Color.WHITE, "e1")
    settings = ViewerSettings(board_theme="Blue", show_coordinates=False, flipped=True)
    window = ViewerWindow(board, settings)
    scene = window.board_view.board_scene
    assert window.settings is settings
    assert scene.is_flipped()
    assert all(not item.isVisible() for item in scene._coord_items)
