"""Tests for the analysis predicates that cannot be answered yet."""

import pytest

from chessfinder.core.board import Board
from chessfinder.core.enums import Color
from chessfinder.core.errors import ChessFinderError, UnsupportedAnalysisError
from chessfinder.core.rules import Rules

POSITION_PREDICATES = [
    Rules.is_in_check,
    Rules.is_in_double_check,
    Rules.is_checkmated,
    Rules.is_pseudo_stalemated,
]

PIECE_PREDICATES = [
    Rules.is_pinned,
    Rules.is_blocked,
    Rules.is_trapped,
    Rules.is_forking,
    Rules.is_overworked,
    Rules.is_en_prise,
]


class TestUnsupportedAnalysis:
    @pytest.mark.parametrize("predicate", POSITION_PREDICATES)
    def test_position_predicates_raise(self, predicate) -> None:
        with pytest.raises(UnsupportedAnalysisError, match=predicate.__name__):
            predicate(Board.initial(), Color.WHITE)

    @pytest.mark.parametrize("predicate", PIECE_PREDICATES)
    def test_piece_predicates_raise(self, predicate) -> None:
        board = Board.initial()
        placed = board.locate("e1")
        assert placed is not None
        with pytest.raises(UnsupportedAnalysisError, match="is not implemented"):
            predicate(board, placed)

    def test_error_hierarchy(self) -> None:
        with pytest.raises(NotImplementedError):
            Rules.is_in_check(Board.initial(), Color.BLACK)
        with pytest.raises(ChessFinderError):
            Rules.is_en_prise(Board.initial(), Board.initial().all_pieces()[0])

    def test_board_untouched(self) -> None:
        board = Board.initial()
        with pytest.raises(UnsupportedAnalysisError):
            Rules.is_checkmated(board, Color.WHITE)
        assert board == Board.initial()
