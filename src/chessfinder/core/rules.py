"""Position and piece analysis predicates.

None of these can be answered from piece placement alone. Check and mate
detection needs the side to move, castling rights and the en passant
square; the tactical predicates need attacker/defender bookkeeping. Until
that state is threaded in from outside the board, every predicate raises
:class:`UnsupportedAnalysisError` instead of guessing.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from chessfinder.core.board import Board
from chessfinder.core.enums import Color
from chessfinder.core.errors import UnsupportedAnalysisError
from chessfinder.core.piece import PlacedPiece

_LOGGER = logging.getLogger(__name__)

_NEEDS_GAME_STATE = "needs side to move, castling rights and en passant state"
_NEEDS_ATTACK_MAP = "needs attacker/defender tracking"


def _unsupported(predicate: str, reason: str) -> NoReturn:
    _LOGGER.debug("Unsupported analysis requested: %s", predicate)
    raise UnsupportedAnalysisError(f"{predicate} is not implemented: {reason}")


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # -- Position predicates ---------------------------------------------------

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        _unsupported("is_in_check", _NEEDS_GAME_STATE)

    @staticmethod
    def is_in_double_check(board: Board, color: Color) -> bool:
        _unsupported("is_in_double_check", _NEEDS_GAME_STATE)

    @staticmethod
    def is_checkmated(board: Board, color: Color) -> bool:
        _unsupported("is_checkmated", _NEEDS_GAME_STATE)

    @staticmethod
    def is_pseudo_stalemated(board: Board, color: Color) -> bool:
        """Whether *color* has no legal moves, regardless of whose turn it is."""
        _unsupported("is_pseudo_stalemated", _NEEDS_GAME_STATE)

    # -- Piece predicates ------------------------------------------------------

    @staticmethod
    def is_pinned(board: Board, placed: PlacedPiece) -> bool:
        _unsupported("is_pinned", _NEEDS_GAME_STATE)

    @staticmethod
    def is_blocked(board: Board, placed: PlacedPiece) -> bool:
        """Piece has no legal moves."""
        _unsupported("is_blocked", _NEEDS_GAME_STATE)

    @staticmethod
    def is_trapped(board: Board, placed: PlacedPiece) -> bool:
        """Piece has legal moves, but every one of them lands on an attacked square."""
        _unsupported("is_trapped", _NEEDS_GAME_STATE)

    @staticmethod
    def is_forking(board: Board, placed: PlacedPiece) -> bool:
        _unsupported("is_forking", _NEEDS_ATTACK_MAP)

    @staticmethod
    def is_overworked(board: Board, placed: PlacedPiece) -> bool:
        # Defensive duties such as preventing mate count too, not just pieces defended.
        _unsupported("is_overworked", _NEEDS_ATTACK_MAP)

    @staticmethod
    def is_en_prise(board: Board, placed: PlacedPiece) -> bool:
        _unsupported("is_en_prise", _NEEDS_ATTACK_MAP)
