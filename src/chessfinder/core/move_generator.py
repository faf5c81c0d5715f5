"""Pseudo-legal move enumeration.

Pseudo-legal means the piece may move to the target square and the target
is neither occupied by its own side nor by the enemy king. Nothing here
checks whether the mover's king is left in check, pins are ignored and
castling is never generated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chessfinder.core.board import Board
from chessfinder.core.enums import Color
from chessfinder.core.move import Move
from chessfinder.core.piece import Piece, PlacedPiece
from chessfinder.core.types import Coordinate, Square, square_name

_LOGGER = logging.getLogger(__name__)


class MoveGenerator:
    """Generates pseudo-legal destinations for pieces on a :class:`Board`.

    The generator only reads the board.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_moves_for(self, placed: PlacedPiece) -> set[Coordinate]:
        """Every square *placed* could reach, blocking and captures applied.

        *placed* must still match the board; a stale snapshot raises
        :class:`ValueError`.
        """
        piece = placed.piece
        origin = placed.coordinate
        if self._board[origin] != piece:
            raise ValueError(f"{placed} is not on the board")

        if piece.is_slider:
            targets = self._gen_sliding(piece, origin)
        elif piece.is_stepper:
            targets = self._gen_stepping(piece, piece.step_targets(origin))
        else:
            targets = self._gen_pawn(piece, origin)

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Pseudo-moves for the %s: %s",
                placed,
                " ".join(square_name(c) for c in sorted(targets)) or "(none)",
            )
        return targets

    def pseudo_moves_from(self, square: Square) -> set[Coordinate]:
        """Pseudo-moves of whatever stands on *square*."""
        placed = self._board.locate(square)
        if placed is None:
            raise ValueError(f"No piece on {square}")
        return self.pseudo_moves_for(placed)

    def generate_pseudo_legal_moves(self, color: Color | None = None) -> list[Move]:
        """Pseudo-legal moves of every piece (optionally one side's only).

        Pieces come in board-storage order, destinations sorted per piece.
        """
        board = self._board
        moves: list[Move] = []
        for placed in board.all_pieces(color):
            for to_sq in sorted(self.pseudo_moves_for(placed)):
                moves.append(Move(placed.piece, placed.coordinate, to_sq, board[to_sq]))
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _can_take(self, piece: Piece, target: Piece) -> bool:
        return target.color != piece.color and not target.is_king

    def _gen_sliding(self, piece: Piece, origin: Coordinate) -> set[Coordinate]:
        board = self._board
        targets: set[Coordinate] = set()
        for ray in piece.rays(origin):
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    targets.add(to_sq)
                    continue
                if self._can_take(piece, target):
                    targets.add(to_sq)
                break
        return targets

    def _gen_stepping(
        self, piece: Piece, candidates: Iterable[Coordinate]
    ) -> set[Coordinate]:
        board = self._board
        targets: set[Coordinate] = set()
        for to_sq in candidates:
            target = board[to_sq]
            if target is None or self._can_take(piece, target):
                targets.add(to_sq)
        return targets

    def _gen_pawn(self, piece: Piece, origin: Coordinate) -> set[Coordinate]:
        board = self._board
        targets: set[Coordinate] = set()

        # The two-step square is only reachable through an empty one-step square.
        for to_sq in piece.pawn_push_targets(origin):
            if not board.is_empty(to_sq):
                break
            targets.add(to_sq)

        for to_sq in piece.pawn_attack_targets(origin):
            target = board[to_sq]
            if target is not None and self._can_take(piece, target):
                targets.add(to_sq)
        return targets
