"""FEN piece-placement parsing and serialisation.

Only the first FEN field is interpreted. The remaining fields (side to
move, castling, en passant, clocks) are accepted and ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessfinder.core.errors import MalformedInputError
from chessfinder.core.piece import Piece
from chessfinder.core.types import BOARD_SIZE, Coordinate, make_coordinate

if TYPE_CHECKING:
    from chessfinder.core.board import Board

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
NO_PAWNS_FEN = "rnbqkbnr/8/8/8/8/8/8/RNBQKBNR w KQkq - 0 1"


def parse_piece_placement(fen: str) -> dict[Coordinate, Piece]:
    """Parse the placement field of *fen* into a coordinate → piece map.

    *fen* may be the bare placement field or a full FEN record.
    """
    parts = fen.split()
    if not parts:
        raise MalformedInputError("Empty FEN piece placement")
    placement = parts[0]

    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise MalformedInputError(
            f"Invalid FEN board (must contain 8 ranks): {placement!r}"
        )

    pieces: dict[Coordinate, Piece] = {}
    # FEN lists the 8th rank first, which is rank index 0.
    for rank, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise MalformedInputError(
                        f"Invalid FEN digit {ch!r}: {placement!r}"
                    )
                file += step
            else:
                if file >= BOARD_SIZE:
                    raise MalformedInputError(f"Invalid FEN rank width: {placement!r}")
                try:
                    piece = Piece.from_char(ch)
                except ValueError:
                    raise MalformedInputError(
                        f"Invalid FEN piece character {ch!r}: {placement!r}"
                    ) from None
                pieces[make_coordinate(file, rank)] = piece
                file += 1
            if file > BOARD_SIZE:
                raise MalformedInputError(f"Invalid FEN rank width: {placement!r}")
        if file != BOARD_SIZE:
            raise MalformedInputError(f"Invalid FEN rank width: {placement!r}")

    return pieces


def placement_from_board(board: Board) -> str:
    """Serialise the board's piece placement (first FEN field)."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE):
        empty = 0
        row = ""
        for file in range(BOARD_SIZE):
            piece = board[make_coordinate(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
