"""Notation package: FEN piece-placement parsing and serialization."""

from chessfinder.core.notation.fen import (
    NO_PAWNS_FEN,
    STARTING_FEN,
    parse_piece_placement,
    placement_from_board,
)

__all__ = [
    "NO_PAWNS_FEN",
    "STARTING_FEN",
    "parse_piece_placement",
    "placement_from_board",
]
