"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessfinder.core import Board, MoveGenerator, STARTING_FEN

    board = Board.from_fen(STARTING_FEN)
    gen = MoveGenerator(board)
    for move in gen.generate_pseudo_legal_moves():
        print(move)
"""

from chessfinder.core.board import Board
from chessfinder.core.enums import Color, PieceType
from chessfinder.core.errors import (
    ChessFinderError,
    InvalidDirectionError,
    InvalidSquareError,
    MalformedInputError,
    UnsupportedAnalysisError,
)
from chessfinder.core.geometry import (
    all_rays,
    diagonal_rays,
    king_neighborhood,
    knight_offsets,
    orthogonal_rays,
    ray_from,
)
from chessfinder.core.move import Move
from chessfinder.core.move_generator import MoveGenerator
from chessfinder.core.notation import (
    NO_PAWNS_FEN,
    STARTING_FEN,
    parse_piece_placement,
    placement_from_board,
)
from chessfinder.core.piece import Piece, PlacedPiece
from chessfinder.core.rules import Rules
from chessfinder.core.types import (
    Coordinate,
    Square,
    as_coordinate,
    is_in_bounds,
    make_coordinate,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "ChessFinderError",
    "InvalidDirectionError",
    "InvalidSquareError",
    "MalformedInputError",
    "UnsupportedAnalysisError",
    # Types / helpers
    "Coordinate",
    "Square",
    "as_coordinate",
    "is_in_bounds",
    "make_coordinate",
    "parse_square",
    "square_name",
    # Geometry
    "all_rays",
    "diagonal_rays",
    "king_neighborhood",
    "knight_offsets",
    "orthogonal_rays",
    "ray_from",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "PlacedPiece",
    "Rules",
    # Notation
    "NO_PAWNS_FEN",
    "STARTING_FEN",
    "parse_piece_placement",
    "placement_from_board",
]
