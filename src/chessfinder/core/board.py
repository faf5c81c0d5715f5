"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chessfinder.core.enums import Color, PieceType
from chessfinder.core.notation.fen import (
    NO_PAWNS_FEN,
    STARTING_FEN,
    parse_piece_placement,
)
from chessfinder.core.piece import Piece, PlacedPiece
from chessfinder.core.types import (
    BOARD_SIZE,
    Coordinate,
    Square,
    as_coordinate,
    make_coordinate,
    square_name,
)

_LOGGER = logging.getLogger(__name__)


class Board:
    """Mutable 8x8 grid of optional pieces.

    Rows are stored rank-major in screen order: row 0 is the 8th rank, row
    7 the 1st rank. The grid is the only record of where a piece stands.
    Every square-accepting method takes an algebraic name or a
    :class:`Coordinate`.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, square: Square) -> Piece | None:
        coord = as_coordinate(square)
        return self._grid[coord.rank][coord.file]

    def __setitem__(self, square: Square, piece: Piece | None) -> None:
        coord = as_coordinate(square)
        self._grid[coord.rank][coord.file] = piece

    def piece_at(self, square: Square) -> Piece | None:
        """Occupant of *square*, or ``None``."""
        return self[square]

    def locate(self, square: Square) -> PlacedPiece | None:
        """Occupant of *square* bound to its coordinate, or ``None``."""
        coord = as_coordinate(square)
        piece = self._grid[coord.rank][coord.file]
        if piece is None:
            return None
        return PlacedPiece(piece, coord)

    def is_occupied(self, square: Square) -> bool:
        return self[square] is not None

    def is_empty(self, square: Square) -> bool:
        return self[square] is None

    # -- Mutation -------------------------------------------------------------

    def place_piece(self, piece_type: PieceType, color: Color, square: Square) -> Piece:
        """Put a new *color* *piece_type* on *square*, discarding any occupant."""
        piece = Piece(color, piece_type)
        self[square] = piece
        return piece

    def clear(self, square: Square) -> None:
        """Remove whatever stands on *square*."""
        self[square] = None

    def reset(self) -> None:
        """Empty every square."""
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def load_piece_placement(self, fen: str) -> None:
        """Replace the board contents with the placement field of *fen*.

        *fen* may be a full FEN record; fields after the first are ignored.
        The input is validated before the board is touched, so a
        :class:`MalformedInputError` leaves the current contents intact.
        """
        pieces = parse_piece_placement(fen)
        self.reset()
        for coord, piece in pieces.items():
            self._grid[coord.rank][coord.file] = piece
        _LOGGER.debug("Loaded %d pieces from FEN %r", len(pieces), fen)

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self, color: Color | None = None) -> list[PlacedPiece]:
        """Every occupied square in storage order (8th rank first, a-file first)."""
        placed: list[PlacedPiece] = []
        for rank, row in enumerate(self._grid):
            for file, piece in enumerate(row):
                if piece is None:
                    continue
                if color is not None and piece.color != color:
                    continue
                placed.append(PlacedPiece(piece, make_coordinate(file, rank)))
        return placed

    def __iter__(self) -> Iterator[PlacedPiece]:
        return iter(self.all_pieces())

    def __len__(self) -> int:
        return sum(piece is not None for row in self._grid for piece in row)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        b = cls()
        b.load_piece_placement(fen)
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls.from_fen(STARTING_FEN)

    @classmethod
    def no_pawns(cls) -> Board:
        """Starting position with every pawn removed."""
        return cls.from_fen(NO_PAWNS_FEN)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            label = square_name(Coordinate(0, rank))[1]
            rows.append(f"{label} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
