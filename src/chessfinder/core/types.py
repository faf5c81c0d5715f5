"""Coordinate value type and algebraic notation helpers.

Board layout (screen order, as seen from White's side)::

    a8 = (0, 0)  b8 = (1, 0)  ...  h8 = (7, 0)
    a7 = (0, 1)  ...
    a1 = (0, 7)  ...               h1 = (7, 7)

``file`` grows towards the h-file and ``rank`` grows towards the 1st rank.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

from chessfinder.core.errors import InvalidSquareError

BOARD_SIZE = 8
FILES = "abcdefgh"

_SQUARE_RE = re.compile(r"[a-h][1-8]")


def is_in_bounds(file: int, rank: int) -> bool:
    """Whether (*file*, *rank*) lies on the 8x8 board."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


@dataclass(frozen=True, order=True, slots=True)
class Coordinate:
    """Immutable board square as zero-based (file, rank)."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_in_bounds(self.file, self.rank):
            raise InvalidSquareError(
                f"Coordinate out of bounds: ({self.file}, {self.rank})"
            )

    def offset(self, d_file: int, d_rank: int) -> Coordinate | None:
        """Neighbouring coordinate, or ``None`` when it falls off the board."""
        file, rank = self.file + d_file, self.rank + d_rank
        if not is_in_bounds(file, rank):
            return None
        return Coordinate(file, rank)

    @property
    def name(self) -> str:
        return square_name(self)

    def __str__(self) -> str:
        return square_name(self)


Square: TypeAlias = str | Coordinate


def make_coordinate(file: int, rank: int) -> Coordinate:
    """Create a coordinate from file (0–7) and rank (0–7)."""
    return Coordinate(file, rank)


def square_name(coord: Coordinate) -> str:
    """Algebraic name, e.g. ``Coordinate(4, 4)`` → ``'e4'``."""
    return FILES[coord.file] + str(BOARD_SIZE - coord.rank)


def parse_square(name: str) -> Coordinate:
    """Parse an algebraic square name, e.g. ``'e4'`` → ``Coordinate(4, 4)``."""
    if not isinstance(name, str) or _SQUARE_RE.fullmatch(name) is None:
        raise InvalidSquareError(f"Invalid square name: {name!r}")
    return Coordinate(FILES.index(name[0]), BOARD_SIZE - int(name[1]))


def as_coordinate(square: Square) -> Coordinate:
    """Accept either an algebraic name or a :class:`Coordinate`."""
    if isinstance(square, Coordinate):
        return square
    return parse_square(square)
