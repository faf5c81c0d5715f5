"""Board geometry: rays, knight jumps and king neighbourhoods.

Directions are ``(d_file, d_rank)`` pairs in :class:`Coordinate` space, so
"north" (towards the 8th rank) has a negative rank delta.
"""

from __future__ import annotations

from collections.abc import Iterator

from chessfinder.core.errors import InvalidDirectionError
from chessfinder.core.types import Coordinate, is_in_bounds

Direction = tuple[int, int]

NORTH: Direction = (0, -1)
SOUTH: Direction = (0, 1)
EAST: Direction = (1, 0)
WEST: Direction = (-1, 0)
NORTH_EAST: Direction = (1, -1)
NORTH_WEST: Direction = (-1, -1)
SOUTH_EAST: Direction = (1, 1)
SOUTH_WEST: Direction = (-1, 1)

ORTHOGONAL_DIRS: tuple[Direction, ...] = (NORTH, SOUTH, EAST, WEST)
DIAGONAL_DIRS: tuple[Direction, ...] = (NORTH_EAST, NORTH_WEST, SOUTH_EAST, SOUTH_WEST)
ALL_DIRS: tuple[Direction, ...] = ORTHOGONAL_DIRS + DIAGONAL_DIRS

KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Direction, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

Ray = Iterator[Coordinate]


def chebyshev_distance(a: Coordinate, b: Coordinate) -> int:
    """King-move distance between two coordinates."""
    return max(abs(a.file - b.file), abs(a.rank - b.rank))


def ray_from(origin: Coordinate, d_file: int, d_rank: int) -> Ray:
    """Lazily walk from *origin* (exclusive) in one direction to the edge.

    The direction is validated eagerly: both deltas zero raises
    :class:`InvalidDirectionError` at call time. Any other integer deltas
    are stepped as given; the ray is empty when the first step already
    leaves the board.
    """
    if d_file == 0 and d_rank == 0:
        raise InvalidDirectionError("Both ray deltas can't be zero")
    return _walk(origin, d_file, d_rank)


def _walk(origin: Coordinate, d_file: int, d_rank: int) -> Ray:
    file = origin.file + d_file
    rank = origin.rank + d_rank
    while is_in_bounds(file, rank):
        yield Coordinate(file, rank)
        file += d_file
        rank += d_rank


def _rays(origin: Coordinate, directions: tuple[Direction, ...]) -> tuple[Ray, ...]:
    return tuple(ray_from(origin, df, dr) for df, dr in directions)


def orthogonal_rays(origin: Coordinate) -> tuple[Ray, ...]:
    """North, south, east and west rays."""
    return _rays(origin, ORTHOGONAL_DIRS)


def diagonal_rays(origin: Coordinate) -> tuple[Ray, ...]:
    """North-east, north-west, south-east and south-west rays."""
    return _rays(origin, DIAGONAL_DIRS)


def all_rays(origin: Coordinate) -> tuple[Ray, ...]:
    """Orthogonal rays followed by diagonal rays."""
    return _rays(origin, ALL_DIRS)


def _targets(origin: Coordinate, offsets: tuple[Direction, ...]) -> frozenset[Coordinate]:
    targets: set[Coordinate] = set()
    for df, dr in offsets:
        target = origin.offset(df, dr)
        if target is not None:
            targets.add(target)
    return frozenset(targets)


def knight_offsets(origin: Coordinate) -> frozenset[Coordinate]:
    """All in-bounds squares an L-shaped jump from *origin* reaches."""
    return _targets(origin, KNIGHT_OFFSETS)


def king_neighborhood(origin: Coordinate) -> frozenset[Coordinate]:
    """All in-bounds squares adjacent to *origin*."""
    return _targets(origin, KING_OFFSETS)
