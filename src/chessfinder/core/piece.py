"""Piece value objects and per-kind geometry dispatch."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from chessfinder.core.enums import Color, PieceType
from chessfinder.core.geometry import (
    Ray,
    all_rays,
    diagonal_rays,
    king_neighborhood,
    knight_offsets,
    orthogonal_rays,
)
from chessfinder.core.types import Coordinate, parse_square, square_name

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

# Which geometry query applies to which kind.
_SLIDING_RAYS: dict[PieceType, Callable[[Coordinate], tuple[Ray, ...]]] = {
    PieceType.BISHOP: diagonal_rays,
    PieceType.ROOK: orthogonal_rays,
    PieceType.QUEEN: all_rays,
}

_STEP_TARGETS: dict[PieceType, Callable[[Coordinate], frozenset[Coordinate]]] = {
    PieceType.KNIGHT: knight_offsets,
    PieceType.KING: king_neighborhood,
}

# Rank deltas are in Coordinate space: white advances towards rank index 0.
_PAWN_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}

_STARTING_SQUARES: dict[tuple[Color, PieceType], frozenset[Coordinate]] = {
    (color, ptype): frozenset(parse_square(name) for name in names)
    for (color, ptype), names in {
        (Color.WHITE, PieceType.KNIGHT): ("b1", "g1"),
        (Color.WHITE, PieceType.BISHOP): ("c1", "f1"),
        (Color.WHITE, PieceType.ROOK): ("a1", "h1"),
        (Color.WHITE, PieceType.QUEEN): ("d1",),
        (Color.WHITE, PieceType.KING): ("e1",),
        (Color.BLACK, PieceType.KNIGHT): ("b8", "g8"),
        (Color.BLACK, PieceType.BISHOP): ("c8", "f8"),
        (Color.BLACK, PieceType.ROOK): ("a8", "h8"),
        (Color.BLACK, PieceType.QUEEN): ("d8",),
        (Color.BLACK, PieceType.KING): ("e8",),
    }.items()
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    A piece does not know where it stands; the board is the only source of
    truth for position (see :class:`PlacedPiece`).
    """

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def name(self) -> str:
        """Human-readable name, e.g. 'white rook'."""
        return f"{str(self.color)} {str(self.piece_type)}"

    # ── Kind predicates ──────────────────────────────────────────────────

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    @property
    def is_slider(self) -> bool:
        return self.piece_type in _SLIDING_RAYS

    @property
    def is_stepper(self) -> bool:
        return self.piece_type in _STEP_TARGETS

    # ── Geometry ─────────────────────────────────────────────────────────

    def rays(self, origin: Coordinate) -> tuple[Ray, ...]:
        """Rays a sliding piece on *origin* travels along."""
        try:
            return _SLIDING_RAYS[self.piece_type](origin)
        except KeyError:
            raise ValueError(f"{str(self.piece_type)} is not a sliding piece") from None

    def step_targets(self, origin: Coordinate) -> frozenset[Coordinate]:
        """Squares a knight or king on *origin* could step to."""
        try:
            return _STEP_TARGETS[self.piece_type](origin)
        except KeyError:
            raise ValueError(f"{str(self.piece_type)} is not a stepping piece") from None

    @property
    def forward(self) -> int:
        """Rank delta of a pawn advance for this color."""
        return _PAWN_FORWARD[self.color]

    @property
    def pawn_start_rank(self) -> int:
        return _PAWN_START_RANK[self.color]

    def pawn_push_targets(self, origin: Coordinate) -> tuple[Coordinate, ...]:
        """One-step square, then two-step square when *origin* is the start rank."""
        one = origin.offset(0, self.forward)
        if one is None:
            return ()
        if origin.rank != self.pawn_start_rank:
            return (one,)
        two = one.offset(0, self.forward)
        return (one,) if two is None else (one, two)

    def pawn_attack_targets(self, origin: Coordinate) -> frozenset[Coordinate]:
        """Diagonal squares a pawn on *origin* attacks."""
        targets = (origin.offset(-1, self.forward), origin.offset(1, self.forward))
        return frozenset(t for t in targets if t is not None)

    def is_on_starting_square(self, coord: Coordinate) -> bool:
        """Whether *coord* could be this piece's starting square.

        Pawns are judged by rank alone. Nothing is known about whether the
        piece has moved.
        """
        if self.is_pawn:
            return coord.rank == self.pawn_start_rank
        return coord in _STARTING_SQUARES[(self.color, self.piece_type)]


@dataclass(frozen=True, slots=True)
class PlacedPiece:
    """A piece together with the coordinate the board holds it on.

    Produced by board reads; a snapshot, not a live reference.
    """

    piece: Piece
    coordinate: Coordinate

    @property
    def color(self) -> Color:
        return self.piece.color

    @property
    def piece_type(self) -> PieceType:
        return self.piece.piece_type

    @property
    def square(self) -> str:
        return square_name(self.coordinate)

    def __str__(self) -> str:
        return f"{self.piece.name} on {self.square}"
