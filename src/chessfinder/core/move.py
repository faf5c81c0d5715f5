"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessfinder.core.piece import Piece
from chessfinder.core.types import Coordinate, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object describing one pseudo-legal move."""

    piece: Piece
    from_sq: Coordinate
    to_sq: Coordinate
    captured: Piece | None = None

    @property
    def from_square(self) -> str:
        return square_name(self.from_sq)

    @property
    def to_square(self) -> str:
        return square_name(self.to_sq)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_square}{self.to_square}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
