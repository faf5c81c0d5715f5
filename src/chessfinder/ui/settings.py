"""Viewer settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ViewerSettings:
    """All user-configurable viewer settings."""

    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_pseudo_moves: bool = True
    flipped: bool = False
