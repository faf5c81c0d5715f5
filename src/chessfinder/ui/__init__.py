"""PyQt6 viewer that highlights pseudo-moves on a board."""
