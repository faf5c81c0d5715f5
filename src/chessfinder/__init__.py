"""Chess board model and pseudo-legal move finder."""

__version__ = "0.1.0"
