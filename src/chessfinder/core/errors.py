"""Exceptions raised by the core layer.

Every error is a local validation failure detected at the API boundary and
is raised straight to the caller. The value-type errors also derive from
:class:`ValueError` so callers that only care about "bad input" can catch
that.
"""

from __future__ import annotations


class ChessFinderError(Exception):
    """Base class for all chessfinder errors."""


class InvalidSquareError(ChessFinderError, ValueError):
    """Algebraic square not matching ``[a-h][1-8]`` or coordinate off the board."""


class InvalidDirectionError(ChessFinderError, ValueError):
    """Ray requested with both deltas equal to zero."""


class MalformedInputError(ChessFinderError, ValueError):
    """Structurally invalid FEN piece placement."""


class UnsupportedAnalysisError(ChessFinderError, NotImplementedError):
    """Capability that needs game state this library does not track."""
