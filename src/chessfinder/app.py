"""Application entry point.

``chessfinder FEN --list`` prints every piece's pseudo-moves; without
``--list`` the position opens in the board viewer.
"""

from __future__ import annotations

import argparse
import logging
import sys

from chessfinder.core.board import Board
from chessfinder.core.enums import Color
from chessfinder.core.errors import ChessFinderError
from chessfinder.core.move_generator import MoveGenerator
from chessfinder.core.notation import STARTING_FEN
from chessfinder.core.piece import PlacedPiece
from chessfinder.core.types import square_name

_LOGGER = logging.getLogger(__name__)

_COLORS = {"white": Color.WHITE, "black": Color.BLACK}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessfinder",
        description="List pseudo-legal moves for a FEN piece placement.",
    )
    parser.add_argument(
        "fen",
        nargs="?",
        default=STARTING_FEN,
        help="FEN record or piece-placement field (default: starting position)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="print pseudo-moves instead of opening the viewer",
    )
    parser.add_argument("--square", help="only the piece standing on SQUARE")
    parser.add_argument(
        "--color", choices=sorted(_COLORS), help="only pieces of this color"
    )
    parser.add_argument(
        "--flip", action="store_true", help="view the board from Black's side"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def format_pseudo_moves(
    board: Board, *, color: Color | None = None, square: str | None = None
) -> list[str]:
    """One ``"<piece> on <square>: <targets>"`` line per selected piece."""
    gen = MoveGenerator(board)
    if square is not None:
        placed = board.locate(square)
        if placed is None:
            raise ValueError(f"No piece on {square}")
        selection: list[PlacedPiece] = [placed]
    else:
        selection = board.all_pieces(color)

    lines: list[str] = []
    for placed in selection:
        targets = sorted(gen.pseudo_moves_for(placed))
        names = " ".join(square_name(c) for c in targets) or "(none)"
        lines.append(f"{placed}: {names}")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    lines: list[str] = []
    try:
        board = Board.from_fen(args.fen)
        if args.list:
            lines = format_pseudo_moves(
                board, color=_COLORS.get(args.color), square=args.square
            )
    except (ChessFinderError, ValueError) as exc:
        _LOGGER.debug("Rejected input", exc_info=exc)
        print(f"chessfinder: error: {exc}", file=sys.stderr)
        return 2

    if args.list:
        for line in lines:
            print(line)
        return 0

    from chessfinder.ui.bootstrap import run_application
    from chessfinder.ui.settings import ViewerSettings

    return run_application(board, ViewerSettings(flipped=args.flip))


if __name__ == "__main__":
    sys.exit(main())
