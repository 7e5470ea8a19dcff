"""Console entry point: type moves against an in-memory board.

Usage:
    chesshelper [--fen FEN] [--as white|black] [--log-level LEVEL]

Text lines are parsed as moves. ``:key <key> <square>`` simulates a bound key
pressed while pointing at a square, ``:opp <san>`` plays an opponent move,
``:map`` prints the directional piece map, ``:quit`` exits.
"""

from __future__ import annotations

import argparse
import logging
import sys

from chesshelper.board.python_chess import PythonChessBoard
from chesshelper.controller import MoveHelper
from chesshelper.core.enums import Color
from chesshelper.core.types import is_square_name, parse_square

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesshelper", description="Type chess moves against an in-memory board."
    )
    parser.add_argument("--fen", default=None, help="starting position (FEN)")
    parser.add_argument(
        "--as", dest="side", choices=("white", "black"), default="white",
        help="side you play; the other side is entered with :opp",
    )
    parser.add_argument(
        "--analysis", action="store_true", help="you move for both sides"
    )
    parser.add_argument("--log-level", default="WARNING", help="logging level")
    return parser


def _handle_command(helper: MoveHelper, board: PythonChessBoard, line: str) -> bool:
    """Run one ``:command``; returns False when the session should end."""
    name, _, rest = line[1:].partition(" ")
    if name == "quit":
        return False
    if name == "map":
        print(helper.piece_map)
    elif name == "opp":
        try:
            board.push_san(rest.strip())
        except ValueError as exc:
            print(f"error: {exc}")
    elif name == "key":
        key, _, square = rest.rpartition(" ")
        if not is_square_name(square):
            print(f"error: invalid square {square!r}")
            return True
        # An empty key name stands for the space bar.
        outcome = helper.go_key(key or " ", parse_square(square))
        if outcome is None:
            print(f"error: unbound key {key!r}")
    else:
        print(f"error: unknown command {name!r}")
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the interactive session."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    side = Color.WHITE if args.side == "white" else Color.BLACK
    board = PythonChessBoard(args.fen, playing_as=side, analysis=args.analysis)
    helper = MoveHelper(board)
    helper.events.on_message.append(print)
    _LOGGER.debug("Session started as %s", side)

    for raw in sys.stdin:
        line = raw.strip()
        if not line:
            continue
        if line.startswith(":"):
            if not _handle_command(helper, board, line):
                break
        else:
            helper.go(line)
        print(board.board.unicode(invert_color=False, orientation=not board.flipped))
        if board.board.is_game_over():
            print(board.board.result())
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())
