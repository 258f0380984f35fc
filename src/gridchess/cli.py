"""Command-line driver: classify a position or count perft nodes."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from gridchess.core.perft import divide, perft
from gridchess.core.rules import Rules
from gridchess.notation.fen import STARTING_FEN, FenError, game_from_fen
from gridchess.notation.grid import render

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridchess", description="Inspect chess positions of any board size"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    status = commands.add_parser("status", help="Print board, status and legal moves")
    status.add_argument("fen", nargs="?", default=STARTING_FEN, help="FEN (default: start)")

    perft_cmd = commands.add_parser("perft", help="Count leaf nodes at a given depth")
    perft_cmd.add_argument("fen", nargs="?", default=STARTING_FEN, help="FEN (default: start)")
    perft_cmd.add_argument("--depth", type=int, default=3, help="Perft depth (default: 3)")
    perft_cmd.add_argument(
        "--divide", action="store_true", help="Print per-move node counts"
    )
    return parser


def _cmd_status(fen: str) -> int:
    game = game_from_fen(fen)
    status, moves = Rules.game_status(game)
    print(render(game.board), end="")
    print(f"{game.side_to_move} to move: {status.value}")
    print(f"{len(moves)} legal moves: {' '.join(sorted(str(m) for m in moves))}")
    return 0


def _cmd_perft(fen: str, depth: int, show_divide: bool) -> int:
    game = game_from_fen(fen)
    start = time.perf_counter()
    if show_divide:
        counts = divide(game, depth)
        for move_text, count in sorted(counts.items()):
            print(f"{move_text}: {count}")
        nodes = sum(counts.values())
    else:
        nodes = perft(game, depth)
    dt = time.perf_counter() - start
    print(f"nodes={nodes} depth={depth} time_ms={int(dt * 1000)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "status":
            return _cmd_status(args.fen)
        return _cmd_perft(args.fen, args.depth, args.divide)
    except FenError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        _LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
