"""
Command-line interface for playing matches on the console.
"""

import argparse
import logging
import sys
from typing import List, Optional

from tictacgrid.api import play
from tictacgrid.core.errors import GameError
from tictacgrid.core.types import DEFAULT_BOARD_SIZE, MAX_BOARD_SIZE, MIN_BOARD_SIZE
from tictacgrid.utils.config import Config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play N-in-a-row tic-tac-toe on an N x N board"
    )
    parser.add_argument(
        "--size", "-n",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Board side length, {MIN_BOARD_SIZE}..{MAX_BOARD_SIZE} (default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--rounds", "-r",
        type=int,
        default=1,
        help="Matches to play, resetting between them (default: 1)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every move",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config(board_size=args.size, rounds=args.rounds)
    except (GameError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        play(config)
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted - exiting")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
