#!/usr/bin/env python3
"""
Console Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {1,2,3}] [--seed N] [--verbose]
    python main.py play --rows R --cols C --mines M
"""
import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

# Add src to path for imports when run from a checkout
sys.path.insert(0, str(Path(__file__).parent / "src"))

from sweeper.board import Board, BoardConfig, ConfigurationError, DIFFICULTIES
from sweeper.session import ConsoleSession, choose_difficulty


def build_config(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> Optional[BoardConfig]:
    """
    Pick a preset or build a custom configuration from the arguments.

    Returns None if the player closed input at the difficulty prompt.
    """
    custom = (args.rows, args.cols, args.mines)
    if any(value is not None for value in custom):
        if any(value is None for value in custom):
            parser.error("--rows, --cols and --mines must be given together")
        try:
            return BoardConfig(args.rows, args.cols, args.mines)
        except ConfigurationError as exc:
            parser.error(str(exc))

    if args.difficulty is not None:
        return DIFFICULTIES[args.difficulty]
    return choose_difficulty(input_fn=input, output_fn=print)


def play(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Play one game in the console."""
    config = build_config(args, parser)
    if config is None:
        return 0
    rng = random.Random(args.seed) if args.seed is not None else None
    board = Board(config, rng=rng)

    ConsoleSession(board, input_fn=input, output_fn=print).run()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Console Minesweeper")
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine debug messages"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--difficulty",
        type=int,
        choices=sorted(DIFFICULTIES),
        help="1 = easy, 2 = intermediate, 3 = advanced (prompted if omitted)",
    )
    play_parser.add_argument("--rows", type=int, help="Custom board rows")
    play_parser.add_argument("--cols", type=int, help="Custom board columns")
    play_parser.add_argument("--mines", type=int, help="Custom mine count")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the mine layout"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return play(args, parser)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
