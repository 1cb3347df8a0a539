#!/usr/bin/env python3
"""
Minesweeper board demo.

Usage:
    python main.py [--width W] [--height H] [--mines N] [--seed S]
                   [--reveal INDEX ...] [--debug] [--verbose]
"""
import argparse
import logging
import sys

from mines import Board, BoardError, InvalidConfiguration


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build a Minesweeper board, reveal tiles and print it"
    )
    parser.add_argument("--width", type=int, default=9, help="Number of columns")
    parser.add_argument("--height", type=int, default=9, help="Number of rows")
    parser.add_argument("--mines", type=int, default=20, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Fix the mine layout")
    parser.add_argument(
        "--reveal",
        type=int,
        action="append",
        metavar="INDEX",
        help="Tile index to reveal (repeatable, default: 0)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Also print the full mine layout"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the demo and return the process exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        board = Board.new(args.width, args.height, args.mines, seed=args.seed)
    except InvalidConfiguration as exc:
        print(f"Invalid board: {exc}", file=sys.stderr)
        return 2

    for index in args.reveal or [0]:
        try:
            board.reveal_tile(index)
        except BoardError as exc:
            print(f"Cannot reveal {index}: {exc}", file=sys.stderr)
            return 1
        if board.is_mine(index):
            print(f"Tile {index} was a mine")

    print(board)
    if args.debug:
        print()
        print(board.debug_view())
    return 0


if __name__ == "__main__":
    sys.exit(main())
