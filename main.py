# main.py

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Literal, Optional, Tuple

from board import MIN_SIZE, Board, InvalidConfigurationError, MoveResult

logger = logging.getLogger(__name__)

Outcome = Literal["win", "loss", "quit"]

QUIT_WORDS = {"q", "quit", "exit"}


# ---------------------------------------------------------------------------
# Helper functions for user input
# ---------------------------------------------------------------------------

def ask_board_size() -> int:
    """Prompt until the user enters an integer size of at least MIN_SIZE."""
    while True:
        raw = input(f"Enter board size (minimum {MIN_SIZE}): ").strip()
        try:
            size = int(raw)
        except ValueError:
            print("Please enter an integer.")
            continue
        if size < MIN_SIZE:
            print(f"Board size must be at least {MIN_SIZE}.")
            continue
        return size


def parse_coordinates(user_input: str) -> Optional[Tuple[int, int]]:
    """
    Parse a move string like '3 4' into (x, y), both 1-based.

    Returns None if the user asked to quit.

    Raises ValueError on bad input.
    """
    tokens = user_input.split()
    if not tokens:
        raise ValueError("Empty input.")

    if len(tokens) == 1 and tokens[0].lower() in QUIT_WORDS:
        return None

    if len(tokens) != 2:
        raise ValueError("Format must be: 'x y' (or 'q' to quit).")

    try:
        x = int(tokens[0])
        y = int(tokens[1])
    except ValueError:
        raise ValueError("Coordinates must be integers.")

    return x, y


# ---------------------------------------------------------------------------
# Game setup
# ---------------------------------------------------------------------------

def create_board(size: Optional[int] = None, seed: Optional[int] = None) -> Board:
    """Build a board, asking for the size until a valid one is given."""
    rng = random.Random(seed) if seed is not None else random.Random()
    while True:
        if size is None:
            size = ask_board_size()
        try:
            return Board(size, rng=rng)
        except InvalidConfigurationError as exc:
            print(exc)
            size = None


# ---------------------------------------------------------------------------
# Game loop
# ---------------------------------------------------------------------------

def run_game(board: Board) -> Outcome:
    print("Welcome to Minesweeper!")
    print("Enter coordinates as 'x y' (1-based indexing), or 'q' to quit")
    logger.info("Starting %dx%d game with %d mines", board.size, board.size, board.num_mines)

    while True:
        print(board.render())

        user_input = input("Enter coordinates: ")
        try:
            move = parse_coordinates(user_input)
        except ValueError as exc:
            print(f"Invalid move: {exc}")
            continue

        if move is None:
            print("Goodbye!")
            logger.info("Player quit")
            return "quit"

        x, y = move
        result = board.make_move(x, y)

        if result is MoveResult.OUT_OF_BOUNDS:
            print(f"Cell ({x}, {y}) is out of bounds.")
            logger.debug("Rejected out-of-bounds move (%d, %d)", x, y)
            continue

        if result is MoveResult.HIT_MINE:
            print("\nGame Over! You hit a mine!")
            print(board.render_all())
            logger.info("Lost on (%d, %d)", x, y)
            return "loss"

        if board.check_win():
            print("\nCongratulations! You won!")
            print(board.render_all())
            logger.info("Won after revealing %d cells", board.revealed_count())
            return "win"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def board_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid board size: {value!r}")
    if size < MIN_SIZE:
        raise argparse.ArgumentTypeError(f"board size must be at least {MIN_SIZE}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal.")
    parser.add_argument('--size', type=board_size, default=None,
                        help=f'Board side length (>= {MIN_SIZE}); prompts if omitted')
    parser.add_argument('--seed', type=int, default=-1,
                        help='RNG seed for mine placement; <0 uses OS entropy')
    parser.add_argument('--log-level', type=str.upper, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Diagnostic log level (written to stderr)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        board = create_board(args.size, seed=(None if args.seed < 0 else args.seed))
        run_game(board)
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
