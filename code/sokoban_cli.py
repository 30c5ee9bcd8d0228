"""
Sokoban game in the terminal. Reads key letters from standard input and prints the board after each line.

Usage (CLI):
    python sokoban_cli.py [-m MOVES] [-l LOGLEVEL]

Keys: w/a/s/d to move, u or z to undo, r to reset, q to quit.
With -m, the given keys are applied in order and the final board is printed.

Dependencies:
- Python 3.10+
- NumPy library
"""

import argparse
import logging
import sys
from typing import Iterable, TextIO

from game.controls import Action, Command, command_for_key, dispatch
from game.level import DEFAULT_LEVEL, LevelError
from game.puzzle_state import PuzzleState


QUIT_KEY = "q"

ARGPARSER = argparse.ArgumentParser(
    prog="python sokoban_cli.py",
    description="Play Sokoban in the terminal.")

ARGPARSER.add_argument("-m", "--moves", type=str, metavar="MOVES", default=None, help="Keys to apply non-interactively, e.g. 'aawd'.")
ARGPARSER.add_argument("-l", "--loglevel", type=str, metavar="LEVEL", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default WARNING).")


def print_board(state: PuzzleState, out: TextIO = sys.stdout) -> None:
    for row in state.rows:
        print(row, file=out)
    print(f"Moves: {state.moves}  Pushes: {state.pushes}  Boxes on targets: {state.boxes_on_targets}/{state.box_count}", file=out)
    if state.is_over:
        print("Solved!", file=out)


def play_keys(state: PuzzleState, keys: Iterable[str]) -> bool:
    """
    Apply each key to the state, ignoring unbound keys. Return True if a quit key was met.
    """
    for key in keys:
        command = Command(Action.QUIT) if key.lower() == QUIT_KEY else command_for_key(key)
        if command is None:
            continue
        if dispatch(state, command):
            return True
    return False


def main() -> None:
    args = ARGPARSER.parse_args()

    logging.basicConfig(
        level=args.loglevel,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        state = PuzzleState.from_lines(DEFAULT_LEVEL)
    except LevelError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.moves is not None:
        play_keys(state, args.moves)
        print_board(state)
        return

    print_board(state)
    for line in sys.stdin:
        if play_keys(state, line.strip()):
            break
        print_board(state)


if __name__ == "__main__":
    main()
