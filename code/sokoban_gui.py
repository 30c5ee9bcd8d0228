"""
Sokoban game with a tile-based graphical interface.

Usage:
    python sokoban_gui.py [-a ASSETS] [-t TILESIZE] [-l LOGLEVEL]

Keys: WASD or arrows to move, U or Z to undo, R to reset, Esc to quit.
Tile images (wall.png, target.png, box.png, box_on_target.png, box_on_targetN.png, player.png) are read from the
assets folder when present; missing images are drawn as coloured shapes.

Dependencies:
- Python 3.10+
- Pillow library
- NumPy library
"""

import argparse
import logging
import sys
import tkinter as tk

from game.level import DEFAULT_LEVEL, LevelError
from game.puzzle_state import PuzzleState
from gui.helpers import Settings
from gui.root_window import RootWindow


ARGPARSER = argparse.ArgumentParser(
    prog="python sokoban_gui.py",
    description="Play Sokoban in a window.")

ARGPARSER.add_argument("-a", "--assets", type=str, metavar="FOLDER", default=Settings.assets_folder, help="Folder with tile images (default 'assets').")
ARGPARSER.add_argument("-t", "--tilesize", type=int, metavar="PIXELS", default=Settings.tile_size, help="Size of one tile in pixels (default 64).")
ARGPARSER.add_argument("-l", "--loglevel", type=str, metavar="LEVEL", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default WARNING).")


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

    settings = Settings()
    settings.assets_folder = args.assets
    settings.tile_size = args.tilesize

    root = tk.Tk()
    RootWindow(root, state, settings)
    root.mainloop()


if __name__ == '__main__':
    main()
