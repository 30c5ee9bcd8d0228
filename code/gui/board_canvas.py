from PIL import Image, ImageTk
import tkinter as tk
from typing import Dict, List, Optional, Tuple

from game.puzzle_state import PuzzleState
from game.tiles import Tile
from gui.helpers import Settings
from gui.images import load_tile_images, resize_image, target_box_image_name


TILE_INSET = 2
TARGET_RADIUS = 8

WALL_COLOR = "#555555"
FLOOR_COLOR = "#ecf0f1"
TARGET_COLOR = "#f39c12"
BOX_COLOR = "#e67e22"
BOX_ON_TARGET_COLOR = "#27ae60"
PLAYER_COLOR = "#3498db"


class BoardCanvas:
    def __init__(self, parent, settings : Settings, state : PuzzleState):
        self._settings : Settings = settings
        self._canvas : tk.Canvas = tk.Canvas(
            parent,
            width=settings.window_width,
            height=settings.window_height,
            bg=settings.background_color,
            highlightthickness=0,
        )
        self._canvas.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        self._state : PuzzleState = state
        self._start_x, self._start_y = settings.board_offset(state.width, state.height)
        self._inner_size : int = settings.tile_size - 2 * TILE_INSET

        images : Dict[str, Image.Image] = load_tile_images(settings.assets_folder, len(state.target_positions))
        self._images : Dict[str, ImageTk.PhotoImage] = {
            name: resize_image(img, self._inner_size) for name, img in images.items()
        }
        self._item_ids : List[int] = []

    def get_canvas(self) -> tk.Canvas:
        return self._canvas

    def draw(self) -> None:
        for item in self._item_ids:
            self._canvas.delete(item)
        self._item_ids = []

        for y in range(self._state.height):
            for x in range(self._state.width):
                self.__draw_cell(x, y, self._state.tile_at((x, y)))

    def __draw_cell(self, x : int, y : int, tile : Tile) -> None:
        if tile == Tile.WALL:
            if not self.__draw_image(x, y, "wall"):
                self.__draw_square(x, y, WALL_COLOR)
            return

        self.__draw_square(x, y, FLOOR_COLOR)

        if tile in (Tile.TARGET, Tile.BOX_ON_TARGET, Tile.PLAYER_ON_TARGET):
            if not self.__draw_image(x, y, "target"):
                self.__draw_circle(x, y, TARGET_COLOR)

        if tile == Tile.BOX:
            if not self.__draw_image(x, y, "box"):
                self.__draw_square(x, y, BOX_COLOR)
        elif tile == Tile.BOX_ON_TARGET:
            if not self.__draw_image(x, y, self.__box_on_target_image(x, y)):
                self.__draw_square(x, y, BOX_ON_TARGET_COLOR)
        elif tile in (Tile.PLAYER, Tile.PLAYER_ON_TARGET):
            if not self.__draw_image(x, y, "player"):
                self.__draw_square(x, y, PLAYER_COLOR)

    def __box_on_target_image(self, x : int, y : int) -> str:
        # Each target may have its own box art, chosen by the target's row-major order.
        targets = self._state.target_positions
        if (x, y) in targets:
            name = target_box_image_name(targets.index((x, y)))
            if name in self._images:
                return name
        return "box_on_target"

    def __get_coords(self, x : int, y : int) -> Tuple[int, int]:
        sx = self._start_x + x * self._settings.tile_size + TILE_INSET
        sy = self._start_y + y * self._settings.tile_size + TILE_INSET
        return (sx, sy)

    def __draw_image(self, x : int, y : int, name : str) -> bool:
        image : Optional[ImageTk.PhotoImage] = self._images.get(name)
        if image is None:
            return False
        sx, sy = self.__get_coords(x, y)
        self._item_ids.append(self._canvas.create_image(sx, sy, anchor=tk.NW, image=image))
        return True

    def __draw_square(self, x : int, y : int, color : str) -> None:
        sx, sy = self.__get_coords(x, y)
        self._item_ids.append(self._canvas.create_rectangle(
            sx, sy, sx + self._inner_size, sy + self._inner_size, fill=color, outline=""
        ))

    def __draw_circle(self, x : int, y : int, color : str) -> None:
        sx, sy = self.__get_coords(x, y)
        cx = sx + self._inner_size // 2
        cy = sy + self._inner_size // 2
        self._item_ids.append(self._canvas.create_oval(
            cx - TARGET_RADIUS, cy - TARGET_RADIUS, cx + TARGET_RADIUS, cy + TARGET_RADIUS, fill=color, outline=""
        ))
