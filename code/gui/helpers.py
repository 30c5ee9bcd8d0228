from __future__ import annotations
from typing import Optional, Tuple


class Settings:
    tile_size : int = 64
    window_width : int = 640
    window_height : int = 520
    background_color : str = "#2c3e50"
    assets_folder : Optional[str] = "assets"

    def board_offset(self, width : int, height : int) -> Tuple[int, int]:
        """
        Return the canvas coordinates of the top-left corner of a board of `width` x `height` tiles.
        """
        x = (self.window_width - width * self.tile_size) // 2
        y = (self.window_height - height * self.tile_size) // 2 + 20
        return (x, y)
