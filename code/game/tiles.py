from __future__ import annotations
from enum import Enum
import numpy as np
from typing import List, Tuple


Position = Tuple[int, int]


class Tile(Enum):
    """
    Enum representing the symbols a cell of a Sokoban grid can hold.
    """
    WALL = "#"
    FLOOR = " "
    TARGET = "."
    BOX = "$"
    BOX_ON_TARGET = "*"
    PLAYER = "@"
    PLAYER_ON_TARGET = "+"

    @staticmethod
    def symbols() -> List[str]:
        return [tile.value for tile in Tile]

    @staticmethod
    def box_symbols() -> List[str]:
        return [Tile.BOX.value, Tile.BOX_ON_TARGET.value]

    @staticmethod
    def player_symbols() -> List[str]:
        return [Tile.PLAYER.value, Tile.PLAYER_ON_TARGET.value]

    @staticmethod
    def target_symbols() -> List[str]:
        """
        Return the symbols whose underlying terrain is a target.
        """
        return [Tile.TARGET.value, Tile.BOX_ON_TARGET.value, Tile.PLAYER_ON_TARGET.value]

    @staticmethod
    def terrain(on_target: bool) -> Tile:
        return Tile.TARGET if on_target else Tile.FLOOR

    @staticmethod
    def box(on_target: bool) -> Tile:
        return Tile.BOX_ON_TARGET if on_target else Tile.BOX

    @staticmethod
    def player(on_target: bool) -> Tile:
        return Tile.PLAYER_ON_TARGET if on_target else Tile.PLAYER


class Direction(Enum):
    """
    Enum representing movement directions.
    """
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    def to_string(self) -> str:
        """
        Return a string name representing the direction.
        """
        match self:
            case Direction.UP:
                return "up"
            case Direction.DOWN:
                return "down"
            case Direction.LEFT:
                return "left"
            case Direction.RIGHT:
                return "right"

    def to_vector(self) -> np.ndarray:
        """
        Return the unit displacement (dx, dy) for the direction, x being the column and y the row.

        The returned object is a NumPy array to simplify vector arithmetic.
        """
        match self:
            case Direction.UP:
                return np.array([0, -1])
            case Direction.DOWN:
                return np.array([0, 1])
            case Direction.LEFT:
                return np.array([-1, 0])
            case Direction.RIGHT:
                return np.array([1, 0])

    def step(self, position: Position) -> Position:
        """
        Return the position one cell away from `position` in this direction.
        """
        x, y = np.add(position, self.to_vector())
        return (int(x), int(y))
