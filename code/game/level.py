from __future__ import annotations
from collections import deque
from dataclasses import dataclass
import logging
from typing import List, Sequence, Set, Tuple

from game.tiles import Position, Tile


logger = logging.getLogger(__name__)

DEFAULT_LEVEL: Tuple[str, ...] = (
    "########",
    "#  . . #",
    "# $    #",
    "#      #",
    "#  $ @ #",
    "#      #",
    "########",
)


class LevelError(ValueError):
    """
    Raised when a level definition is malformed.
    """


@dataclass(frozen=True)
class Level:
    """
    Data class representing a validated level definition.

    Positions are (x, y) with x the column and y the row.
    """
    rows: Tuple[str, ...]
    player: Position
    boxes: Tuple[Position, ...]
    targets: Tuple[Position, ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])


class LevelParser:
    """
    Parse a level in text representation into a Level object.
    """

    @staticmethod
    def from_lines(lines: Sequence[str]) -> Level:
        """
        Validate the given lines and return a Level.

        Rows must be non-empty and of equal length, use only the Sokoban symbols, contain exactly one
        player and as many boxes as targets, and the area reachable by the player must be enclosed by walls.
        """
        rows = tuple(lines)
        if not rows or not rows[0]:
            raise LevelError("Level does not contain any cells.")

        width = len(rows[0])
        player: List[Position] = []
        boxes: List[Position] = []
        targets: List[Position] = []

        for y, row in enumerate(rows):
            if len(row) != width:
                raise LevelError(f"Row {y} has length {len(row)}, expected {width}.")
            for x, ch in enumerate(row):
                if ch not in Tile.symbols():
                    raise LevelError(f"Unknown symbol {ch!r} at {(x, y)}.")
                if ch in Tile.player_symbols():
                    player.append((x, y))
                if ch in Tile.box_symbols():
                    boxes.append((x, y))
                if ch in Tile.target_symbols():
                    targets.append((x, y))

        if not player:
            raise LevelError("Level does not contain a player.")
        if len(player) > 1:
            raise LevelError(f"Level contains more than one player (at {player[0]} and {player[1]}).")
        if not boxes:
            raise LevelError("Level does not contain any boxes.")
        if len(boxes) != len(targets):
            raise LevelError(f"Level has {len(boxes)} boxes but {len(targets)} targets.")

        LevelParser.__check_enclosed(rows, player[0])

        logger.debug(f"Parsed level {width}x{len(rows)} with {len(boxes)} boxes.")
        return Level(rows=rows, player=player[0], boxes=tuple(boxes), targets=tuple(targets))

    @staticmethod
    def level_to_lines(level: Level) -> List[str]:
        """
        Convert a Level back to its text representation.
        """
        return list(level.rows)

    @staticmethod
    def __check_enclosed(rows: Tuple[str, ...], start: Position) -> None:
        # Flood fill over non-wall cells: every cell a player or box can ever occupy must be inside the walls.
        height, width = len(rows), len(rows[0])
        seen: Set[Position] = {start}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            if x == 0 or y == 0 or x == width - 1 or y == height - 1:
                raise LevelError(f"Level is not enclosed by walls, cell {(x, y)} is reachable from the player.")
            for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
                if (nx, ny) not in seen and rows[ny][nx] != Tile.WALL.value:
                    seen.add((nx, ny))
                    queue.append((nx, ny))
