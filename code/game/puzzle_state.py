"""
Mutable state of one Sokoban level: the grid, the terrain it was loaded with, the player, and the undo history.

Positions are (x, y) with x the column and y the row. Illegal moves never raise, they leave the state untouched
and are only reported through the returned `MoveResult`.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import numpy as np
from typing import Callable, List, Optional, Sequence, Tuple

from game.level import DEFAULT_LEVEL, Level, LevelParser
from game.tiles import Direction, Position, Tile


logger = logging.getLogger(__name__)

Listener = Callable[["PuzzleState"], None]


class MoveResult(Enum):
    MOVED = 0
    PUSHED = 1
    BLOCKED = 2
    ALREADY_SOLVED = 3

    @property
    def succeeded(self) -> bool:
        return self in (MoveResult.MOVED, MoveResult.PUSHED)


@dataclass(frozen=True)
class HistoryRecord:
    """
    Enough information to reverse exactly one successful move.

    `box_from`, `box_to` and `box_was_on_target` are only set when the move pushed a box.
    """
    player: Position
    box_from: Optional[Position] = None
    box_to: Optional[Position] = None
    box_was_on_target: bool = False

    @property
    def is_push(self) -> bool:
        return self.box_from is not None


class PuzzleState:
    """
    Owns the grid of a single level and applies moves, undos and resets to it.

    Example:
        >>> state = PuzzleState()
        >>> state.move(Direction.LEFT)
        <MoveResult.MOVED: 0>
        >>> state.moves
        1
    """

    def __init__(self, level: Optional[Level] = None):
        self._level: Level = level if level is not None else LevelParser.from_lines(DEFAULT_LEVEL)
        self._original: np.ndarray = self.__to_grid(self._level.rows)
        self._original.flags.writeable = False
        self._targets: np.ndarray = np.isin(self._original, Tile.target_symbols())
        self._targets.flags.writeable = False

        self._grid: np.ndarray = self._original.copy()
        self._player: Position = self._level.player
        self._history: List[HistoryRecord] = []
        self._moves: int = 0
        self._pushes: int = 0
        self._solved: bool = False
        self._listeners: List[Listener] = []

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> PuzzleState:
        return cls(LevelParser.from_lines(lines))

    def move(self, direction: Direction) -> MoveResult:
        """
        Move the player one cell in `direction`, pushing a box in front of it if the cell beyond is free.
        """
        if self._solved:
            logger.debug(f"Ignoring move {direction.to_string()}: puzzle already solved.")
            return MoveResult.ALREADY_SOLVED

        dest = direction.step(self._player)
        if self.tile_at(dest) == Tile.WALL:
            logger.debug(f"Move {direction.to_string()} from {self._player} blocked by a wall.")
            return MoveResult.BLOCKED

        record = HistoryRecord(player=self._player)
        if self.tile_at(dest).value in Tile.box_symbols():
            beyond = direction.step(dest)
            if self.tile_at(beyond) == Tile.WALL or self.tile_at(beyond).value in Tile.box_symbols():
                logger.debug(f"Push {direction.to_string()} of box at {dest} blocked.")
                return MoveResult.BLOCKED

            record = HistoryRecord(
                player=self._player,
                box_from=dest,
                box_to=beyond,
                box_was_on_target=self.tile_at(dest) == Tile.BOX_ON_TARGET,
            )
            self.__set(dest, Tile.terrain(self.is_target(dest)))
            self.__set(beyond, Tile.box(self.is_target(beyond)))

        self._history.append(record)

        self.__set(self._player, Tile.terrain(self.is_target(self._player)))
        self.__set(dest, Tile.player(self.is_target(dest)))
        self._player = dest
        self._moves += 1
        if record.is_push:
            self._pushes += 1

        if self.is_solved():
            self._solved = True
            logger.info(f"Puzzle solved in {self._moves} moves and {self._pushes} pushes.")

        self.__notify()
        return MoveResult.PUSHED if record.is_push else MoveResult.MOVED

    def undo(self) -> bool:
        """
        Reverse the most recent successful move. Return False if there is nothing to undo.

        The solved status is always cleared, even when the restored grid still satisfies the win condition.
        """
        if not self._history:
            return False

        record = self._history.pop()
        self.__set(self._player, Tile.terrain(self.is_target(self._player)))
        if record.is_push:
            self.__set(record.box_to, Tile.terrain(self.is_target(record.box_to)))
            self.__set(record.box_from, Tile.box(record.box_was_on_target))
            self._pushes -= 1

        self.__set(record.player, Tile.player(self.is_target(record.player)))
        self._player = record.player
        self._moves -= 1
        self._solved = False

        self.__notify()
        return True

    def reset(self) -> None:
        """
        Restore the level as it was loaded and forget the history.
        """
        self._grid = self.__to_grid(self._level.rows)
        self._history.clear()
        self._moves = 0
        self._pushes = 0
        self._solved = False
        self._player = self.__find_player()
        logger.info("Puzzle reset.")
        self.__notify()

    def is_solved(self) -> bool:
        """
        Return True if every target is covered by a box, i.e. no `$` and no `.` is left on the grid.
        """
        return not np.isin(self._grid, [Tile.BOX.value, Tile.TARGET.value]).any()

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def tile_at(self, position: Position) -> Tile:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Position {position} is outside the {self.width}x{self.height} grid.")
        return Tile(self._grid[y, x])

    def is_target(self, position: Position) -> bool:
        """
        Return True if the terrain under `position` is a target, whatever currently stands on it.
        """
        x, y = position
        return bool(self._targets[y, x])

    @property
    def level(self) -> Level:
        return self._level

    @property
    def rows(self) -> List[str]:
        return ["".join(row) for row in self._grid]

    @property
    def width(self) -> int:
        return self._grid.shape[1]

    @property
    def height(self) -> int:
        return self._grid.shape[0]

    @property
    def player_position(self) -> Position:
        return self._player

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def pushes(self) -> int:
        return self._pushes

    @property
    def is_over(self) -> bool:
        return self._solved

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def box_count(self) -> int:
        return int(np.isin(self._grid, Tile.box_symbols()).sum())

    @property
    def boxes_on_targets(self) -> int:
        return int((self._grid == Tile.BOX_ON_TARGET.value).sum())

    @property
    def target_positions(self) -> Tuple[Position, ...]:
        return self._level.targets

    def __set(self, position: Position, tile: Tile) -> None:
        x, y = position
        self._grid[y, x] = tile.value

    def __find_player(self) -> Position:
        ys, xs = np.nonzero(np.isin(self._grid, Tile.player_symbols()))
        return (int(xs[0]), int(ys[0]))

    def __notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    @staticmethod
    def __to_grid(rows: Sequence[str]) -> np.ndarray:
        return np.array([list(row) for row in rows], dtype="<U1")
