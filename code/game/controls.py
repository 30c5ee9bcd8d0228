from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Dict, Optional

from game.puzzle_state import PuzzleState
from game.tiles import Direction


logger = logging.getLogger(__name__)


class Action(Enum):
    MOVE = 0
    UNDO = 1
    RESET = 2
    QUIT = 3


@dataclass(frozen=True)
class Command:
    """
    A player command. `direction` is only set for `Action.MOVE`.
    """
    action: Action
    direction: Optional[Direction] = None

    def to_string(self) -> str:
        if self.action == Action.MOVE:
            return f"move {self.direction.to_string()}"
        return self.action.name.lower()


KEY_BINDINGS: Dict[str, Command] = {
    "w": Command(Action.MOVE, Direction.UP),
    "up": Command(Action.MOVE, Direction.UP),
    "s": Command(Action.MOVE, Direction.DOWN),
    "down": Command(Action.MOVE, Direction.DOWN),
    "a": Command(Action.MOVE, Direction.LEFT),
    "left": Command(Action.MOVE, Direction.LEFT),
    "d": Command(Action.MOVE, Direction.RIGHT),
    "right": Command(Action.MOVE, Direction.RIGHT),
    "u": Command(Action.UNDO),
    "z": Command(Action.UNDO),
    "r": Command(Action.RESET),
    "escape": Command(Action.QUIT),
}

KEY_HELP: str = "WASD/Arrows: move  U/Z: undo  R: reset  Esc: quit"


def command_for_key(key: str) -> Optional[Command]:
    """
    Return the command bound to a key identifier (a Tk keysym such as "Left" or "w"), or None if the key is unbound.
    """
    return KEY_BINDINGS.get(key.lower())


def dispatch(state: PuzzleState, command: Command) -> bool:
    """
    Apply `command` to `state`. Return True if the front end should quit.
    """
    logger.debug(f"Dispatching {command.to_string()}.")
    match command.action:
        case Action.MOVE:
            state.move(command.direction)
        case Action.UNDO:
            state.undo()
        case Action.RESET:
            state.reset()
        case Action.QUIT:
            return True
    return False
