import pytest

from game.level import DEFAULT_LEVEL
from game.puzzle_state import PuzzleState


@pytest.fixture
def state():
    """Puzzle state on the built-in level."""
    return PuzzleState.from_lines(DEFAULT_LEVEL)
