import random

import pytest

from game.level import DEFAULT_LEVEL
from game.puzzle_state import MoveResult, PuzzleState
from game.tiles import Direction, Tile


def count_players(rows):
    return sum(row.count("@") + row.count("+") for row in rows)


def count_boxes(rows):
    return sum(row.count("$") + row.count("*") for row in rows)


def test_initial_state(state):
    assert state.rows == list(DEFAULT_LEVEL)
    assert state.player_position == (5, 4)
    assert state.moves == 0
    assert state.pushes == 0
    assert state.box_count == 2
    assert state.boxes_on_targets == 0
    assert state.target_positions == ((3, 1), (5, 1))
    assert not state.is_over
    assert not state.is_solved()
    assert not state.can_undo


def test_simple_move(state):
    assert state.move(Direction.UP) == MoveResult.MOVED
    assert state.player_position == (5, 3)
    assert state.tile_at((5, 4)) == Tile.FLOOR
    assert state.tile_at((5, 3)) == Tile.PLAYER
    assert state.moves == 1
    assert state.pushes == 0


def test_player_on_target_keeps_target_when_leaving(state):
    state.move(Direction.UP)
    state.move(Direction.UP)
    assert state.move(Direction.UP) == MoveResult.MOVED
    assert state.tile_at((5, 1)) == Tile.PLAYER_ON_TARGET
    state.move(Direction.LEFT)
    assert state.tile_at((5, 1)) == Tile.TARGET
    assert state.tile_at((4, 1)) == Tile.PLAYER


def test_wall_blocks_move(state):
    state.move(Direction.RIGHT)
    before = state.rows
    assert state.move(Direction.RIGHT) == MoveResult.BLOCKED
    assert state.rows == before
    assert state.player_position == (6, 4)
    assert state.moves == 1
    assert not state.is_solved()


@pytest.mark.parametrize("direction", [Direction.UP, Direction.DOWN, Direction.LEFT])
def test_adjacent_walls_block(direction):
    state = PuzzleState.from_lines([
        "#####",
        "#@$.#",
        "#####",
    ])
    before = state.rows
    assert state.move(direction) == MoveResult.BLOCKED
    assert state.rows == before
    assert state.player_position == (1, 1)
    assert state.moves == 0
    assert not state.can_undo


def test_end_to_end_left_left(state):
    assert state.move(Direction.LEFT) == MoveResult.MOVED
    assert state.move(Direction.LEFT) == MoveResult.PUSHED
    assert state.player_position == (3, 4)
    assert state.tile_at((2, 4)) == Tile.BOX
    assert state.moves == 2
    assert state.pushes == 1
    assert state.box_count == 2


def test_box_stops_against_wall(state):
    for _ in range(3):
        state.move(Direction.LEFT)
    assert state.tile_at((1, 4)) == Tile.BOX
    assert state.move(Direction.LEFT) == MoveResult.BLOCKED
    assert state.moves == 3
    assert state.player_position == (2, 4)
    assert state.box_count == 2


def test_box_cannot_be_pushed_into_another_box():
    state = PuzzleState.from_lines([
        "#######",
        "#@$$..#",
        "#######",
    ])
    before = state.rows
    assert state.move(Direction.RIGHT) == MoveResult.BLOCKED
    assert state.rows == before
    assert state.moves == 0
    assert not state.can_undo


def test_push_onto_and_off_target():
    state = PuzzleState.from_lines([
        "#######",
        "#@$.  #",
        "#.$   #",
        "#######",
    ])
    assert state.move(Direction.RIGHT) == MoveResult.PUSHED
    assert state.rows[1] == "# @*  #"
    assert state.boxes_on_targets == 1
    assert state.move(Direction.RIGHT) == MoveResult.PUSHED
    assert state.rows[1] == "#  +$ #"
    assert state.boxes_on_targets == 0


def test_undo_restores_push_exactly():
    lines = [
        "#######",
        "#@*   #",
        "#.$   #",
        "#######",
    ]
    state = PuzzleState.from_lines(lines)
    assert state.move(Direction.RIGHT) == MoveResult.PUSHED
    assert state.rows[1] == "# +$  #"

    assert state.undo() is True
    assert state.rows == lines
    assert state.player_position == (1, 1)
    assert state.moves == 0
    assert state.pushes == 0
    assert state.box_count == 2


def test_undo_after_every_single_move_is_inverse(state):
    for direction in [Direction.LEFT, Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.UP, Direction.UP]:
        before = (state.rows, state.player_position, state.moves)
        if state.move(direction).succeeded:
            state.undo()
            assert (state.rows, state.player_position, state.moves) == before
            state.move(direction)


def test_undo_with_empty_history(state):
    assert state.undo() is False
    assert state.rows == list(DEFAULT_LEVEL)
    assert state.moves == 0


def test_win_detection_and_terminal_state():
    state = PuzzleState.from_lines([
        "#####",
        "#@$.#",
        "#####",
    ])
    assert state.move(Direction.RIGHT) == MoveResult.PUSHED
    assert state.rows[1] == "# @*#"
    assert state.is_solved()
    assert state.is_over

    before = state.rows
    assert state.move(Direction.LEFT) == MoveResult.ALREADY_SOLVED
    assert state.rows == before
    assert state.moves == 1

    assert state.undo() is True
    assert not state.is_over
    assert state.rows[1] == "#@$.#"


def test_undo_clears_solved_even_if_grid_still_solved():
    state = PuzzleState.from_lines([
        "#####",
        "#@ *#",
        "#####",
    ])
    assert state.is_solved()
    assert not state.is_over

    assert state.move(Direction.RIGHT) == MoveResult.MOVED
    assert state.is_over

    assert state.undo() is True
    assert state.is_solved()
    assert not state.is_over
    assert state.move(Direction.RIGHT) == MoveResult.MOVED


def test_reset_restores_initial_state(state):
    for direction in [Direction.LEFT, Direction.LEFT, Direction.UP, Direction.UP]:
        state.move(direction)
    state.reset()
    assert state.rows == list(DEFAULT_LEVEL)
    assert state.player_position == (5, 4)
    assert state.moves == 0
    assert state.pushes == 0
    assert not state.can_undo
    assert not state.is_over


def test_reset_from_solved_state():
    lines = [
        "#####",
        "#@$.#",
        "#####",
    ]
    state = PuzzleState.from_lines(lines)
    state.move(Direction.RIGHT)
    assert state.is_over
    state.reset()
    assert state.rows == lines
    assert not state.is_over
    assert state.move(Direction.RIGHT) == MoveResult.PUSHED


def test_random_play_keeps_invariants(state):
    rng = random.Random(1234)
    directions = list(Direction)
    for _ in range(500):
        roll = rng.random()
        if roll < 0.15:
            state.undo()
        elif roll < 0.17:
            state.reset()
        else:
            state.move(rng.choice(directions))
        rows = state.rows
        assert count_players(rows) == 1
        assert count_boxes(rows) == 2
        assert state.box_count == 2
        assert state.tile_at(state.player_position) in (Tile.PLAYER, Tile.PLAYER_ON_TARGET)
        assert state.is_solved() == (not any("$" in row or "." in row for row in rows))
        for x, y in state.target_positions:
            assert state.tile_at((x, y)) in (Tile.TARGET, Tile.BOX_ON_TARGET, Tile.PLAYER_ON_TARGET)


def test_original_layout_is_read_only(state):
    with pytest.raises(ValueError):
        state._original[0, 0] = " "


def test_tile_at_out_of_bounds(state):
    with pytest.raises(IndexError):
        state.tile_at((8, 0))
    with pytest.raises(IndexError):
        state.tile_at((0, -1))


def test_listeners_are_notified_on_changes_only(state):
    calls = []
    listener = calls.append
    state.add_listener(listener)

    state.move(Direction.LEFT)
    assert calls == [state]
    state.move(Direction.DOWN)
    state.move(Direction.DOWN)
    assert len(calls) == 2
    state.undo()
    state.reset()
    assert len(calls) == 4
    state.undo()
    assert len(calls) == 4

    state.remove_listener(listener)
    state.move(Direction.LEFT)
    assert len(calls) == 4
