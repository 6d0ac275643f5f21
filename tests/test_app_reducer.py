from __future__ import annotations

import pytest

from conftest import DENSE_CELLS, make_state, run_actions

from grid_engine.actions import (
    Action,
    Direction,
    ShiftDirection,
    create_clear_column_at,
    create_clear_grid,
    create_clear_row_at,
    create_delete_cell,
    create_delete_column,
    create_delete_row,
    create_fill_column_at,
    create_fill_row_at,
    create_insert_cell,
    create_insert_column,
    create_insert_row,
    create_move_cursor_by_cell,
    create_move_cursor_to,
    create_put_value,
    create_redo,
    create_set_grid,
    create_undo,
)
from grid_engine.grid import SEED_CELLS, Cursor, make_empty_cells
from grid_engine.grid.cells import read_column
from grid_engine.history import AppState, app_reducer, initial_state, squash_redo_stack

LETTERS = tuple("abcdefghij")

UNDOABLE_ACTIONS: list[Action] = [
    create_clear_grid(),
    create_set_grid(DENSE_CELLS),
    create_put_value("X"),
    create_put_value(""),
    create_insert_cell(ShiftDirection.HORIZONTAL),
    create_insert_cell(ShiftDirection.VERTICAL),
    create_insert_row(),
    create_insert_column(),
    create_delete_cell(ShiftDirection.HORIZONTAL),
    create_delete_cell(ShiftDirection.VERTICAL),
    create_delete_row(),
    create_delete_column(),
    create_fill_row_at(0, LETTERS),
    create_fill_row_at(4, LETTERS),
    create_fill_column_at(0, LETTERS),
    create_fill_column_at(3, LETTERS),
    create_clear_row_at(0),
    create_clear_row_at(4),
    create_clear_column_at(0),
    create_clear_column_at(3),
]

START_CELLS = {
    "seed": SEED_CELLS,
    "dense": DENSE_CELLS,
    "empty": make_empty_cells(),
}


@pytest.mark.parametrize("cells_name", sorted(START_CELLS))
@pytest.mark.parametrize("action", UNDOABLE_ACTIONS, ids=lambda a: a.describe())
def test_undo_then_redo_round_trips(cells_name: str, action: Action) -> None:
    before = make_state(cells=START_CELLS[cells_name])

    after = app_reducer(before, action)
    undone = app_reducer(after, create_undo())
    redone = app_reducer(undone, create_redo())

    assert undone.grid == before.grid
    assert redone.grid == after.grid
    assert redone.redo_stack == ()


@pytest.mark.parametrize(("row", "column"), [(0, 0), (9, 9), (0, 9), (9, 0)])
def test_round_trip_at_grid_corners(row: int, column: int) -> None:
    for action in UNDOABLE_ACTIONS:
        before = make_state(row, column, cells=DENSE_CELLS)
        after = app_reducer(before, action)
        assert app_reducer(after, create_undo()).grid == before.grid


def test_undo_with_empty_history_is_noop() -> None:
    state = initial_state()

    assert app_reducer(state, create_undo()) is state


def test_redo_with_empty_redo_stack_is_noop(seed_state: AppState) -> None:
    state = app_reducer(seed_state, create_put_value("X"))

    assert app_reducer(state, create_redo()) is state


def test_undo_when_history_fully_consumed_is_noop(seed_state: AppState) -> None:
    state = run_actions(seed_state, [create_put_value("X"), create_undo()])

    assert len(state.undo_stack) == len(state.redo_stack)
    assert app_reducer(state, create_undo()) is state


def test_undo_keeps_undo_stack_and_grows_redo_stack(seed_state: AppState) -> None:
    state = run_actions(seed_state, [create_put_value("X"), create_insert_row()])

    undone = app_reducer(state, create_undo())

    assert undone.undo_stack == state.undo_stack
    assert len(undone.redo_stack) == 1


def test_navigation_is_not_recorded(seed_state: AppState) -> None:
    state = run_actions(
        seed_state,
        [
            create_move_cursor_by_cell(Direction.RIGHT),
            create_move_cursor_by_cell(Direction.DOWN),
        ],
    )

    assert state.undo_stack == ()
    assert state.cursor == Cursor(5, 4)


def test_put_value_scenario(seed_state: AppState) -> None:
    state = app_reducer(seed_state, create_put_value("X"))
    assert state.cells[4][3] == "X"

    state = app_reducer(state, create_undo())
    assert state.cells[4][3] == "o"
    assert state.cursor == Cursor(4, 3)

    state = app_reducer(state, create_redo())
    assert state.cells[4][3] == "X"


def test_insert_column_twice_scenario(seed_state: AppState) -> None:
    once = app_reducer(seed_state, create_insert_column())
    twice = app_reducer(once, create_insert_column())

    undone_once = app_reducer(twice, create_undo())
    assert undone_once.cells == once.cells

    undone_twice = app_reducer(undone_once, create_undo())
    assert undone_twice.cells == SEED_CELLS


def test_insert_column_restores_non_blank_last_column() -> None:
    cells = app_reducer(make_state(), create_fill_column_at(9, LETTERS)).cells
    state = make_state(cells=cells)

    inserted = app_reducer(state, create_insert_column())
    assert read_column(inserted.cells, 9) == read_column(SEED_CELLS, 8)

    undone = app_reducer(inserted, create_undo())
    assert read_column(undone.cells, 9) == LETTERS
    assert undone.cells == cells


def test_clear_row_on_blank_row_records_empty_entry(seed_state: AppState) -> None:
    state = app_reducer(seed_state, create_clear_row_at(0))

    assert state.undo_stack == ((),)


def test_squash_after_undo_keeps_every_state_reachable(seed_state: AppState) -> None:
    s0 = seed_state
    s1 = app_reducer(s0, create_put_value("X"))
    s2 = run_actions(s1, [create_move_cursor_by_cell(Direction.RIGHT), create_put_value("Y")])
    s3 = app_reducer(s2, create_insert_column())

    state = run_actions(s3, [create_undo(), create_undo()])
    assert state.cells == s1.cells
    assert len(state.redo_stack) == 2

    s4 = app_reducer(state, create_put_value("Z"))
    assert s4.redo_stack == ()
    # Three recorded edits, the squashed redo entry, and the new one.
    assert len(s4.undo_stack) == 5

    expected = [s1.cells, s3.cells, s2.cells, s1.cells, s0.cells]
    state = s4
    for cells in expected:
        state = app_reducer(state, create_undo())
        assert state.cells == cells

    assert app_reducer(state, create_undo()) is state


def test_squash_concatenates_redo_entries_top_first() -> None:
    first = (create_put_value("a"),)
    second = (create_put_value("b"), create_put_value("c"))

    assert squash_redo_stack((first, second)) == (second + first,)
    assert squash_redo_stack(()) == ()


def test_redo_after_squash_is_noop(seed_state: AppState) -> None:
    state = run_actions(
        seed_state, [create_put_value("X"), create_undo(), create_put_value("Y")]
    )

    assert app_reducer(state, create_redo()) is state


def test_history_snapshots_are_shared_not_copied(seed_state: AppState) -> None:
    state = app_reducer(seed_state, create_set_grid(DENSE_CELLS))

    (entry,) = state.undo_stack
    assert entry == (create_clear_grid(),)
    assert state.cells is not seed_state.cells
    assert seed_state.cells == SEED_CELLS


def test_multi_step_undo_then_redo_walks_history_in_order(dense_state: AppState) -> None:
    steps: list[tuple[Action, ...]] = [
        (create_insert_row(),),
        (create_move_cursor_to(2, 7), create_delete_cell(ShiftDirection.VERTICAL)),
        (create_move_cursor_by_cell(Direction.LEFT), create_insert_column()),
        (create_move_cursor_by_cell(Direction.DOWN), create_put_value("Q")),
    ]

    # Grid just before each edit, and just after it.
    before: list[AppState] = []
    after: list[AppState] = []
    state = dense_state
    for *moves, edit in steps:
        state = run_actions(state, moves)
        before.append(state)
        state = app_reducer(state, edit)
        after.append(state)
    top = state

    for expected in reversed(before):
        state = app_reducer(state, create_undo())
        assert state.grid == expected.grid
    assert state.grid == dense_state.grid
    assert len(state.redo_stack) == len(steps)

    for expected in after:
        state = app_reducer(state, create_redo())
        assert state.grid == expected.grid
    assert state.grid == top.grid
    assert state.redo_stack == ()
    assert state.undo_stack == top.undo_stack


def test_history_view_mirrors_stacks(seed_state: AppState) -> None:
    state = run_actions(seed_state, [create_put_value("X"), create_insert_row(), create_undo()])

    history = state.history

    assert history.undo_stack is state.undo_stack
    assert history.redo_stack is state.redo_stack
    assert len(history.undo_stack) == 2
    assert len(history.redo_stack) == 1
