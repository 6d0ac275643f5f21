"""Top-level reducer composing the grid with undo/redo history."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Tuple

from grid_engine.actions import Action, ActionType, Cells
from grid_engine.grid import INITIAL_GRID, Cursor, Grid, grid_reducer
from grid_engine.runtime import telemetry

from .undo import UndoActions, UndoState, calculate_undo_actions, is_undoable_action

LOGGER_NAME = "grid_engine.history"


@dataclass(frozen=True, slots=True)
class AppState:
    """Grid plus history; replaced wholesale on every dispatch."""

    cursor: Cursor = field(default_factory=Cursor)
    cells: Cells = INITIAL_GRID.cells
    undo_stack: Tuple[UndoActions, ...] = ()
    redo_stack: Tuple[UndoActions, ...] = ()

    @property
    def grid(self) -> Grid:
        return Grid(cursor=self.cursor, cells=self.cells)

    @property
    def history(self) -> UndoState:
        return UndoState(undo_stack=self.undo_stack, redo_stack=self.redo_stack)

    def can_undo(self) -> bool:
        return len(self.undo_stack) > len(self.redo_stack)

    def can_redo(self) -> bool:
        return bool(self.redo_stack)


def initial_state() -> AppState:
    return AppState(cursor=INITIAL_GRID.cursor, cells=INITIAL_GRID.cells)


def _with_grid(state: AppState, grid: Grid) -> AppState:
    return replace(state, cursor=grid.cursor, cells=grid.cells)


def perform_undo_actions(
    grid: Grid, actions: Iterable[Action], *, calc_redo: bool
) -> Tuple[Grid, UndoActions]:
    """Apply ``actions`` in order, optionally computing how to reverse them.

    Each action's inverse is computed against the grid just before it runs.
    Reversing the whole group means running those inverses last-first, so
    the per-action groups are concatenated in reverse order.
    """

    redo_groups: List[UndoActions] = []
    for action in actions:
        if calc_redo:
            redo_groups.append(calculate_undo_actions(grid, action))
        grid = grid_reducer(grid, action)

    redo_actions: UndoActions = tuple(
        action for group in reversed(redo_groups) for action in group
    )
    return grid, redo_actions


def squash_redo_stack(redo_stack: Tuple[UndoActions, ...]) -> Tuple[UndoActions, ...]:
    """Fold pending redo entries into a single undo entry.

    Redo entries are replayed top-first, so the combined entry walks the
    stack from the top down; applying it returns to the state before the
    undo run began. An empty stack yields no entry.
    """

    if not redo_stack:
        return ()
    return (tuple(action for entry in reversed(redo_stack) for action in entry),)


def _undo(state: AppState) -> AppState:
    if not state.can_undo():
        telemetry.record_event(
            "history.undo_skipped", level="debug", logger_name=LOGGER_NAME
        )
        return state

    # Undo leaves undo_stack intact; the entry to replay sits below the ones
    # already matched by redo entries.
    index = len(state.undo_stack) - 1 - len(state.redo_stack)
    grid, redo_actions = perform_undo_actions(
        state.grid, state.undo_stack[index], calc_redo=True
    )
    telemetry.record_event(
        "history.undo",
        level="debug",
        data={"index": index, "redo_size": len(redo_actions)},
        logger_name=LOGGER_NAME,
    )
    return replace(
        _with_grid(state, grid), redo_stack=state.redo_stack + (redo_actions,)
    )


def _redo(state: AppState) -> AppState:
    if not state.can_redo():
        telemetry.record_event(
            "history.redo_skipped", level="debug", logger_name=LOGGER_NAME
        )
        return state

    # The matching undo entry is still on undo_stack, so nothing to compute.
    grid, _ = perform_undo_actions(state.grid, state.redo_stack[-1], calc_redo=False)
    telemetry.record_event(
        "history.redo",
        level="debug",
        data={"remaining": len(state.redo_stack) - 1},
        logger_name=LOGGER_NAME,
    )
    return replace(_with_grid(state, grid), redo_stack=state.redo_stack[:-1])


def _record(state: AppState, action: Action) -> AppState:
    """Push the inverse of ``action`` and fold any abandoned redo entries.

    With ``U1..Un`` the entries undone just before ``action`` and ``R1..Rn``
    their redo entries, the undo stack becomes ``..., Un, ..., U1, RL, Ua``:
    ``Ua`` reverts ``action``, ``RL`` (all redo entries squashed) returns to
    the state before the undo run, and ``U1..Un`` replay that undo run again.
    """

    squashed = squash_redo_stack(state.redo_stack)
    if squashed:
        telemetry.record_event(
            "history.squash",
            level="debug",
            data={"entries": len(state.redo_stack), "actions": len(squashed[0])},
            logger_name=LOGGER_NAME,
        )
    return replace(
        state,
        undo_stack=state.undo_stack + squashed + (calculate_undo_actions(state.grid, action),),
        redo_stack=(),
    )


def app_reducer(state: AppState, action: Action) -> AppState:
    if action.type is ActionType.UNDO:
        return _undo(state)
    if action.type is ActionType.REDO:
        return _redo(state)

    if is_undoable_action(action):
        state = _record(state, action)
    return _with_grid(state, grid_reducer(state.grid, action))


__all__ = [
    "AppState",
    "initial_state",
    "perform_undo_actions",
    "squash_redo_stack",
    "app_reducer",
]
