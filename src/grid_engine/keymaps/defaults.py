"""Built-in key bindings for the grid editor."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from grid_engine.actions import (
    Action,
    Direction,
    ShiftDirection,
    create_clear_grid,
    create_delete_cell,
    create_delete_column,
    create_delete_row,
    create_insert_cell,
    create_insert_column,
    create_insert_row,
    create_move_cursor_by_cell,
    create_move_cursor_to_edge,
    create_put_value,
    create_redo,
    create_undo,
)

from .models import ActionRef, Binding, KeyStroke
from .registry import TEXT_ACTION_ID, KeymapRegistry


def _always(factory: Callable[[], Action]) -> Callable[[KeyStroke], Action]:
    def handler(stroke: KeyStroke) -> Action:
        del stroke
        return factory()

    return handler


def _put_text(stroke: KeyStroke) -> Optional[Action]:
    # Space clears the cell.
    text = stroke.text or ""
    return create_put_value("" if text == " " else text)


def _ref(action_id: str, factory: Callable[[], Action], description: str) -> ActionRef:
    return ActionRef(id=action_id, handler=_always(factory), description=description)


DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(id=TEXT_ACTION_ID, handler=_put_text, description="Write typed character"),
    _ref("edit.clear_cell", lambda: create_put_value(""), "Clear the cursor cell"),
    _ref("cursor.left", lambda: create_move_cursor_by_cell(Direction.LEFT), "Move left"),
    _ref("cursor.right", lambda: create_move_cursor_by_cell(Direction.RIGHT), "Move right"),
    _ref("cursor.up", lambda: create_move_cursor_by_cell(Direction.UP), "Move up"),
    _ref("cursor.down", lambda: create_move_cursor_by_cell(Direction.DOWN), "Move down"),
    _ref("cursor.edge_left", lambda: create_move_cursor_to_edge(Direction.LEFT), "Jump to first column"),
    _ref("cursor.edge_right", lambda: create_move_cursor_to_edge(Direction.RIGHT), "Jump to last column"),
    _ref("cursor.edge_up", lambda: create_move_cursor_to_edge(Direction.UP), "Jump to first row"),
    _ref("cursor.edge_down", lambda: create_move_cursor_to_edge(Direction.DOWN), "Jump to last row"),
    _ref("grid.insert_row", create_insert_row, "Insert row at cursor"),
    _ref("grid.insert_column", create_insert_column, "Insert column at cursor"),
    _ref(
        "grid.insert_cell_right",
        lambda: create_insert_cell(ShiftDirection.HORIZONTAL),
        "Insert cell, shifting the row right",
    ),
    _ref(
        "grid.insert_cell_down",
        lambda: create_insert_cell(ShiftDirection.VERTICAL),
        "Insert cell, shifting the column down",
    ),
    _ref("grid.delete_row", create_delete_row, "Delete row at cursor"),
    _ref("grid.delete_column", create_delete_column, "Delete column at cursor"),
    _ref(
        "grid.delete_cell_left",
        lambda: create_delete_cell(ShiftDirection.HORIZONTAL),
        "Delete cell, shifting the row left",
    ),
    _ref(
        "grid.delete_cell_up",
        lambda: create_delete_cell(ShiftDirection.VERTICAL),
        "Delete cell, shifting the column up",
    ),
    _ref("grid.clear", create_clear_grid, "Reset the grid"),
    _ref("history.undo", create_undo, "Undo"),
    _ref("history.redo", create_redo, "Redo"),
)


def _bind(binding_id: str, token: str, action_id: str) -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke.parse(token), action_id=action_id)


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("arrow.left", "left", "cursor.left"),
    _bind("arrow.right", "right", "cursor.right"),
    _bind("arrow.up", "up", "cursor.up"),
    _bind("arrow.down", "down", "cursor.down"),
    _bind("edge.left", "ctrl+left", "cursor.edge_left"),
    _bind("edge.right", "ctrl+right", "cursor.edge_right"),
    _bind("edge.up", "ctrl+up", "cursor.edge_up"),
    _bind("edge.down", "ctrl+down", "cursor.edge_down"),
    _bind("edge.home", "home", "cursor.edge_left"),
    _bind("edge.end", "end", "cursor.edge_right"),
    _bind("edge.pageup", "pageup", "cursor.edge_up"),
    _bind("edge.pagedown", "pagedown", "cursor.edge_down"),
    _bind("insert.row", "insert", "grid.insert_row"),
    _bind("insert.column", "alt+insert", "grid.insert_column"),
    _bind("insert.cell_right", "ctrl+insert", "grid.insert_cell_right"),
    _bind("insert.cell_down", "shift+insert", "grid.insert_cell_down"),
    _bind("delete.row", "delete", "grid.delete_row"),
    _bind("delete.column", "alt+delete", "grid.delete_column"),
    _bind("delete.cell_left", "ctrl+delete", "grid.delete_cell_left"),
    _bind("delete.cell_up", "shift+delete", "grid.delete_cell_up"),
    _bind("edit.backspace", "backspace", "edit.clear_cell"),
    _bind("grid.clear", "ctrl+n", "grid.clear"),
    _bind("history.undo", "ctrl+z", "history.undo"),
    _bind("history.redo", "ctrl+y", "history.redo"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and bindings on ``registry``."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
