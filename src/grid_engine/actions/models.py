"""Tagged action variants understood by the grid reducers.

Every action is a frozen, slotted dataclass whose ``type`` class attribute
names its kind. Reducers dispatch on ``action.type`` through lookup tables,
so adding a kind means adding a variant here and an entry in each table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Tuple

Cells = Tuple[Tuple[str, ...], ...]


class ActionType(str, Enum):
    CLEAR_GRID = "ClearGrid"
    SET_GRID = "SetGrid"
    MOVE_CURSOR_BY_CELL = "MoveCursorByCell"
    MOVE_CURSOR_TO_EDGE = "MoveCursorToEdge"
    MOVE_CURSOR_TO = "MoveCursorTo"
    PUT_VALUE = "PutValue"
    INSERT_CELL = "InsertCell"
    INSERT_ROW = "InsertRow"
    INSERT_COLUMN = "InsertColumn"
    DELETE_CELL = "DeleteCell"
    DELETE_ROW = "DeleteRow"
    DELETE_COLUMN = "DeleteColumn"
    FILL_ROW_AT = "FillRowAt"
    FILL_COLUMN_AT = "FillColumnAt"
    CLEAR_ROW_AT = "ClearRowAt"
    CLEAR_COLUMN_AT = "ClearColumnAt"
    UNDO = "Undo"
    REDO = "Redo"


class Direction(str, Enum):
    RIGHT = "Right"
    DOWN = "Down"
    LEFT = "Left"
    UP = "Up"


class ShiftDirection(str, Enum):
    """Horizontal shifts operate along a row, vertical ones along a column."""

    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"


def _check_value(value: object) -> str:
    if not isinstance(value, str) or len(value) > 1:
        raise ValueError(f"cell value must be empty or a single character, got {value!r}")
    return value


def _freeze_line(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(_check_value(value) for value in values)


@dataclass(frozen=True, slots=True)
class Action:
    """Base class for all grid actions."""

    type: ClassVar[ActionType]

    def describe(self) -> str:
        return self.type.value


@dataclass(frozen=True, slots=True)
class ClearGrid(Action):
    type: ClassVar[ActionType] = ActionType.CLEAR_GRID


@dataclass(frozen=True, slots=True)
class SetGrid(Action):
    type: ClassVar[ActionType] = ActionType.SET_GRID
    cells: Cells

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(_freeze_line(row) for row in self.cells))


@dataclass(frozen=True, slots=True)
class MoveCursorByCell(Action):
    type: ClassVar[ActionType] = ActionType.MOVE_CURSOR_BY_CELL
    direction: Direction

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", Direction(self.direction))


@dataclass(frozen=True, slots=True)
class MoveCursorToEdge(Action):
    type: ClassVar[ActionType] = ActionType.MOVE_CURSOR_TO_EDGE
    direction: Direction

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", Direction(self.direction))


@dataclass(frozen=True, slots=True)
class MoveCursorTo(Action):
    type: ClassVar[ActionType] = ActionType.MOVE_CURSOR_TO
    row: int
    column: int

    def describe(self) -> str:
        return f"MoveCursorTo({self.row}, {self.column})"


@dataclass(frozen=True, slots=True)
class PutValue(Action):
    type: ClassVar[ActionType] = ActionType.PUT_VALUE
    value: str

    def __post_init__(self) -> None:
        _check_value(self.value)

    def describe(self) -> str:
        return f"PutValue({self.value!r})"


@dataclass(frozen=True, slots=True)
class InsertCell(Action):
    type: ClassVar[ActionType] = ActionType.INSERT_CELL
    shift_direction: ShiftDirection

    def __post_init__(self) -> None:
        object.__setattr__(self, "shift_direction", ShiftDirection(self.shift_direction))


@dataclass(frozen=True, slots=True)
class InsertRow(Action):
    type: ClassVar[ActionType] = ActionType.INSERT_ROW


@dataclass(frozen=True, slots=True)
class InsertColumn(Action):
    type: ClassVar[ActionType] = ActionType.INSERT_COLUMN


@dataclass(frozen=True, slots=True)
class DeleteCell(Action):
    type: ClassVar[ActionType] = ActionType.DELETE_CELL
    shift_direction: ShiftDirection

    def __post_init__(self) -> None:
        object.__setattr__(self, "shift_direction", ShiftDirection(self.shift_direction))


@dataclass(frozen=True, slots=True)
class DeleteRow(Action):
    type: ClassVar[ActionType] = ActionType.DELETE_ROW


@dataclass(frozen=True, slots=True)
class DeleteColumn(Action):
    type: ClassVar[ActionType] = ActionType.DELETE_COLUMN


@dataclass(frozen=True, slots=True)
class FillRowAt(Action):
    type: ClassVar[ActionType] = ActionType.FILL_ROW_AT
    row: int
    values: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _freeze_line(self.values))

    def describe(self) -> str:
        return f"FillRowAt({self.row})"


@dataclass(frozen=True, slots=True)
class FillColumnAt(Action):
    type: ClassVar[ActionType] = ActionType.FILL_COLUMN_AT
    column: int
    values: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _freeze_line(self.values))

    def describe(self) -> str:
        return f"FillColumnAt({self.column})"


@dataclass(frozen=True, slots=True)
class ClearRowAt(Action):
    type: ClassVar[ActionType] = ActionType.CLEAR_ROW_AT
    row: int


@dataclass(frozen=True, slots=True)
class ClearColumnAt(Action):
    type: ClassVar[ActionType] = ActionType.CLEAR_COLUMN_AT
    column: int


@dataclass(frozen=True, slots=True)
class Undo(Action):
    type: ClassVar[ActionType] = ActionType.UNDO


@dataclass(frozen=True, slots=True)
class Redo(Action):
    type: ClassVar[ActionType] = ActionType.REDO


__all__ = [
    "Cells",
    "ActionType",
    "Direction",
    "ShiftDirection",
    "Action",
    "ClearGrid",
    "SetGrid",
    "MoveCursorByCell",
    "MoveCursorToEdge",
    "MoveCursorTo",
    "PutValue",
    "InsertCell",
    "InsertRow",
    "InsertColumn",
    "DeleteCell",
    "DeleteRow",
    "DeleteColumn",
    "FillRowAt",
    "FillColumnAt",
    "ClearRowAt",
    "ClearColumnAt",
    "Undo",
    "Redo",
]
