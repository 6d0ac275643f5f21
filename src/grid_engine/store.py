"""Controller object owning the application state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from grid_engine.actions import Action, Cells
from grid_engine.grid import Cursor, cells_to_string
from grid_engine.history import AppState, app_reducer, initial_state
from grid_engine.runtime import telemetry

Listener = Callable[[AppState], None]


@dataclass(frozen=True, slots=True)
class GridView:
    """Read-only snapshot handed to renderers."""

    cursor: Cursor
    cells: Cells
    undo_depth: int
    redo_depth: int
    can_undo: bool
    can_redo: bool

    def render(self, *, blank: str = "·") -> str:
        return cells_to_string(self.cells, blank=blank)


class GridStore:
    """Threads one ``AppState`` through ``app_reducer``, one action at a time."""

    def __init__(
        self,
        *,
        name: str = "default",
        state: Optional[AppState] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.name = name
        self._state = state or initial_state()
        self._listeners: List[Listener] = []
        self._logger_name = logger_name

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> AppState:
        with telemetry.span(
            "store::dispatch",
            logger_name=self._logger_name,
            component="store",
            metadata={"store": self.name, "action": action.type.value},
        ) as handle:
            self._state = app_reducer(self._state, action)
            handle.add_metadata("undo_depth", len(self._state.undo_stack))
            handle.add_metadata("redo_depth", len(self._state.redo_stack))
        self._notify()
        return self._state

    def dispatch_all(self, actions: Iterable[Action]) -> AppState:
        for action in actions:
            self.dispatch(action)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def can_undo(self) -> bool:
        return self._state.can_undo()

    def can_redo(self) -> bool:
        return self._state.can_redo()

    def snapshot(self) -> GridView:
        state = self._state
        history = state.history
        return GridView(
            cursor=state.cursor,
            cells=state.cells,
            undo_depth=len(history.undo_stack),
            redo_depth=len(history.redo_stack),
            can_undo=state.can_undo(),
            can_redo=state.can_redo(),
        )

    def reset(self) -> AppState:
        self._state = initial_state()
        telemetry.record_event(
            "store.reset", data={"store": self.name}, logger_name=self._logger_name
        )
        self._notify()
        return self._state

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)


__all__ = ["GridStore", "GridView", "Listener"]
