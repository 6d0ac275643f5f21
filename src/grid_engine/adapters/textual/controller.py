"""Textual-facing adapter: key names in, grid snapshots out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from grid_engine.keymaps import KeymapRegistry, KeyStroke, ResolutionMatch, load_default_keymaps
from grid_engine.store import GridStore, GridView


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update Textual widgets."""

    update_grid: Callable[[GridView], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualGridAdapter:
    """Resolves key strokes through a keymap registry and dispatches them."""

    def __init__(
        self,
        store: GridStore,
        hooks: TextualUIHooks,
        *,
        registry: KeymapRegistry | None = None,
    ) -> None:
        self.store = store
        self.hooks = hooks
        if registry is None:
            registry = KeymapRegistry(logger_name="grid_engine.keymaps")
            load_default_keymaps(registry)
        self.registry = registry
        self._unsubscribe = store.subscribe(lambda _state: self._refresh_grid())
        self._refresh_grid()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[ResolutionMatch]:
        """Dispatch the action bound to ``key``; return ``None`` if unbound."""

        stroke = KeyStroke(key, tuple(modifiers), text=text)
        self._log("key ->", token=stroke.token, text=text)
        match = self.registry.resolve(stroke)
        if match is None:
            self._log("unbound", token=stroke.token)
            return None

        self.store.dispatch(match.action)
        self.hooks.update_status(self._status_line(match))
        self._log("action <-", action=match.action.describe(), ref=match.action_ref.id)
        return match

    def close(self) -> None:
        self._unsubscribe()

    def _refresh_grid(self) -> None:
        self.hooks.update_grid(self.store.snapshot())

    def _status_line(self, match: ResolutionMatch) -> str:
        view = self.store.snapshot()
        return (
            f"{match.action.describe()} @ ({view.cursor.row}, {view.cursor.column})"
            f"  undo:{view.undo_depth - view.redo_depth} redo:{view.redo_depth}"
        )

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(f"{key}={value!r}" for key, value in fields.items() if value is not None)
        self.hooks.log(" ".join(parts))


__all__ = ["TextualGridAdapter", "TextualUIHooks"]
