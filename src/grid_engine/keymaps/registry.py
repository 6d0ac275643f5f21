"""Keymap registry translating key strokes into grid actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from grid_engine.actions import Action
from grid_engine.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke

TEXT_ACTION_ID = "edit.put_text"

# Strokes carrying one of these never fall back to text entry.
_COMMAND_MODIFIERS = frozenset({"ctrl", "alt", "meta"})


@dataclass(slots=True)
class RegistryStats:
    action_count: int
    binding_count: int


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved stroke: the binding (if any), its action ref, and the action."""

    binding: Optional[Binding]
    action_ref: ActionRef
    action: Action


class KeymapConflictError(RuntimeError):
    """Raised when a new binding reuses a stroke that is already bound."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' on '{binding.key_signature}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns action references and the stroke-to-binding index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_token: Dict[str, str] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "stroke": binding.key_signature},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            existing_id = self._by_token.get(binding.key_signature)
            if existing_id is not None and existing_id != binding.id:
                if not replace:
                    raise KeymapConflictError(binding, self._bindings[existing_id])
                self.unregister_binding(existing_id)

            if binding.id in self._bindings:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self.unregister_binding(binding.id)

            self._bindings[binding.id] = binding
            self._by_token[binding.key_signature] = binding.id
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is None:
            return None
        if self._by_token.get(binding.key_signature) == binding_id:
            del self._by_token[binding.key_signature]
        return binding

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._bindings.values()

    def binding_for(self, stroke: KeyStroke) -> Optional[Binding]:
        binding_id = self._by_token.get(stroke.token)
        return self._bindings[binding_id] if binding_id is not None else None

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions), binding_count=len(self._bindings)
        )

    def resolve(self, stroke: KeyStroke) -> Optional[ResolutionMatch]:
        """Return the action bound to ``stroke``, or ``None`` when unbound.

        Unbound single printable characters fall back to the text action
        (when registered) so typing writes into the grid.
        """

        binding = self.binding_for(stroke)
        if binding is not None:
            action_ref = self._actions[binding.action_id]
        elif _is_text_entry(stroke) and TEXT_ACTION_ID in self._actions:
            action_ref = self._actions[TEXT_ACTION_ID]
        else:
            return None

        action = action_ref(stroke)
        if action is None:
            return None
        return ResolutionMatch(binding=binding, action_ref=action_ref, action=action)


def _is_text_entry(stroke: KeyStroke) -> bool:
    text = stroke.text
    if text is None or len(text) != 1 or not text.isprintable():
        return False
    return not _COMMAND_MODIFIERS.intersection(stroke.modifiers)


__all__ = [
    "TEXT_ACTION_ID",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
]
