"""Dataclasses describing key strokes, action references, and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from grid_engine.actions import Action


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press, e.g. ``KeyStroke("z", ("ctrl",))``."""

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers + (self.key,))
        return self.key

    @classmethod
    def parse(cls, token: str, *, text: str | None = None) -> "KeyStroke":
        """Split a ``"ctrl+alt+left"`` style token into key and modifiers."""

        *modifiers, key = token.split("+")
        return cls(key, tuple(modifiers), text=text)


ActionHandler = Callable[[KeyStroke], Optional[Action]]


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named factory turning a key stroke into a grid action."""

    id: str
    handler: ActionHandler
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, stroke: KeyStroke) -> Optional[Action]:
        return self.handler(stroke)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key stroke with an action reference."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = ["KeyStroke", "ActionHandler", "ActionRef", "Binding"]
