from __future__ import annotations

import pytest

from grid_engine.actions import (
    Direction,
    ShiftDirection,
    create_delete_cell,
    create_insert_row,
    create_move_cursor_by_cell,
    create_move_cursor_to_edge,
    create_put_value,
    create_redo,
    create_undo,
)
from grid_engine.keymaps import (
    DEFAULT_ACTIONS,
    DEFAULT_BINDINGS,
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    load_default_keymaps,
)


def make_action(action_id: str = "grid.insert_row") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda stroke: create_insert_row())


def make_binding(
    *, binding_id: str, token: str = "insert", action_id: str = "grid.insert_row"
) -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke.parse(token), action_id=action_id)


def make_default_registry() -> KeymapRegistry:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return registry


def test_key_stroke_parse_and_token() -> None:
    stroke = KeyStroke.parse("shift+ctrl+left")

    assert stroke.key == "left"
    assert stroke.modifiers == ("ctrl", "shift")
    assert stroke.token == "ctrl+shift+left"
    assert KeyStroke("z", ("Ctrl", "ctrl")).token == "ctrl+z"
    assert KeyStroke.parse("x", text="x").token == "x"


def test_key_stroke_requires_key() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="insert.row")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.get_binding("insert.row") is binding


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="insert.row"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="insert.other"))

    assert excinfo.value.existing.id == "insert.row"


def test_register_binding_replace_swaps_existing() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="insert.row"))

    replacement = make_binding(binding_id="insert.other")
    registry.register_binding(replacement, replace=True)

    assert registry.binding_for(KeyStroke("insert")) is replacement
    assert registry.stats().binding_count == 1


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="insert.row"))


def test_register_action_twice_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())

    registry.register_action(make_action(), replace=True)
    with pytest.raises(KeyError):
        registry.get_action("missing")


def test_unregister_binding_frees_stroke() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="insert.row"))

    removed = registry.unregister_binding("insert.row")

    assert removed is not None and removed.id == "insert.row"
    assert registry.binding_for(KeyStroke("insert")) is None
    assert registry.unregister_binding("insert.row") is None


def test_defaults_register_every_action_and_binding() -> None:
    registry = make_default_registry()

    stats = registry.stats()
    assert stats.action_count == len(DEFAULT_ACTIONS)
    assert stats.binding_count == len(DEFAULT_BINDINGS)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("left", create_move_cursor_by_cell(Direction.LEFT)),
        ("ctrl+down", create_move_cursor_to_edge(Direction.DOWN)),
        ("home", create_move_cursor_to_edge(Direction.LEFT)),
        ("insert", create_insert_row()),
        ("shift+delete", create_delete_cell(ShiftDirection.VERTICAL)),
        ("backspace", create_put_value("")),
        ("ctrl+z", create_undo()),
        ("ctrl+y", create_redo()),
    ],
)
def test_resolve_default_bindings(token: str, expected: object) -> None:
    match = make_default_registry().resolve(KeyStroke.parse(token))

    assert match is not None
    assert match.binding is not None
    assert match.action == expected


def test_printable_text_falls_back_to_put_value() -> None:
    registry = make_default_registry()

    match = registry.resolve(KeyStroke("x", text="x"))
    assert match is not None
    assert match.binding is None
    assert match.action == create_put_value("x")

    space = registry.resolve(KeyStroke("space", text=" "))
    assert space is not None
    assert space.action == create_put_value("")


def test_command_modifiers_block_text_fallback() -> None:
    registry = make_default_registry()

    assert registry.resolve(KeyStroke("q", ("ctrl",), text="q")) is None
    assert registry.resolve(KeyStroke("f5")) is None

    shifted = registry.resolve(KeyStroke("X", ("shift",), text="X"))
    assert shifted is not None
    assert shifted.action == create_put_value("X")


def test_load_defaults_with_exclusions_and_extras() -> None:
    registry = KeymapRegistry()
    extra = Binding(
        id="history.undo.alt",
        stroke=KeyStroke.parse("ctrl+u"),
        action_id="history.undo",
    )

    load_default_keymaps(
        registry, exclude_bindings=("history.redo",), extra_bindings=(extra,)
    )

    assert registry.resolve(KeyStroke.parse("ctrl+y")) is None
    match = registry.resolve(KeyStroke.parse("ctrl+u"))
    assert match is not None and match.action == create_undo()
