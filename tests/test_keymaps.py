import pytest

from rawedit.buffer import Buffer, Cursor, EditorState
from rawedit.keymaps import (
    DEFAULT_BINDINGS,
    Action,
    Keymap,
    KeymapConflictError,
    default_keymap,
)
from rawedit.modes import ModeResult
from rawedit.modes.dispatcher import create_default_dispatcher


def make_action(action_id: str = "test.action") -> Action:
    return Action(action_id, lambda context: ModeResult(consumed=True))


def make_keymap(*action_ids: str) -> Keymap:
    keymap = Keymap()
    for action_id in action_ids or ("test.action",):
        keymap.add_action(make_action(action_id))
    return keymap


def test_bind_and_lookup() -> None:
    keymap = make_keymap()

    keymap.bind("normal", "ctrl+x", "test.action")

    action = keymap.lookup("normal", "ctrl+x")
    assert action is not None
    assert action.id == "test.action"
    assert keymap.lookup("normal", "ctrl+y") is None
    assert keymap.lookup("escape", "ctrl+x") is None


def test_bind_requires_known_action() -> None:
    with pytest.raises(KeyError):
        Keymap().bind("normal", "ctrl+x", "missing")


def test_duplicate_action_rejected() -> None:
    keymap = make_keymap()

    with pytest.raises(ValueError):
        keymap.add_action(make_action())


def test_rebinding_token_conflicts_unless_replaced() -> None:
    keymap = make_keymap("one", "two")
    keymap.bind("normal", "ctrl+x", "one")

    with pytest.raises(KeymapConflictError) as info:
        keymap.bind("normal", "ctrl+x", "two")
    assert info.value.bound_to == "one"

    keymap.bind("normal", "ctrl+x", "two", replace=True)
    assert keymap.bindings("normal") == {"ctrl+x": "two"}


def test_same_token_in_other_mode_is_independent() -> None:
    keymap = make_keymap("one", "two")

    keymap.bind("normal", "A", "one")
    keymap.bind("escape", "A", "two")

    assert keymap.modes == ("escape", "normal")


def test_unbind_drops_empty_mode() -> None:
    keymap = make_keymap()
    keymap.bind("escape", "A", "test.action")

    assert keymap.unbind("escape", "A") == "test.action"
    assert keymap.unbind("escape", "A") is None
    assert keymap.modes == ()


def test_default_keymap_matches_table() -> None:
    keymap = default_keymap()

    for mode, table in DEFAULT_BINDINGS.items():
        assert keymap.bindings(mode) == dict(table)
    # printable letters only mean something after ESC
    assert keymap.lookup("normal", "A") is None


def test_default_keymap_overrides_and_disabled() -> None:
    keymap = default_keymap(
        overrides={"normal": {"ctrl+z": "edit.undo", "ctrl+q": "core.save"}},
        disabled=[("normal", "ctrl+u")],
    )

    bindings = keymap.bindings("normal")
    assert "ctrl+u" not in bindings
    assert bindings["ctrl+z"] == "edit.undo"
    assert bindings["ctrl+q"] == "core.save"


def test_custom_keymap_drives_dispatcher() -> None:
    keymap = default_keymap(overrides={"normal": {"ctrl+z": "edit.undo"}})
    state = EditorState(buffer=Buffer.from_lines(["ab"]), cursor=Cursor(0, 1))
    dispatcher = create_default_dispatcher(state, keymap=keymap)

    dispatcher.feed("x\x1a")

    assert state.buffer.lines == ("ab",)
    assert state.cursor == Cursor(0, 1)
