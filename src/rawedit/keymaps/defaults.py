"""Built-in key tables for the normal and escape modes."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from rawedit.actions import core as core_actions
from rawedit.actions import edit as edit_actions
from rawedit.actions import motion as motion_actions

from .table import Action, Keymap

DEFAULT_ACTIONS: tuple[Action, ...] = (
    Action("core.quit", core_actions.quit_editor, "Quit the editor"),
    Action("core.save", core_actions.request_save, "Ask the host to save"),
    Action(
        "core.enter_escape",
        core_actions.enter_escape_mode,
        "Start decoding an escape sequence",
    ),
    Action("motion.up", motion_actions.cursor_up, "Move the cursor up"),
    Action("motion.down", motion_actions.cursor_down, "Move the cursor down"),
    Action("motion.left", motion_actions.cursor_left, "Move the cursor left"),
    Action("motion.right", motion_actions.cursor_right, "Move the cursor right"),
    Action("edit.undo", edit_actions.undo, "Restore the state before the last edit"),
    Action("edit.insert_tab", edit_actions.insert_tab, "Insert tab_width spaces"),
    Action("edit.split_line", edit_actions.split_line, "Break the line at the cursor"),
    Action(
        "edit.delete_backward",
        edit_actions.delete_backward,
        "Delete the character before the cursor",
    ),
)

# mode -> token -> action id
DEFAULT_BINDINGS: Mapping[str, Mapping[str, str]] = {
    "normal": {
        "ctrl+q": "core.quit",
        "ctrl+s": "core.save",
        "ctrl+p": "motion.up",
        "ctrl+n": "motion.down",
        "ctrl+b": "motion.left",
        "ctrl+f": "motion.right",
        "ctrl+u": "edit.undo",
        "ESC": "core.enter_escape",
        "TAB": "edit.insert_tab",
        "ENTER": "edit.split_line",
        "BACKSPACE": "edit.delete_backward",
        "ctrl+h": "edit.delete_backward",
    },
    # final unit of ESC [ X / ESC O X
    "escape": {
        "A": "motion.up",
        "B": "motion.down",
        "C": "motion.right",
        "D": "motion.left",
    },
}


def default_keymap(
    *,
    overrides: Optional[Mapping[str, Mapping[str, str]]] = None,
    disabled: Iterable[tuple[str, str]] = (),
) -> Keymap:
    """Keymap holding every default action and binding.

    ``overrides`` rebinds tokens per mode (replacing defaults on the same
    token); ``disabled`` lists ``(mode, token)`` pairs to leave unbound.
    """

    keymap = Keymap()
    for action in DEFAULT_ACTIONS:
        keymap.add_action(action)
    skipped = set(disabled)
    for mode, table in DEFAULT_BINDINGS.items():
        for token, action_id in table.items():
            if (mode, token) not in skipped:
                keymap.bind(mode, token, action_id)
    for mode, table in (overrides or {}).items():
        for token, action_id in table.items():
            keymap.bind(mode, token, action_id, replace=True)
    return keymap


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "default_keymap"]
