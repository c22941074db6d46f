"""Editing and motion verbs referenced by keymap bindings."""

from .core import enter_escape_mode, quit_editor, request_save
from .edit import delete_backward, insert_character, insert_tab, split_line, undo
from .motion import cursor_down, cursor_left, cursor_right, cursor_up

__all__ = [
    "quit_editor",
    "request_save",
    "enter_escape_mode",
    "insert_character",
    "insert_tab",
    "split_line",
    "delete_backward",
    "undo",
    "cursor_up",
    "cursor_down",
    "cursor_left",
    "cursor_right",
]
