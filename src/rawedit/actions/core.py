"""Core action implementations: quitting, saving, mode changes."""

from __future__ import annotations

from rawedit.modes.base_mode import ModeContext, ModeResult


def quit_editor(context: ModeContext) -> ModeResult:
    context.bus.emit("editor.quit", context.editor)
    return ModeResult(consumed=True, status="quit", message="quit")


def request_save(context: ModeContext) -> ModeResult:
    """Hand the current state to whoever listens for ``editor.save``.

    Writing is the host's job; the buffer itself is never changed here.
    """

    context.bus.emit("editor.save", context.editor)
    return ModeResult(consumed=True, status="save", message="save")


def enter_escape_mode(context: ModeContext) -> ModeResult:
    del context
    return ModeResult(consumed=True, switch_to="escape", message="escape")


__all__ = [
    "quit_editor",
    "request_save",
    "enter_escape_mode",
]
