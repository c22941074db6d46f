"""Cursor movement actions; none of them touch the history."""

from __future__ import annotations

from rawedit.modes.base_mode import ModeContext, ModeResult


def cursor_up(context: ModeContext) -> ModeResult:
    state = context.editor
    state.cursor = state.cursor.up(state.buffer)
    return ModeResult(consumed=True, status="motion", message="cursor_up")


def cursor_down(context: ModeContext) -> ModeResult:
    state = context.editor
    state.cursor = state.cursor.down(state.buffer)
    return ModeResult(consumed=True, status="motion", message="cursor_down")


def cursor_left(context: ModeContext) -> ModeResult:
    state = context.editor
    state.cursor = state.cursor.left(state.buffer)
    return ModeResult(consumed=True, status="motion", message="cursor_left")


def cursor_right(context: ModeContext) -> ModeResult:
    state = context.editor
    state.cursor = state.cursor.right(state.buffer)
    return ModeResult(consumed=True, status="motion", message="cursor_right")


__all__ = ["cursor_up", "cursor_down", "cursor_left", "cursor_right"]
