"""Buffer-mutating actions and undo.

Every mutation runs inside ``EditorState.transaction`` so the pre-edit
(buffer, cursor) pair is on the history stack before anything changes.
"""

from __future__ import annotations

from rawedit.modes.base_mode import ModeContext, ModeResult


def insert_character(context: ModeContext, char: str) -> ModeResult:
    state = context.editor
    with state.transaction("insert_character"):
        state.buffer = state.buffer.insert(char, state.cursor.row, state.cursor.col)
        state.cursor = state.cursor.right(state.buffer)
    return ModeResult(consumed=True, status="edit", message="insert_character")


def insert_tab(context: ModeContext) -> ModeResult:
    state = context.editor
    # One snapshot for the whole run of spaces: a single undo removes the tab.
    with state.transaction("insert_tab"):
        for _ in range(context.config.tab_width):
            state.buffer = state.buffer.insert(
                " ", state.cursor.row, state.cursor.col
            )
            state.cursor = state.cursor.right(state.buffer)
    return ModeResult(consumed=True, status="edit", message="insert_tab")


def split_line(context: ModeContext) -> ModeResult:
    state = context.editor
    with state.transaction("split_line"):
        state.buffer = state.buffer.split_line(state.cursor.row, state.cursor.col)
        state.cursor = state.cursor.down(state.buffer).move_to_column(state.buffer, 0)
    return ModeResult(consumed=True, status="edit", message="split_line")


def delete_backward(context: ModeContext) -> ModeResult:
    """Remove the character left of the cursor.

    At column 0 nothing happens and no snapshot is taken; lines are never
    joined.
    """

    state = context.editor
    if state.cursor.col == 0:
        return ModeResult(consumed=True, status="noop", message="line_start")
    with state.transaction("delete_backward"):
        state.buffer = state.buffer.delete(state.cursor.row, state.cursor.col - 1)
        state.cursor = state.cursor.left(state.buffer)
    return ModeResult(consumed=True, status="edit", message="delete_backward")


def undo(context: ModeContext) -> ModeResult:
    entry = context.editor.undo()
    if entry is None:
        return ModeResult(consumed=True, status="noop", message="history_empty")
    return ModeResult(consumed=True, status="undo", message=f"undo {entry.label}")


__all__ = [
    "insert_character",
    "insert_tab",
    "split_line",
    "delete_backward",
    "undo",
]
