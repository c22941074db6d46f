"""Cursor position model clamped against buffer shape."""

from __future__ import annotations

from dataclasses import dataclass

from .document import Buffer


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True, slots=True)
class Cursor:
    """Zero-based ``(row, col)`` position.

    ``col`` may sit one past the end of its line so text can be appended.
    Every movement returns a new cursor clamped against the buffer it is
    given; a cursor is only meaningful relative to that buffer.
    """

    row: int = 0
    col: int = 0

    def up(self, buffer: Buffer) -> "Cursor":
        return Cursor(self.row - 1, self.col).clamp(buffer)

    def down(self, buffer: Buffer) -> "Cursor":
        return Cursor(self.row + 1, self.col).clamp(buffer)

    def left(self, buffer: Buffer) -> "Cursor":
        return Cursor(self.row, self.col - 1).clamp(buffer)

    def right(self, buffer: Buffer) -> "Cursor":
        return Cursor(self.row, self.col + 1).clamp(buffer)

    def move_to_column(self, buffer: Buffer, col: int = 0) -> "Cursor":
        return Cursor(self.row, col).clamp(buffer)

    def clamp(self, buffer: Buffer) -> "Cursor":
        # Column is clamped against the line the row lands on, so moving onto
        # a shorter line snaps the column down.
        row = _clamp(self.row, 0, buffer.line_count - 1)
        col = _clamp(self.col, 0, buffer.line_length(row))
        return Cursor(row, col)

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)
