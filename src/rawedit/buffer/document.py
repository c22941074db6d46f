"""Immutable line storage for rawedit buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .validation import ensure_column, ensure_row


@dataclass(frozen=True, slots=True)
class Buffer:
    """Ordered, never-empty tuple of lines.

    Every edit returns a new ``Buffer``. Untouched lines are shared with the
    receiver through tuple slicing, so earlier buffers held by the undo
    history stay valid without copying every line on each keystroke.
    """

    lines: tuple[str, ...] = ("",)

    def __post_init__(self) -> None:
        lines = tuple(self.lines)
        if not lines:
            lines = ("",)
        object.__setattr__(self, "lines", lines)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Buffer":
        return cls(lines=tuple(lines))

    @classmethod
    def from_text(cls, text: str) -> "Buffer":
        """Split newline-joined text; a final newline closes the last line."""

        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return cls(lines=tuple(lines))

    def to_text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_length(self, row: int) -> int:
        return len(ensure_row(self.lines, row))

    def line(self, row: int) -> str:
        return ensure_row(self.lines, row)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def insert(self, char: str, row: int, col: int) -> "Buffer":
        line = ensure_column(self.lines, row, col)
        return self._replace_rows(row, (line[:col] + char + line[col:],))

    def delete(self, row: int, col: int) -> "Buffer":
        line = ensure_column(self.lines, row, col, allow_end=False)
        return self._replace_rows(row, (line[:col] + line[col + 1 :],))

    def split_line(self, row: int, col: int) -> "Buffer":
        line = ensure_column(self.lines, row, col)
        return self._replace_rows(row, (line[:col], line[col:]))

    def _replace_rows(self, row: int, replacement: tuple[str, ...]) -> "Buffer":
        return Buffer(lines=self.lines[:row] + replacement + self.lines[row + 1 :])
