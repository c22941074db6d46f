"""Index guards shared by buffer edit operations."""

from __future__ import annotations

from typing import Optional, Sequence


class OutOfBoundsError(IndexError):
    """Raised when an edit addresses a row or column outside the buffer."""

    def __init__(
        self, message: str, *, row: int, col: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.row = row
        self.col = col


def ensure_row(lines: Sequence[str], row: int) -> str:
    if row < 0 or row >= len(lines):
        raise OutOfBoundsError(
            f"Row {row} out of range (line count {len(lines)})", row=row
        )
    return lines[row]


def ensure_column(
    lines: Sequence[str], row: int, col: int, *, allow_end: bool = True
) -> str:
    """Return the line at ``row`` after checking ``col`` against it.

    ``allow_end`` admits the one-past-the-end column used for appends.
    """

    line = ensure_row(lines, row)
    limit = len(line) if allow_end else len(line) - 1
    if col < 0 or col > limit:
        raise OutOfBoundsError(
            f"Column {col} out of range for row {row} (length {len(line)})",
            row=row,
            col=col,
        )
    return line
