"""ANSI escape rendering for raw-mode terminals."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from rawedit.buffer import BufferMirror

CLEAR_SCREEN = "\x1b[2J"
CLEAR_LINE = "\x1b[2K"
LINE_END = "\r\n"


def move_cursor(row: int, col: int) -> str:
    """Escape sequence placing the terminal cursor at a 0-based position."""

    # Terminals count rows and columns from 1.
    return f"\x1b[{row + 1};{col + 1}H"


class AnsiRenderSink:
    """Repaints the whole screen on every render.

    Raw mode turns off output post-processing, so every line ends in an
    explicit carriage return + line feed.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def render(self, mirror: BufferMirror) -> None:
        parts = [CLEAR_SCREEN, move_cursor(0, 0)]
        parts.extend(f"{line}{LINE_END}" for line in mirror.lines)
        if mirror.message:
            parts.append(f"{CLEAR_LINE}{mirror.message}")
        parts.append(move_cursor(mirror.cursor.row, mirror.cursor.col))
        self.stream.write("".join(parts))
        self.stream.flush()

    def write_padding(self, count: int) -> None:
        self.stream.write("\n" * count)
        self.stream.flush()


__all__ = ["AnsiRenderSink", "move_cursor", "CLEAR_SCREEN", "LINE_END"]
