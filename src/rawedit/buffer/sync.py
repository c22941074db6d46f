"""Boundary types shared with render sinks and input sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from .state import Cursor


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing what should be painted."""

    lines: tuple[str, ...]
    cursor: Cursor
    message: Optional[str] = None
    attributes: dict[str, str] = field(default_factory=dict)


class RenderSink(Protocol):
    """Paints a buffer snapshot; holds no editor logic."""

    def render(self, mirror: BufferMirror) -> None:
        """Clear the screen, draw every line and place the cursor."""
        ...

    def write_padding(self, count: int) -> None:
        """Emit ``count`` blank lines after a crash so the traceback stays visible."""
        ...


class InputSource(Protocol):
    """Blocking source of single input units."""

    def read(self) -> str:
        """Return exactly one character, waiting until one is available."""
        ...
