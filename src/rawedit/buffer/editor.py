"""Editor state cell combining buffer, cursor, history and file identity."""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from rawedit.runtime import telemetry

from .document import Buffer
from .state import Cursor
from .sync import BufferMirror
from .undo import History, HistoryEntry


class EditorState:
    """The only mutable cell in the editor.

    ``buffer`` and ``cursor`` are immutable values that get swapped out
    wholesale; ``history`` holds the values they had before each edit.
    """

    def __init__(
        self,
        *,
        buffer: Optional[Buffer] = None,
        cursor: Optional[Cursor] = None,
        history: Optional[History] = None,
        path: Optional[str] = None,
    ) -> None:
        self.buffer = buffer if buffer is not None else Buffer()
        self.cursor = (cursor or Cursor()).clamp(self.buffer)
        self.history = history if history is not None else History()
        self.path = path
        self.message: Optional[str] = None

    @classmethod
    def from_text(cls, text: str, *, path: Optional[str] = None) -> "EditorState":
        return cls(buffer=Buffer.from_text(text), path=path)

    @property
    def name(self) -> str:
        if not self.path:
            return "untitled"
        return os.path.basename(self.path)

    def snapshot(self, label: str = "") -> HistoryEntry:
        return HistoryEntry(buffer=self.buffer, cursor=self.cursor, label=label)

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            lines=self.buffer.lines,
            cursor=self.cursor,
            message=self.message,
            attributes=dict(attributes or {}),
        )

    def transaction(self, label: str) -> "Transaction":
        return Transaction(self, label)

    def restore(self, entry: HistoryEntry) -> None:
        self.buffer = entry.buffer
        self.cursor = entry.cursor

    def undo(self) -> Optional[HistoryEntry]:
        entry = self.history.pop()
        if entry is None:
            return None
        self.restore(entry)
        telemetry.record_event(
            "buffer.undo",
            level="debug",
            data={"label": entry.label, "depth": self.history.depth},
        )
        return entry


class Transaction(AbstractContextManager["Transaction"]):
    """Pushes a history snapshot before the edit it wraps runs."""

    def __init__(self, state: EditorState, label: str) -> None:
        self.state = state
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self.state.history.push(self.state.snapshot(self.label))
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.state.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.state.cursor = self.state.cursor.clamp(self.state.buffer)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
