"""Snapshot stack backing undo."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .document import Buffer
from .state import Cursor


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    buffer: Buffer
    cursor: Cursor
    label: str = field(default="", compare=False)


class History:
    """Unbounded LIFO stack of pre-mutation snapshots."""

    def __init__(self) -> None:
        self._entries: List[HistoryEntry] = []

    @property
    def depth(self) -> int:
        return len(self._entries)

    def push(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def can_undo(self) -> bool:
        return bool(self._entries)

    def pop(self) -> Optional[HistoryEntry]:
        if not self.can_undo():
            return None
        return self._entries.pop()

    def peek(self) -> Optional[HistoryEntry]:
        if not self.can_undo():
            return None
        return self._entries[-1]
