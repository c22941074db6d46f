"""Blocking single-character reads from the terminal."""

from __future__ import annotations

import codecs
import os
import sys
from collections import deque
from typing import Deque, Optional


class TerminalInputSource:
    """Reads stdin one byte at a time and yields whole characters.

    Bytes go through an incremental decoder, so a multi-byte UTF-8 character
    comes back as a single unit while escape sequences still arrive one
    byte per call.
    """

    def __init__(self, fd: Optional[int] = None, *, encoding: str = "utf-8") -> None:
        self._fd = fd
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._pending: Deque[str] = deque()

    @property
    def fd(self) -> int:
        return self._fd if self._fd is not None else sys.stdin.fileno()

    def read(self) -> str:
        while not self._pending:
            chunk = os.read(self.fd, 1)
            if not chunk:
                raise EOFError("terminal input closed")
            self._pending.extend(self._decoder.decode(chunk))
        return self._pending.popleft()


__all__ = ["TerminalInputSource"]
