"""Raw terminal mode handling."""

from __future__ import annotations

import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, Optional


@contextmanager
def raw_mode(fd: Optional[int] = None) -> Iterator[int]:
    """Put ``fd`` (stdin by default) into raw mode for the block.

    The saved attributes are restored on exit, including when the block
    raises.
    """

    target = sys.stdin.fileno() if fd is None else fd
    saved = termios.tcgetattr(target)
    tty.setraw(target)
    try:
        yield target
    finally:
        termios.tcsetattr(target, termios.TCSADRAIN, saved)


__all__ = ["raw_mode"]
