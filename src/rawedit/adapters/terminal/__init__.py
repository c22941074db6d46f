"""Raw-mode terminal host: ANSI rendering and stdin input."""

from .ansi import AnsiRenderSink, move_cursor
from .input import TerminalInputSource
from .raw import raw_mode

__all__ = ["AnsiRenderSink", "TerminalInputSource", "move_cursor", "raw_mode"]
