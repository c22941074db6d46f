"""Buffer, cursor and undo data structures."""

from .document import Buffer
from .editor import EditorState, Transaction
from .files import BufferIOError, FileSaver, load_buffer, save_buffer
from .state import Cursor
from .sync import BufferMirror, InputSource, RenderSink
from .undo import History, HistoryEntry
from .validation import OutOfBoundsError, ensure_column, ensure_row

__all__ = [
    "Buffer",
    "Cursor",
    "EditorState",
    "Transaction",
    "History",
    "HistoryEntry",
    "BufferMirror",
    "RenderSink",
    "InputSource",
    "BufferIOError",
    "FileSaver",
    "load_buffer",
    "save_buffer",
    "OutOfBoundsError",
    "ensure_row",
    "ensure_column",
]
