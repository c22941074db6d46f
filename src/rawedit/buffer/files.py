"""Plain-text persistence for buffers."""

from __future__ import annotations

from typing import Optional

from rawedit.runtime import telemetry

from .document import Buffer
from .editor import EditorState

ENCODING = "utf-8"


class BufferIOError(OSError):
    """Raised when a buffer cannot be read from or written to disk."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


def load_buffer(path: str) -> Buffer:
    """Read ``path`` into a buffer; a missing file yields one empty line."""

    try:
        with open(path, encoding=ENCODING, newline="") as handle:
            text = handle.read()
    except FileNotFoundError:
        telemetry.record_event("file.new", data={"path": path})
        return Buffer()
    except (OSError, UnicodeDecodeError) as exc:
        raise BufferIOError(f"Cannot read {path}: {exc}", path=path) from exc

    buffer = Buffer.from_text(text)
    telemetry.record_event(
        "file.load", data={"path": path, "lines": buffer.line_count}
    )
    return buffer


def save_buffer(path: str, buffer: Buffer) -> int:
    """Overwrite ``path`` with every line followed by a newline.

    Returns the number of lines written.
    """

    try:
        with open(path, "w", encoding=ENCODING, newline="") as handle:
            handle.write(buffer.to_text())
    except (OSError, UnicodeEncodeError) as exc:
        raise BufferIOError(f"Cannot write {path}: {exc}", path=path) from exc
    return buffer.line_count


class FileSaver:
    """``editor.save`` subscriber writing the state's buffer to its path."""

    def __init__(self, *, logger_name: Optional[str] = None) -> None:
        self._logger_name = logger_name

    def __call__(self, payload: object) -> None:
        if not isinstance(payload, EditorState):
            return
        self.save(payload)

    def save(self, state: EditorState) -> bool:
        if not state.path:
            state.message = "No file name; nothing written"
            return False
        # Capture the buffer up front; a failed write leaves state untouched.
        buffer = state.buffer
        try:
            written = save_buffer(state.path, buffer)
        except BufferIOError as exc:
            state.message = str(exc)
            telemetry.record_event(
                "file.save_failed",
                level="error",
                data={"path": state.path, "error": str(exc)},
                logger_name=self._logger_name,
            )
            return False
        state.message = f'"{state.path}" {written}L written'
        telemetry.record_event(
            "file.save",
            data={"path": state.path, "lines": written},
            logger_name=self._logger_name,
        )
        return True
