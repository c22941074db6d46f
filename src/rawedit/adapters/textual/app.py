"""Textual app hosting the editor core."""

from __future__ import annotations

from typing import Any

try:  # pragma: no cover - imported only when the Textual host is used
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use rawedit.adapters.textual.app"
    ) from exc

from rawedit.buffer import BufferMirror
from rawedit.modes.dispatcher import InputDispatcher
from rawedit.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks


def render_mirror(mirror: BufferMirror) -> Text:
    """Build the buffer view with the cursor cell shown in reverse video."""

    text = Text()
    last_row = len(mirror.lines) - 1
    for row, line in enumerate(mirror.lines):
        if row == mirror.cursor.row:
            col = mirror.cursor.col
            text.append(line[:col])
            text.append(line[col : col + 1] or " ", style="reverse")
            text.append(line[col + 1 :])
        else:
            text.append(line)
        if row < last_row:
            text.append("\n")
    return text


class EditorApp(App[None]):
    """Single-buffer editor screen: buffer view plus a status line."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    # ctrl+p belongs to the editor, not the command palette.
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, dispatcher: InputDispatcher) -> None:
        super().__init__()
        self.dispatcher = dispatcher
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("rawedit.adapters.textual")

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.dispatcher, hooks)
        self._update_status(self.dispatcher.state.name)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        result = self.adapter.handle_textual_key(event.key, character=event.character)
        if result is None:
            return
        event.stop()
        if result.status == "quit":
            self.exit()

    def _update_view(self, mirror: BufferMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_mirror(mirror))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        del payload
        if name == "editor.save" and self.dispatcher.state.message:
            self._update_status(self.dispatcher.state.message)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def run_textual(dispatcher: InputDispatcher) -> None:
    EditorApp(dispatcher).run()


__all__ = ["EditorApp", "render_mirror", "run_textual"]
