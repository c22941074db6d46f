"""Textual adapter that feeds key events through the input dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from rawedit.buffer import BufferMirror
from rawedit.modes import ModeResult
from rawedit.modes.dispatcher import InputDispatcher
from rawedit.runtime import telemetry

_ARROW_SEQUENCES = {
    "up": "\x1b[A",
    "down": "\x1b[B",
    "right": "\x1b[C",
    "left": "\x1b[D",
}

_NAMED_KEYS = {
    "enter": "\r",
    "tab": "\t",
    "backspace": "\x7f",
    # Textual has already decoded escape sequences for us.
    "escape": "",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def textual_key_to_units(key: str, character: Optional[str] = None) -> str:
    """Translate a Textual key name into the raw units a terminal would send."""

    if key in _ARROW_SEQUENCES:
        return _ARROW_SEQUENCES[key]
    if key in _NAMED_KEYS:
        return _NAMED_KEYS[key]
    if key.startswith("ctrl+") and len(key) == 6 and key[5].isalpha():
        return chr(ord(key[5].lower()) - 96)
    if character and len(character) == 1 and character.isprintable():
        return character
    return ""


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges the dispatcher + bus events to a Textual-friendly surface."""

    def __init__(self, dispatcher: InputDispatcher, hooks: TextualUIHooks) -> None:
        self.dispatcher = dispatcher
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_view()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[ModeResult]:
        """Dispatch a Textual key event; ``None`` when it maps to no input."""

        units = textual_key_to_units(key, character)
        self._log_state("key ->", key=key, units=units)
        if not units:
            telemetry.record_event(
                "input.dropped", level="debug", data={"host": "textual", "key": key}
            )
            return None
        results = self.dispatcher.feed(units)
        result = results[-1]
        self._after_result(result)
        self._log_state(
            "result <-",
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def _after_result(self, result: ModeResult) -> None:
        status = self.dispatcher.state.message or result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh_view()

    def _subscribe_events(self) -> None:
        bus = self.dispatcher.bus
        for event in ("editor.save", "editor.quit"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.dispatcher.state.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.dispatcher.state
        active_mode = self.dispatcher.active_mode
        return {
            "mode": active_mode.name if active_mode else "?",
            "cursor": state.cursor.as_tuple(),
            "lines": state.buffer.line_count,
            "history": state.history.depth,
            "buffer": state.name,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "textual_key_to_units"]
