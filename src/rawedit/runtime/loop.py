"""Render / read / dispatch control loop."""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from typing import Optional

from rawedit.buffer import InputSource, RenderSink
from rawedit.config import EditorConfig
from rawedit.modes import ModeResult
from rawedit.modes.dispatcher import InputDispatcher

from . import telemetry


class EditorLoop:
    """Alternates painting the current state and dispatching one input unit.

    The loop owns nothing but references: the dispatcher holds the editor
    state, the sink and source are the terminal (or a test double).
    """

    def __init__(
        self,
        dispatcher: InputDispatcher,
        sink: RenderSink,
        source: InputSource,
    ) -> None:
        self.dispatcher = dispatcher
        self.sink = sink
        self.source = source
        self.steps = 0

    def render(self) -> None:
        self.sink.render(self.dispatcher.state.mirror())

    def step(self) -> ModeResult:
        self.render()
        unit = self.source.read()
        result = self.dispatcher.dispatch(unit)
        self.steps += 1
        return result

    def run(self) -> None:
        telemetry.record_event(
            "loop.start", data={"buffer": self.dispatcher.state.name}
        )
        try:
            while True:
                result = self.step()
                if result.status == "quit":
                    break
        except Exception as exc:
            telemetry.record_event(
                "loop.crash",
                level="error",
                data={"error": repr(exc), "steps": self.steps},
            )
            raise
        telemetry.record_event("loop.stop", data={"steps": self.steps})


def run_session(
    loop: EditorLoop,
    *,
    terminal_mode: Optional[AbstractContextManager[object]] = None,
    config: Optional[EditorConfig] = None,
) -> None:
    """Run ``loop`` inside ``terminal_mode`` (usually raw mode).

    If anything escapes, the terminal is restored first, then a block of
    blank lines is written so the traceback lands below whatever the raw
    screen left behind, and the exception is re-raised.
    """

    settings = config or EditorConfig()
    try:
        with terminal_mode or nullcontext():
            loop.run()
    except Exception:
        loop.sink.write_padding(settings.error_padding_lines)
        raise
