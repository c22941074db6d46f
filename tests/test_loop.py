from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List

import pytest

from rawedit.buffer import Buffer, BufferMirror, Cursor, EditorState
from rawedit.config import EditorConfig
from rawedit.modes.dispatcher import create_default_dispatcher
from rawedit.runtime.loop import EditorLoop, run_session


class RecordingSink:
    def __init__(self) -> None:
        self.frames: List[BufferMirror] = []
        self.padding: List[int] = []

    def render(self, mirror: BufferMirror) -> None:
        self.frames.append(mirror)

    def write_padding(self, count: int) -> None:
        self.padding.append(count)


class ScriptedSource:
    def __init__(self, units: str) -> None:
        self._units = list(units)

    def read(self) -> str:
        if not self._units:
            raise EOFError("script exhausted")
        return self._units.pop(0)


def make_loop(units: str, *lines: str, cursor: Cursor = Cursor()) -> EditorLoop:
    state = EditorState(buffer=Buffer.from_lines(lines), cursor=cursor)
    dispatcher = create_default_dispatcher(state)
    return EditorLoop(dispatcher, RecordingSink(), ScriptedSource(units))


def test_loop_renders_before_every_read_and_stops_on_quit() -> None:
    loop = make_loop("hi\x11", "")

    loop.run()

    sink = loop.sink
    assert isinstance(sink, RecordingSink)
    assert loop.steps == 3
    assert [frame.lines for frame in sink.frames] == [("",), ("h",), ("hi",)]
    assert loop.dispatcher.state.buffer.lines == ("hi",)


def test_loop_stops_reading_after_quit() -> None:
    loop = make_loop("\x11x", "abc")

    loop.run()

    assert loop.dispatcher.state.buffer.lines == ("abc",)


def test_render_shows_cursor_position() -> None:
    loop = make_loop("\x06\x11", "abc", cursor=Cursor(0, 1))

    loop.run()

    sink = loop.sink
    assert isinstance(sink, RecordingSink)
    assert sink.frames[-1].cursor == Cursor(0, 2)


def test_run_session_pads_and_reraises() -> None:
    loop = make_loop("ab", "")

    with pytest.raises(EOFError):
        run_session(loop, config=EditorConfig(error_padding_lines=7))

    sink = loop.sink
    assert isinstance(sink, RecordingSink)
    assert sink.padding == [7]


def test_run_session_restores_terminal_before_padding() -> None:
    events: List[str] = []

    class Sink(RecordingSink):
        def write_padding(self, count: int) -> None:
            events.append("padding")
            super().write_padding(count)

    @contextmanager
    def fake_terminal() -> Iterator[None]:
        events.append("enter")
        try:
            yield
        finally:
            events.append("restore")

    state = EditorState(buffer=Buffer.from_lines(["x"]))
    loop = EditorLoop(create_default_dispatcher(state), Sink(), ScriptedSource(""))

    with pytest.raises(EOFError):
        run_session(loop, terminal_mode=fake_terminal())

    assert events == ["enter", "restore", "padding"]


def test_run_session_clean_exit_writes_no_padding() -> None:
    loop = make_loop("\x11", "")

    run_session(loop)

    sink = loop.sink
    assert isinstance(sink, RecordingSink)
    assert sink.padding == []
