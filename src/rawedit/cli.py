"""Command-line entry point."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import replace
from typing import Callable, Optional, Sequence

from rawedit.adapters.terminal import AnsiRenderSink, TerminalInputSource, raw_mode
from rawedit.buffer import BufferIOError, EditorState, FileSaver, load_buffer
from rawedit.config import EditorConfig
from rawedit.modes.dispatcher import InputDispatcher, create_default_dispatcher
from rawedit.runtime import telemetry
from rawedit.runtime.loop import EditorLoop, run_session

UI_CHOICES = ("terminal", "textual")


def _tab_width(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if width < 1:
        raise argparse.ArgumentTypeError("tab width must be at least 1")
    return width


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rawedit", description="Edit a text file in the terminal."
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="File to edit; created on first save if it does not exist",
    )
    parser.add_argument(
        "--ui",
        choices=UI_CHOICES,
        default=os.environ.get("RAWEDIT_UI", "terminal"),
        help="Host to run in (default: terminal)",
    )
    parser.add_argument(
        "--tab-width",
        type=_tab_width,
        default=None,
        help="Spaces inserted by the tab key (default: 4)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset; logs go to a file, never to the screen",
    )
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.ui not in UI_CHOICES:
        parser.error(
            f"RAWEDIT_UI must be one of {', '.join(UI_CHOICES)}, got {args.ui!r}"
        )
    return args


def prompt_for_filename(prompt: Callable[[str], str] = input) -> str:
    """Ask until a non-empty file name is given."""

    while True:
        name = prompt("File name: ").strip()
        if name:
            return name


def build_dispatcher(path: str, config: EditorConfig) -> InputDispatcher:
    state = EditorState(buffer=load_buffer(path), path=path)
    dispatcher = create_default_dispatcher(state, config=config)
    dispatcher.bus.subscribe("editor.save", FileSaver())
    return dispatcher


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = EditorConfig.from_env()
    if args.tab_width is not None:
        config = replace(config, tab_width=args.tab_width)
    preset = args.log_preset or config.log_preset
    if preset:
        try:
            telemetry.configure(preset=preset)
        except ValueError as exc:
            print(f"rawedit: {exc}", file=sys.stderr)
            return 1

    try:
        path = args.file or prompt_for_filename()
    except EOFError:
        print("rawedit: no file name given", file=sys.stderr)
        return 1

    try:
        dispatcher = build_dispatcher(path, config)
    except BufferIOError as exc:
        print(f"rawedit: {exc}", file=sys.stderr)
        return 1

    if args.ui == "textual":
        from rawedit.adapters.textual.app import run_textual

        run_textual(dispatcher)
        return 0

    loop = EditorLoop(dispatcher, AnsiRenderSink(), TerminalInputSource())
    run_session(loop, terminal_mode=raw_mode(), config=config)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    sys.exit(main())
