"""Escape mode: decodes the two units that follow an ESC byte."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from rawedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, require_keymap, run_action

TAIL_LENGTH = 2


class EscapeMode(Mode):
    """Collects an arrow-key tail such as ``[A`` and maps its final unit.

    Only the last unit of the tail is looked up; the ``[`` (or ``O``) in front
    of it is consumed without inspection. Unknown tails are dropped.
    """

    name = "escape"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._keymap = require_keymap(context)
        self._tail: List[KeyInput] = []

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self._tail.clear()

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self._tail.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        self._tail.append(key)
        if len(self._tail) < TAIL_LENGTH:
            return ModeResult(consumed=True, status="pending", message="escape_tail")

        final = self._tail[-1]
        raw_tail = "".join(unit.raw for unit in self._tail)
        self._tail.clear()
        action = self._keymap.lookup(self.name, key_to_token(final))
        if action is not None:
            outcome = run_action(self.context, action)
            return replace(outcome, switch_to="normal")

        telemetry.record_event(
            "input.unrecognized",
            level="debug",
            data={"mode": self.name, "tail": raw_tail},
        )
        return ModeResult(consumed=True, switch_to="normal", status="unrecognized")
