"""Normal mode: one input unit maps to one editor action."""

from __future__ import annotations

from rawedit.actions import edit as edit_actions
from rawedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, require_keymap, run_action


class NormalMode(Mode):
    """Looks keys up in the keymap and inserts anything printable."""

    name = "normal"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._keymap = require_keymap(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_to_token(key)
        action = self._keymap.lookup(self.name, token)
        if action is not None:
            return run_action(self.context, action)
        if key.text is not None:
            return edit_actions.insert_character(self.context, key.text)

        telemetry.record_event(
            "input.unrecognized",
            level="debug",
            data={"mode": self.name, "key": token},
        )
        return ModeResult(consumed=False, status="unrecognized")
