"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from rawedit.keymaps import Action, Keymap
from rawedit.runtime import telemetry

from .base_mode import KeyInput, ModeContext, ModeResult

_NAMED_UNITS = {
    "\t": "TAB",
    "\r": "ENTER",
    "\x1b": "ESC",
    "\x7f": "BACKSPACE",
}


def decode_unit(unit: str) -> KeyInput:
    """Turn one raw input character into a ``KeyInput``.

    Control bytes 0x01-0x1a become ``ctrl+<letter>`` unless they have a name
    of their own (tab, carriage return).
    """

    if len(unit) != 1:
        raise ValueError(f"expected a single input unit, got {unit!r}")
    named = _NAMED_UNITS.get(unit)
    if named is not None:
        return KeyInput(key=named, raw=unit)
    code = ord(unit)
    if 1 <= code <= 26:
        return KeyInput(key=chr(code + 96), modifiers=("ctrl",), raw=unit)
    if unit.isprintable():
        return KeyInput(key=unit, text=unit, raw=unit)
    return KeyInput(key=f"U+{code:04X}", raw=unit)


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        modifier = "+".join(key.modifiers)
        return f"{modifier}+{key.key}"
    return key.key


def require_keymap(context: ModeContext) -> Keymap:
    keymap = context.extras.get("keymap")
    if not isinstance(keymap, Keymap):
        raise RuntimeError("ModeContext.extras missing 'keymap'")
    return keymap


def run_action(context: ModeContext, action: Action) -> ModeResult:
    with telemetry.span(
        f"action::{action.id}",
        component="actions",
        metadata={"action": action.id},
    ):
        return action(context)


__all__ = [
    "decode_unit",
    "key_to_token",
    "require_keymap",
    "run_action",
]
