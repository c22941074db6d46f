"""Input dispatcher owning the active mode and routing input units."""

from __future__ import annotations

from typing import Dict, Optional, Type

from rawedit.buffer import EditorState
from rawedit.config import EditorConfig
from rawedit.keymaps import Keymap, default_keymap
from rawedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .escape_mode import EscapeMode
from .keymap_helpers import decode_unit
from .normal_mode import NormalMode


class InputDispatcher:
    """Owns the active mode, handles transitions, and dispatches input."""

    def __init__(self, context: ModeContext, *, keymap: Keymap | None = None) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.keymap = keymap if keymap is not None else default_keymap()
        self.context.extras["keymap"] = self.keymap

    @property
    def state(self) -> EditorState:
        return self.context.editor

    @property
    def bus(self) -> ModeBus:
        return self.context.bus

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        telemetry.record_event("mode.switch", level="debug", data={"mode": name})

    def dispatch(self, unit: str) -> ModeResult:
        """Decode one raw input unit and run it through the active mode."""

        return self.handle_key(decode_unit(unit))

    def feed(self, units: str) -> list[ModeResult]:
        return [self.dispatch(unit) for unit in units]

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        # Status text only survives until the next key.
        self.state.message = None
        with telemetry.span(
            name=f"mode::{mode.name}",
            component="modes",
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


def create_default_dispatcher(
    state: EditorState,
    *,
    config: Optional[EditorConfig] = None,
    bus: Optional[ModeBus] = None,
    keymap: Optional[Keymap] = None,
) -> InputDispatcher:
    """Build a dispatcher with normal + escape modes and the default keymap."""

    context = ModeContext(
        editor=state,
        bus=bus or ModeBus(),
        config=config or EditorConfig(),
    )
    dispatcher = InputDispatcher(context, keymap=keymap)
    dispatcher.register_mode(NormalMode)
    dispatcher.register_mode(EscapeMode)
    return dispatcher
