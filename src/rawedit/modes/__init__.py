"""Dispatcher modes and the state machine driving them.

Only the shared base types live at package level; import
``rawedit.modes.dispatcher`` for the dispatcher itself.
"""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
]
