"""Key tables mapping decoded input tokens to editor actions."""

from .table import Action, Keymap, KeymapConflictError
from .defaults import DEFAULT_BINDINGS, default_keymap

__all__ = [
    "Action",
    "Keymap",
    "KeymapConflictError",
    "DEFAULT_BINDINGS",
    "default_keymap",
]
