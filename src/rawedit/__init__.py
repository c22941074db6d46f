"""Minimal raw-terminal text editor with snapshot undo."""

__all__ = [
    "adapters",
    "buffer",
    "actions",
    "modes",
    "keymaps",
    "runtime",
    "config",
    "cli",
]

__version__ = "0.1.0"
