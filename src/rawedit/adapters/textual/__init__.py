"""Textual host for the editor core."""

from .controller import TextualEditorAdapter, TextualUIHooks, textual_key_to_units

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "textual_key_to_units"]
