"""Textual host for the modal engine.

The controller has no Textual dependency and can be driven from tests; the
``app`` module requires the optional ``textual`` extra.
"""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
