"""Built-in keymap seeding every mode with the classic vi keys."""

from __future__ import annotations

from typing import Iterable

from modal_engine.editor import EditorMode
from modal_engine.intents import Action, Edit, Intent, ModeChange, Motion

from .keymap import Keymap
from .models import Binding, KeyStroke

NORMAL = EditorMode.NORMAL
INSERT = EditorMode.INSERT
COMMAND = EditorMode.COMMAND
QUICK_MENU = EditorMode.QUICK_MENU


def _bind(mode: EditorMode, token: str, intent: Intent, description: str) -> Binding:
    return Binding(
        mode=mode,
        stroke=KeyStroke.parse(token),
        intent=intent,
        description=description,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind(NORMAL, "h", Motion.LEFT, "Move left"),
    _bind(NORMAL, "j", Motion.DOWN, "Move down"),
    _bind(NORMAL, "k", Motion.UP, "Move up"),
    _bind(NORMAL, "l", Motion.RIGHT, "Move right"),
    _bind(NORMAL, "w", Motion.FORWARD_WORD, "Forward to the next word boundary"),
    _bind(NORMAL, "e", Motion.FORWARD_WORD_END, "Forward to the end of the word"),
    _bind(NORMAL, "b", Motion.BACK_WORD, "Back to the previous word boundary"),
    _bind(NORMAL, "$", Motion.END_OF_LINE, "Move to the end of the line"),
    _bind(NORMAL, "d", Action.DELETE, "Delete over the next motion"),
    _bind(NORMAL, "c", Action.REPLACE, "Change over the next motion"),
    _bind(NORMAL, "x", Edit.DELETE_CHAR, "Delete the character under the cursor"),
    _bind(NORMAL, "i", ModeChange.INSERT, "Insert before the cursor"),
    _bind(NORMAL, "a", ModeChange.INSERT_AFTER, "Insert after the cursor"),
    _bind(NORMAL, "A", ModeChange.INSERT_END, "Insert at the end of the line"),
    _bind(NORMAL, "I", ModeChange.INSERT_START, "Insert at the start of the line"),
    _bind(NORMAL, ":", ModeChange.ENTER_COMMAND, "Open the command line"),
    _bind(NORMAL, "SPACE", ModeChange.ENTER_QUICK_MENU, "Open the quick menu"),
    _bind(INSERT, "ESC", ModeChange.ESCAPE, "Leave insert mode"),
    _bind(INSERT, "ctrl+[", ModeChange.ESCAPE, "Leave insert mode"),
    _bind(INSERT, "BACKSPACE", Edit.BACKSPACE, "Delete before the cursor"),
    _bind(INSERT, "ENTER", Edit.NEWLINE, "Insert a line break"),
    _bind(INSERT, "TAB", Edit.TAB, "Insert indentation"),
    _bind(INSERT, "DELETE", Edit.DELETE, "Delete under the cursor"),
    _bind(COMMAND, "ESC", ModeChange.ESCAPE, "Cancel the command line"),
    _bind(COMMAND, "ctrl+[", ModeChange.ESCAPE, "Cancel the command line"),
    _bind(COMMAND, "ENTER", Edit.SUBMIT, "Run the command line"),
    _bind(COMMAND, "BACKSPACE", Edit.BACKSPACE, "Delete the last character"),
    _bind(QUICK_MENU, "ESC", ModeChange.ESCAPE, "Close the quick menu"),
    _bind(QUICK_MENU, "BACKSPACE", Edit.BACKSPACE, "Delete the last character"),
)


def load_default_keymap(extra_bindings: Iterable[Binding] | None = None) -> Keymap:
    """Build the default keymap, letting ``extra_bindings`` override strokes."""

    keymap = Keymap(DEFAULT_BINDINGS)
    if extra_bindings:
        keymap = keymap.with_bindings(extra_bindings)
    return keymap


__all__ = ["DEFAULT_BINDINGS", "load_default_keymap"]
