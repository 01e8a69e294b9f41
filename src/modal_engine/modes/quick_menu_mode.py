"""Quick-menu mode: collects a line of text for the host to act on."""

from __future__ import annotations

from modal_engine.editor import EditorMode
from modal_engine.intents import Edit, Intent, TextInput

from .base_mode import Mode, ModeResult, is_printable, unhandled


class QuickMenuMode(Mode):
    name = EditorMode.QUICK_MENU

    def handle_intent(self, intent: Intent) -> ModeResult:
        editor = self.editor
        if isinstance(intent, TextInput) and is_printable(intent.text):
            editor.quick_menu_line += intent.text
            return ModeResult(consumed=True, status="editing")
        if intent is Edit.BACKSPACE:
            editor.quick_menu_line = editor.quick_menu_line[:-1]
            return ModeResult(consumed=True, status="editing")
        return unhandled(intent)
