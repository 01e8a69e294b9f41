"""Insert mode: typed characters and editing keys go straight into the buffer."""

from __future__ import annotations

from modal_engine.actions import core as core_actions
from modal_engine.editor import EditorMode
from modal_engine.intents import Edit, Intent, TextInput

from .base_mode import Mode, ModeResult, is_printable, unhandled


class InsertMode(Mode):
    name = EditorMode.INSERT

    def handle_intent(self, intent: Intent) -> ModeResult:
        if isinstance(intent, TextInput):
            if not is_printable(intent.text):
                return unhandled(intent)
            return core_actions.insert_text(self.context, intent.text)

        if intent is Edit.BACKSPACE:
            return core_actions.backspace(self.context)
        if intent is Edit.NEWLINE:
            return core_actions.insert_text(self.context, "\n")
        if intent is Edit.TAB:
            return core_actions.insert_text(
                self.context, " " * self.context.config.tab_width
            )
        if intent is Edit.DELETE:
            return core_actions.forward_delete(self.context)

        return unhandled(intent)
