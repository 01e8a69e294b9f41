"""Command-line mode with inline editing."""

from __future__ import annotations

from typing import Optional

from modal_engine.actions import command as command_actions
from modal_engine.editor import EditorMode
from modal_engine.intents import Edit, Intent, TextInput

from .base_mode import Mode, ModeResult, is_printable, unhandled


class CommandMode(Mode):
    name = EditorMode.COMMAND

    def on_enter(self, previous: Optional[EditorMode]) -> None:
        del previous
        self.context.bus.emit("command.start", self.editor.command_line)

    def on_exit(self, next_mode: Optional[EditorMode]) -> None:
        del next_mode
        self.context.bus.emit("command.end", self.editor.command_line)

    def handle_intent(self, intent: Intent) -> ModeResult:
        editor = self.editor
        if isinstance(intent, TextInput):
            if not is_printable(intent.text):
                return unhandled(intent)
            editor.command_line += intent.text
            return ModeResult(consumed=True, status="editing")

        if intent is Edit.BACKSPACE:
            editor.command_line = editor.command_line[:-1]
            if not editor.command_line:
                return ModeResult(
                    consumed=True,
                    switch_to=EditorMode.NORMAL,
                    status="command_cancel",
                )
            return ModeResult(consumed=True, status="editing")

        if intent is Edit.SUBMIT:
            return command_actions.submit_command_line(self.context)

        return unhandled(intent)
