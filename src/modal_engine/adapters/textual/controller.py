"""Textual adapter: turns host key events into intents and pushes state back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from modal_engine.buffer import BufferView
from modal_engine.editor import EditorMode
from modal_engine.intents import Intent, TextInput
from modal_engine.keymaps import KeyStroke
from modal_engine.modes import ModeManager, ModeResult, is_printable


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


# Textual key names mapped onto the keymap's named keys.
_NAMED_KEYS: Dict[str, KeyStroke] = {
    "escape": KeyStroke("ESC"),
    "enter": KeyStroke("ENTER"),
    "return": KeyStroke("ENTER"),
    "backspace": KeyStroke("BACKSPACE"),
    "ctrl+h": KeyStroke("BACKSPACE"),
    "tab": KeyStroke("TAB"),
    "delete": KeyStroke("DELETE"),
    "space": KeyStroke("SPACE"),
    "ctrl+left_square_bracket": KeyStroke("[", ("ctrl",)),
}


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferView], None]
    update_status: Callable[[str], None] = _noop
    show_command: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges host key events and bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self.keymap = manager.context.config.keymap
        self._subscribe_events()
        self._refresh()

    def to_stroke(
        self, key: str, *, text: Optional[str] = None, modifiers: Iterable[str] = ()
    ) -> KeyStroke:
        named = _NAMED_KEYS.get(key)
        if named is not None:
            return named
        if text and len(text) == 1 and is_printable(text):
            return KeyStroke(text, tuple(m for m in modifiers if m.lower() != "shift"))
        return KeyStroke(key, tuple(modifiers))

    def resolve(self, stroke: KeyStroke, *, text: Optional[str] = None) -> Optional[Intent]:
        """Look ``stroke`` up for the active mode.

        Outside Normal mode an unbound printable key types itself.
        """

        mode = self.manager.editor.mode
        intent = self.keymap.resolve(mode, stroke)
        if intent is not None:
            return intent
        if mode is not EditorMode.NORMAL and text and len(text) == 1 and is_printable(text):
            return TextInput(text)
        return None

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[ModeResult]:
        """Translate a Textual key event into an intent and dispatch it."""

        stroke = self.to_stroke(key, text=text, modifiers=modifiers)
        intent = self.resolve(stroke, text=text)
        self._log_state("key ->", key=stroke.token, intent=intent)
        if intent is None:
            return None
        result = self.manager.handle(intent)
        self._after_mode_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def _after_mode_result(self, result: ModeResult) -> None:
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh()

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "mode.switch",
            "buffer.insert",
            "buffer.delete",
            "buffer.switch",
            "command.start",
            "command.end",
            "command.submit",
            "command.error",
            "command.write",
            "command.edit",
            "command.quit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "command.error" and isinstance(payload, dict):
            status = f"error: {payload.get('error')}"
            if payload.get("usage"):
                status += f" (usage: {payload['usage']})"
            self.hooks.update_status(status)

    def _refresh(self) -> None:
        editor = self.manager.editor
        self.hooks.update_buffer(editor.current_buffer.snapshot())
        if editor.mode is EditorMode.COMMAND:
            self.hooks.show_command(editor.command_line)
        elif editor.mode is EditorMode.QUICK_MENU:
            self.hooks.show_command(editor.quick_menu_line)
        else:
            self.hooks.show_command("")

    def _log_state(self, prefix: str, **fields: object) -> None:
        editor = self.manager.editor
        snapshot: Dict[str, object] = {
            "mode": editor.mode.value,
            "buffer": editor.current_buffer_index,
            "cursor": editor.current_buffer.cursor,
            "pending": editor.pending_action.value if editor.pending_action else None,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
