"""Editing verbs shared across modes."""

from __future__ import annotations

from typing import Callable, Dict

from modal_engine.buffer import BufferDelta, Cursor
from modal_engine.editor import EditorMode
from modal_engine.intents import Action, ModeChange
from modal_engine.modes.base_mode import ModeContext, ModeResult


def apply_operator(context: ModeContext, action: Action, target: Cursor) -> ModeResult:
    """Run ``action`` over the half-open range between the cursor and ``target``."""

    buffer = context.buffer
    start, end = sorted((buffer.cursor, target))
    _emit_delta(context, "buffer.delete", buffer.delete_range(start, end))
    if action is Action.REPLACE:
        return ModeResult(
            consumed=True,
            switch_to=EditorMode.INSERT,
            status="operator",
            message="replace",
        )
    return ModeResult(consumed=True, status="operator", message="delete")


def delete_char(context: ModeContext) -> ModeResult:
    buffer = context.buffer
    cursor = buffer.cursor
    end = min(cursor + 1, buffer.document.length())
    if cursor >= end:
        return ModeResult(consumed=True, status="noop")
    _emit_delta(context, "buffer.delete", buffer.delete_range(cursor, end))
    return ModeResult(consumed=True, status="delete_char")


def insert_text(context: ModeContext, text: str) -> ModeResult:
    """Insert at the cursor and advance past the inserted text."""

    buffer = context.buffer
    delta = buffer.insert_at_cursor(text)
    buffer.move_x(len(text))
    delta.cursor = buffer.cursor
    _emit_delta(context, "buffer.insert", delta)
    return ModeResult(consumed=True, status="insert")


def backspace(context: ModeContext) -> ModeResult:
    buffer = context.buffer
    cursor = buffer.cursor
    if cursor == 0:
        return ModeResult(consumed=True, status="noop")
    _emit_delta(context, "buffer.delete", buffer.delete_range(cursor - 1, cursor))
    return ModeResult(consumed=True, status="backspace")


def forward_delete(context: ModeContext) -> ModeResult:
    result = delete_char(context)
    if result.status == "noop":
        return result
    return ModeResult(consumed=True, status="delete")


def _emit_delta(context: ModeContext, event: str, delta: BufferDelta) -> None:
    context.bus.emit(event, delta)


def _enter_insert(context: ModeContext) -> ModeResult:
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT, message="enter_insert")


def _insert_after(context: ModeContext) -> ModeResult:
    context.buffer.move_x(1)
    return _enter_insert(context)


def _escape(context: ModeContext) -> ModeResult:
    return ModeResult(consumed=True, switch_to=EditorMode.NORMAL, message="escape")


def _enter_command(context: ModeContext) -> ModeResult:
    context.editor.command_line = context.config.command_prefix
    return ModeResult(
        consumed=True, switch_to=EditorMode.COMMAND, message="enter_command"
    )


def _enter_quick_menu(context: ModeContext) -> ModeResult:
    context.editor.quick_menu_line = ""
    return ModeResult(
        consumed=True, switch_to=EditorMode.QUICK_MENU, message="enter_quick_menu"
    )


# INSERT_START and INSERT_END leave the cursor where it is.
_MODE_CHANGES: Dict[ModeChange, Callable[[ModeContext], ModeResult]] = {
    ModeChange.INSERT: _enter_insert,
    ModeChange.INSERT_START: _enter_insert,
    ModeChange.INSERT_END: _enter_insert,
    ModeChange.INSERT_AFTER: _insert_after,
    ModeChange.ESCAPE: _escape,
    ModeChange.ENTER_COMMAND: _enter_command,
    ModeChange.ENTER_QUICK_MENU: _enter_quick_menu,
}


def apply_mode_change(context: ModeContext, change: ModeChange) -> ModeResult:
    return _MODE_CHANGES[change](context)


__all__ = [
    "apply_mode_change",
    "apply_operator",
    "backspace",
    "delete_char",
    "forward_delete",
    "insert_text",
]
