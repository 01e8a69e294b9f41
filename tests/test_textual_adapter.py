from __future__ import annotations

from typing import List, Tuple

import pytest

from modal_engine.adapters.textual import TextualEditorAdapter, TextualUIHooks
from modal_engine.buffer import Buffer, BufferView
from modal_engine.editor import Editor, EditorMode
from modal_engine.intents import Edit, ModeChange, TextInput
from modal_engine.keymaps import KeyStroke
from modal_engine.modes import ModeManager


def make_manager(text: str = "") -> ModeManager:
    return ModeManager.create(Editor(buffers=[Buffer.from_text(text)]))


def test_adapter_pushes_initial_snapshot() -> None:
    views: List[BufferView] = []
    TextualEditorAdapter(make_manager("abc"), TextualUIHooks(update_buffer=views.append))

    assert views[-1].text == "abc"


def test_adapter_updates_buffer_and_status() -> None:
    manager = make_manager("ac")
    views: List[BufferView] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(update_buffer=views.append, update_status=statuses.append)
    adapter = TextualEditorAdapter(manager, hooks)

    adapter.handle_textual_key("i", text="i")
    adapter.handle_textual_key("l", text="l")
    adapter.handle_textual_key("escape")

    assert "enter_insert" in statuses
    assert "escape" in statuses
    assert views[-1].text == "lac"
    assert manager.editor.mode is EditorMode.NORMAL


def test_adapter_relays_command_events() -> None:
    manager = make_manager()
    command_lines: List[str] = []
    events: List[Tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        update_buffer=lambda view: None,
        show_command=command_lines.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualEditorAdapter(manager, hooks)

    adapter.handle_textual_key("colon", text=":")
    adapter.handle_textual_key("b", text="b")
    adapter.handle_textual_key("n", text="n")
    assert command_lines[-1] == ":bn"

    adapter.handle_textual_key("enter")

    assert command_lines[-1] == ""
    assert ("command.submit", ":bn") in events
    assert any(name == "buffer.switch" for name, _ in events)


def test_adapter_reports_command_errors_in_status() -> None:
    statuses: List[str] = []
    hooks = TextualUIHooks(update_buffer=lambda view: None, update_status=statuses.append)
    adapter = TextualEditorAdapter(make_manager(), hooks)

    for key, text in (("colon", ":"), ("z", "z"), ("enter", None)):
        adapter.handle_textual_key(key, text=text)

    assert "error: command not found: z" in statuses
    assert statuses[-1] == "command not found: z"


def test_unbound_normal_key_is_dropped() -> None:
    manager = make_manager("abc")
    adapter = TextualEditorAdapter(manager, TextualUIHooks(update_buffer=lambda view: None))

    assert adapter.handle_textual_key("z", text="z") is None
    assert manager.editor.current_buffer.text == "abc"


def test_resolve_maps_named_and_printable_keys() -> None:
    manager = make_manager()
    adapter = TextualEditorAdapter(manager, TextualUIHooks(update_buffer=lambda view: None))

    stroke = adapter.to_stroke("ctrl+left_square_bracket")
    assert stroke == KeyStroke("[", ("ctrl",))
    assert adapter.to_stroke("A", text="A", modifiers=("shift",)) == KeyStroke("A")

    assert adapter.resolve(adapter.to_stroke("space"), text=" ") is ModeChange.ENTER_QUICK_MENU
    manager.handle(ModeChange.INSERT)
    assert adapter.resolve(adapter.to_stroke("space", text=" "), text=" ") == TextInput(" ")
    assert adapter.resolve(adapter.to_stroke("backspace")) is Edit.BACKSPACE


def test_quit_propagates_system_exit() -> None:
    adapter = TextualEditorAdapter(make_manager(), TextualUIHooks(update_buffer=lambda view: None))

    for key, text in (("colon", ":"), ("q", "q")):
        adapter.handle_textual_key(key, text=text)

    with pytest.raises(SystemExit):
        adapter.handle_textual_key("enter")


def test_adapter_logs_key_and_result() -> None:
    lines: List[str] = []
    hooks = TextualUIHooks(update_buffer=lambda view: None, log=lines.append)
    adapter = TextualEditorAdapter(make_manager("abc"), hooks)

    adapter.handle_textual_key("l", text="l")

    assert lines[0].startswith("key -> mode='normal'")
    assert any(line.startswith("result <-") for line in lines)


def test_adapter_shows_usage_for_bad_arguments() -> None:
    statuses: List[str] = []
    hooks = TextualUIHooks(update_buffer=lambda view: None, update_status=statuses.append)
    adapter = TextualEditorAdapter(make_manager(), hooks)

    for key, text in (("colon", ":"), ("e", "e"), ("enter", None)):
        adapter.handle_textual_key(key, text=text)

    assert "error: too few parameters provided (usage: edit <string>)" in statuses


def test_adapter_never_types_lone_surrogates() -> None:
    manager = make_manager("abc")
    manager.handle(ModeChange.INSERT)
    adapter = TextualEditorAdapter(manager, TextualUIHooks(update_buffer=lambda view: None))

    assert adapter.handle_textual_key("\ud800", text="\ud800") is None
    assert manager.editor.current_buffer.text == "abc"
