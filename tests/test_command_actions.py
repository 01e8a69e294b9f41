from __future__ import annotations

from pathlib import Path
from typing import Any, List, Tuple

import pytest

from modal_engine.buffer import Buffer
from modal_engine.editor import Editor, EditorMode
from modal_engine.intents import Edit, ModeChange, TextInput
from modal_engine.modes import ModeManager


def make_manager(*buffers: Buffer) -> ModeManager:
    editor = Editor(buffers=list(buffers) or [Buffer()])
    return ModeManager.create(editor)


def run_command(manager: ModeManager, text: str):
    manager.handle(ModeChange.ENTER_COMMAND)
    for character in text:
        manager.handle(TextInput(character))
    return manager.handle(Edit.SUBMIT)


def record_events(manager: ModeManager, *names: str) -> List[Tuple[str, Any]]:
    seen: List[Tuple[str, Any]] = []
    for name in names:
        manager.context.bus.subscribe(
            name, lambda payload, event=name: seen.append((event, payload))
        )
    return seen


def test_write_to_explicit_path(tmp_path: Path) -> None:
    manager = make_manager(Buffer.from_text("hello\n"))
    events = record_events(manager, "command.submit", "command.write")
    target = tmp_path / "out.txt"

    result = run_command(manager, f"w {target}")

    assert result.status == "command_write"
    assert target.read_text(encoding="utf-8") == "hello\n"
    assert manager.editor.mode is EditorMode.NORMAL
    assert manager.editor.command_line == ""
    assert events[0] == ("command.submit", f":w {target}")
    assert events[1][1]["path"] == str(target)


def test_write_falls_back_to_buffer_path(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    manager = make_manager(Buffer.from_text("notes", filepath=str(target)))

    run_command(manager, "write")

    assert target.read_text(encoding="utf-8") == "notes"


def test_write_without_any_path_reports_error() -> None:
    manager = make_manager(Buffer.from_text("unsaved"))
    errors = record_events(manager, "command.error")

    result = run_command(manager, "w")

    assert result.status == "command_error"
    assert result.message == "no filepath specified"
    assert manager.editor.mode is EditorMode.NORMAL
    assert errors == [("command.error", {"line": ":w", "error": "no filepath specified"})]


def test_edit_opens_new_buffer(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_text("one\r\ntwo", encoding="utf-8")
    manager = make_manager()

    result = run_command(manager, f"e {source}")

    assert result.status == "command_edit"
    assert len(manager.editor.buffers) == 2
    assert manager.editor.current_buffer_index == 1
    buffer = manager.editor.current_buffer
    assert buffer.text == "one\r\ntwo"
    assert buffer.filepath == str(source)
    assert buffer.cursor == 0


def test_edit_missing_file_leaves_state_alone(tmp_path: Path) -> None:
    manager = make_manager(Buffer.from_text("keep"))

    result = run_command(manager, f"e {tmp_path / 'missing.txt'}")

    assert result.status == "command_error"
    assert len(manager.editor.buffers) == 1
    assert manager.editor.current_buffer.text == "keep"
    assert manager.editor.mode is EditorMode.NORMAL


def test_unknown_command_returns_to_normal() -> None:
    manager = make_manager()

    result = run_command(manager, "bogus")

    assert result.message == "command not found: bogus"
    assert manager.editor.mode is EditorMode.NORMAL
    assert manager.editor.command_line == ""


def test_buffer_commands_cycle() -> None:
    manager = make_manager(
        Buffer.from_text("a", name="a"),
        Buffer.from_text("b", name="b"),
        Buffer.from_text("c", name="c"),
    )
    switches = record_events(manager, "buffer.switch")

    run_command(manager, "bp")
    assert manager.editor.current_buffer_index == 2

    result = run_command(manager, "bnext")
    assert manager.editor.current_buffer_index == 0
    assert result.message == "a"
    assert [payload["index"] for _, payload in switches] == [2, 0]


def test_quit_exits_the_process() -> None:
    manager = make_manager()
    quits = record_events(manager, "command.quit")

    with pytest.raises(SystemExit) as info:
        run_command(manager, "q")

    assert info.value.code == 0
    assert quits == [("command.quit", None)]


def test_unencodable_buffer_reports_error_and_keeps_file(tmp_path: Path) -> None:
    target = tmp_path / "kept.txt"
    target.write_text("keep me", encoding="utf-8")
    manager = make_manager(Buffer.from_text("bad \ud800", filepath=str(target)))
    errors = record_events(manager, "command.error")

    result = run_command(manager, "w")

    assert result.status == "command_error"
    assert manager.editor.mode is EditorMode.NORMAL
    assert manager.editor.command_line == ""
    assert target.read_text(encoding="utf-8") == "keep me"
    assert errors[0][1]["line"] == ":w"


def test_lone_surrogate_cannot_be_typed() -> None:
    with pytest.raises(ValueError):
        TextInput("\ud800")


def test_argument_errors_carry_usage() -> None:
    manager = make_manager()
    errors = record_events(manager, "command.error")

    result = run_command(manager, "e")

    assert result.message == "too few parameters provided"
    assert errors == [
        (
            "command.error",
            {"line": ":e", "error": "too few parameters provided", "usage": "edit <string>"},
        )
    ]


def test_unknown_command_error_has_no_usage() -> None:
    manager = make_manager()
    errors = record_events(manager, "command.error")

    run_command(manager, "bogus")

    assert "usage" not in errors[0][1]
