"""Actions that evaluate colon command lines against editor state."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from modal_engine import persistence
from modal_engine.commands import CommandKind, CommandParseError, ParameterValue, parse
from modal_engine.editor import EditorMode
from modal_engine.modes.base_mode import ModeContext, ModeResult
from modal_engine.persistence import PersistenceError
from modal_engine.runtime import telemetry

CommandHandler = Callable[[ModeContext, Sequence[ParameterValue]], ModeResult]

logger = telemetry.get_logger("modal_engine.commands")


def submit_command_line(context: ModeContext) -> ModeResult:
    """Parse and run the pending command line, then return to Normal mode.

    The command line is cleared whatever the outcome. Parse and I/O failures
    are reported through the result and a ``command.error`` event; editor
    state is otherwise left alone.
    """

    editor = context.editor
    line = editor.command_line
    editor.command_line = ""
    context.bus.emit("command.submit", line)
    try:
        parsed = parse(context.commands, line, prefix=context.config.command_prefix)
        with telemetry.span(
            "commands::execute",
            component="commands",
            metadata={"kind": parsed.kind.value, "index": parsed.index},
        ):
            return _COMMAND_HANDLERS[parsed.kind](context, parsed.parameters)
    except CommandParseError as exc:
        usage = exc.command.usage if exc.command is not None else None
        return _command_error(context, line, str(exc), usage)
    except PersistenceError as exc:
        return _command_error(context, line, str(exc))


def _command_error(
    context: ModeContext, line: str, message: str, usage: Optional[str] = None
) -> ModeResult:
    payload = {"line": line, "error": message}
    if usage is not None:
        payload["usage"] = usage
    telemetry.record_event("command.error", level="warning", data=payload)
    context.bus.emit("command.error", payload)
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="command_error",
        message=message,
    )


def _done(status: str, message: str) -> ModeResult:
    return ModeResult(
        consumed=True, switch_to=EditorMode.NORMAL, status=status, message=message
    )


def _handle_write(
    context: ModeContext, parameters: Sequence[ParameterValue]
) -> ModeResult:
    override = parameters[0] if parameters else None
    path = persistence.save(
        context.buffer, str(override) if override is not None else None
    )
    context.bus.emit("command.write", {"path": str(path), "buffer": context.buffer.name})
    return _done("command_write", f"written {path}")


def _handle_edit(
    context: ModeContext, parameters: Sequence[ParameterValue]
) -> ModeResult:
    path = str(parameters[0])
    document = persistence.load(path)
    buffer = context.editor.add_buffer(document, filepath=path)
    context.bus.emit(
        "command.edit",
        {"path": path, "index": context.editor.current_buffer_index},
    )
    logger.info(f"opened {path} as buffer {buffer.name}")
    return _done("command_edit", path)


def _handle_quit(
    context: ModeContext, parameters: Sequence[ParameterValue]
) -> ModeResult:
    del parameters
    context.bus.emit("command.quit", None)
    raise SystemExit(0)


def _handle_buffer_next(
    context: ModeContext, parameters: Sequence[ParameterValue]
) -> ModeResult:
    del parameters
    context.editor.next_buffer()
    return _buffer_switched(context)


def _handle_buffer_previous(
    context: ModeContext, parameters: Sequence[ParameterValue]
) -> ModeResult:
    del parameters
    context.editor.previous_buffer()
    return _buffer_switched(context)


def _buffer_switched(context: ModeContext) -> ModeResult:
    index = context.editor.current_buffer_index
    context.bus.emit("buffer.switch", {"index": index, "buffer": context.buffer.name})
    return _done("command_buffer", context.buffer.name)


_COMMAND_HANDLERS: Dict[CommandKind, CommandHandler] = {
    CommandKind.WRITE: _handle_write,
    CommandKind.EDIT: _handle_edit,
    CommandKind.QUIT: _handle_quit,
    CommandKind.BUFFER_NEXT: _handle_buffer_next,
    CommandKind.BUFFER_PREVIOUS: _handle_buffer_previous,
}

_missing = set(CommandKind) - set(_COMMAND_HANDLERS)
if _missing:  # pragma: no cover - import-time guard
    raise RuntimeError(f"no handler for command kinds {sorted(_missing)}")


__all__ = ["submit_command_line"]
