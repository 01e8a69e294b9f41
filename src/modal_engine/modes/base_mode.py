"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence

from modal_engine.buffer import Buffer
from modal_engine.commands import STANDARD_COMMANDS, Command
from modal_engine.config import EditorConfig
from modal_engine.editor import Editor, EditorMode
from modal_engine.intents import Intent


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_intent``."""

    consumed: bool
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting the core publish structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    editor: Editor
    config: EditorConfig = field(default_factory=EditorConfig)
    bus: ModeBus = field(default_factory=ModeBus)
    commands: Sequence[Command] = STANDARD_COMMANDS

    @property
    def buffer(self) -> Buffer:
        return self.editor.current_buffer


def is_printable(character: str) -> bool:
    return unicodedata.category(character) not in ("Cc", "Cs")


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: EditorMode = EditorMode.NORMAL

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def editor(self) -> Editor:
        return self.context.editor

    def on_enter(
        self, previous: Optional[EditorMode]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[EditorMode]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_intent(
        self, intent: Intent
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


def unhandled(intent: Intent) -> ModeResult:
    return ModeResult(consumed=False, status="miss", message=repr(intent))
