"""Process-wide editor state: open buffers, active mode, pending operator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from modal_engine.buffer import Buffer, TextDocument
from modal_engine.intents import Action
from modal_engine.runtime import telemetry


class EditorMode(str, Enum):
    """Input interpretation context. Shared by all buffers."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"
    QUICK_MENU = "quick_menu"


@dataclass
class Editor:
    """Owns every buffer and the state the mode handlers act on.

    The active buffer is always derived from ``current_buffer_index``; no
    other component holds on to a buffer reference across calls.
    """

    buffers: List[Buffer] = field(default_factory=lambda: [Buffer()])
    current_buffer_index: int = 0
    mode: EditorMode = EditorMode.NORMAL
    pending_action: Optional[Action] = None
    command_line: str = ""
    quick_menu_line: str = ""

    def __post_init__(self) -> None:
        if not self.buffers:
            raise ValueError("Editor requires at least one buffer")
        if not 0 <= self.current_buffer_index < len(self.buffers):
            raise ValueError(
                f"current_buffer_index {self.current_buffer_index} out of range"
            )

    @property
    def current_buffer(self) -> Buffer:
        return self.buffers[self.current_buffer_index]

    def next_buffer(self) -> Buffer:
        return self._select((self.current_buffer_index + 1) % len(self.buffers))

    def previous_buffer(self) -> Buffer:
        count = len(self.buffers)
        return self._select((self.current_buffer_index - 1 + count) % count)

    def add_buffer(
        self,
        document: TextDocument | str,
        filepath: Optional[str] = None,
        *,
        name: Optional[str] = None,
    ) -> Buffer:
        """Append a buffer and make it current."""

        if isinstance(document, str):
            document = TextDocument.from_text(document)
        buffer = Buffer(
            name=name or filepath or f"buffer-{len(self.buffers)}",
            document=document,
            filepath=filepath,
        )
        self.buffers.append(buffer)
        self._select(len(self.buffers) - 1)
        return buffer

    def _select(self, index: int) -> Buffer:
        self.current_buffer_index = index
        buffer = self.buffers[index]
        telemetry.record_event(
            "buffer.switch", data={"index": index, "buffer": buffer.name}
        )
        return buffer


__all__ = ["Editor", "EditorMode"]
