"""Buffer façade: one text document, one cursor, an optional backing path."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from modal_engine.runtime import telemetry

from .document import TextDocument
from .validation import clamp, ensure_offset

Cursor = int


@dataclass(slots=True)
class BufferView:
    """Host-friendly snapshot of a buffer."""

    name: str
    version: int
    text: str
    cursor: Cursor
    line: int
    column: int
    filepath: Optional[str]


@dataclass(slots=True)
class BufferDelta:
    """Describes one text mutation for hosts that render incrementally."""

    version: int
    start: int
    end: int
    text: str
    cursor: Cursor
    label: str


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[TextDocument] = None,
        cursor: Cursor = 0,
        filepath: Optional[str] = None,
    ) -> None:
        self.name = name
        self.document = document if document is not None else TextDocument()
        self.filepath = filepath
        self.cursor = cursor
        self.clamp_cursor()

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", filepath: Optional[str] = None
    ) -> "Buffer":
        return cls(name=name, document=TextDocument.from_text(text), filepath=filepath)

    def __repr__(self) -> str:
        return (
            f"Buffer(name={self.name!r}, cursor={self.cursor}, "
            f"length={self.document.length()}, filepath={self.filepath!r})"
        )

    @property
    def text(self) -> str:
        return str(self.document)

    def find_line_position(self, offset: int) -> int:
        """Column of ``offset`` within its line."""

        line = self.document.char_to_line(offset)
        return offset - self.document.line_to_char(line)

    def horizontal_move(self, offset: int, delta: int) -> Cursor:
        """Move by ``delta`` characters, saturating at both ends of the text."""

        length = self.document.length()
        if length == 0:
            return 0
        return clamp(offset + delta, 0, length - 1)

    def vertical_move(self, offset: int, delta_lines: int) -> Cursor:
        """Move by ``delta_lines`` keeping the column where the target line allows.

        The column is recomputed from ``offset`` on every call; nothing is
        remembered between moves.
        """

        document = self.document
        current_line = document.char_to_line(offset)
        target_line = clamp(current_line + delta_lines, 0, document.line_count() - 1)
        column = self.find_line_position(offset)
        column = clamp(column, 0, max(0, document.line_length(target_line) - 1))
        return self.horizontal_move(document.line_to_char(target_line), column)

    def end_of_line(self, offset: int) -> Cursor:
        document = self.document
        line = document.char_to_line(offset)
        start = document.line_to_char(line)
        last = start + max(0, document.line_length(line) - 1)
        return self.horizontal_move(last, 0)

    def move_x(self, delta: int) -> Cursor:
        self.cursor = self.horizontal_move(self.cursor, delta)
        return self.cursor

    def move_y(self, delta_lines: int) -> Cursor:
        self.cursor = self.vertical_move(self.cursor, delta_lines)
        return self.cursor

    def clamp_cursor(self) -> Cursor:
        self.cursor = self.horizontal_move(self.cursor, 0)
        return self.cursor

    def insert_at_cursor(self, text: str) -> BufferDelta:
        """Insert ``text`` at the cursor. The cursor is left where it was."""

        start = ensure_offset(self.document, self.cursor, allow_end=True)
        with Transaction(self, "insert_text"):
            self.document.insert(start, text)
        return self._delta(start, start + len(text), text, "insert_text")

    def delete_range(self, start: int, end: int) -> BufferDelta:
        """Remove ``[start, end)`` and park the cursor on ``start``."""

        if start > end:
            start, end = end, start
        with Transaction(self, "delete_range"):
            removed = self.document.slice(start, end)
            self.document.remove(start, end)
            self.cursor = start
            self.clamp_cursor()
        return self._delta(start, end, removed, "delete_range")

    def snapshot(self) -> BufferView:
        line = self.document.char_to_line(self.cursor)
        return BufferView(
            name=self.name,
            version=self.document.version,
            text=self.text,
            cursor=self.cursor,
            line=line,
            column=self.cursor - self.document.line_to_char(line),
            filepath=self.filepath,
        )

    def _delta(self, start: int, end: int, text: str, label: str) -> BufferDelta:
        return BufferDelta(
            version=self.document.version,
            start=start,
            end=end,
            text=text,
            cursor=self.cursor,
            label=label,
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps a single text mutation in a telemetry span."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name, "cursor": self.buffer.cursor},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferDelta", "BufferView", "Cursor", "Transaction"]
