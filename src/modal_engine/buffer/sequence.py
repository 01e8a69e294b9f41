"""Contract every text storage backing a buffer must satisfy."""

from __future__ import annotations

from typing import Protocol


class OutOfRangeError(IndexError):
    """Raised when an offset or line index falls outside a text sequence."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class TextSequence(Protocol):
    """Mutable character sequence with line indexing.

    Offsets count characters, not bytes. Read access is valid for
    ``0 <= offset < length()``; insertion may also target ``length()``.
    """

    def length(self) -> int:
        ...

    def line_count(self) -> int:
        ...

    def char_to_line(self, offset: int) -> int:
        ...

    def line_to_char(self, line: int) -> int:
        ...

    def line_length(self, line: int) -> int:
        """Characters in ``line`` including its terminator, if any."""
        ...

    def char_at(self, offset: int) -> str:
        ...

    def insert(self, offset: int, text: str) -> None:
        ...

    def remove(self, start: int, end: int) -> None:
        ...


__all__ = ["OutOfRangeError", "TextSequence"]
