"""Line-indexed text storage backing every buffer."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List, Optional

from .sequence import OutOfRangeError
from .validation import ensure_offset, ensure_span


def _split_keepends(text: str) -> List[str]:
    # Only "\n" terminates a line; the final piece has no terminator.
    pieces = text.split("\n")
    return [piece + "\n" for piece in pieces[:-1]] + [pieces[-1]]


@dataclass(slots=True)
class TextDocument:
    """Mutable text stored as a list of lines.

    Every line keeps its ``"\\n"`` terminator except the last one, which may
    be empty (an empty document, or text ending in a newline). Line start
    offsets are cached and searched with ``bisect`` so line lookups stay
    logarithmic; the cache is rebuilt lazily after a mutation.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    _length: int = 0
    _starts: Optional[List[int]] = None

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        return cls(_lines=_split_keepends(text), _length=len(text))

    def __str__(self) -> str:
        return "".join(self._lines)

    def length(self) -> int:
        return self._length

    def line_count(self) -> int:
        return len(self._lines)

    def char_to_line(self, offset: int) -> int:
        ensure_offset(self, offset, allow_end=True)
        return bisect_right(self._line_starts(), offset) - 1

    def line_to_char(self, line: int) -> int:
        self._ensure_line(line)
        return self._line_starts()[line]

    def line_length(self, line: int) -> int:
        self._ensure_line(line)
        return len(self._lines[line])

    def char_at(self, offset: int) -> str:
        ensure_offset(self, offset)
        line = self.char_to_line(offset)
        return self._lines[line][offset - self._line_starts()[line]]

    def slice(self, start: int, end: int) -> str:
        ensure_span(self, start, end)
        return str(self)[start:end]

    def insert(self, offset: int, text: str) -> None:
        ensure_offset(self, offset, allow_end=True)
        if not text:
            return
        line = self.char_to_line(offset)
        column = offset - self._line_starts()[line]
        current = self._lines[line]
        merged = current[:column] + text + current[column:]
        self._splice(line, line + 1, merged)
        self._length += len(text)

    def remove(self, start: int, end: int) -> None:
        ensure_span(self, start, end)
        if start == end:
            return
        first = self.char_to_line(start)
        last = self.char_to_line(end)
        starts = self._line_starts()
        merged = (
            self._lines[first][: start - starts[first]]
            + self._lines[last][end - starts[last] :]
        )
        self._splice(first, last + 1, merged)
        self._length -= end - start

    def _splice(self, first: int, stop: int, merged: str) -> None:
        replacement = _split_keepends(merged)
        if stop < len(self._lines):
            # Interior lines end with "\n": drop the empty tail piece.
            replacement.pop()
        self._lines[first:stop] = replacement
        self._starts = None
        self.version += 1

    def _line_starts(self) -> List[int]:
        if self._starts is None:
            starts: List[int] = []
            running = 0
            for line in self._lines:
                starts.append(running)
                running += len(line)
            self._starts = starts
        return self._starts

    def _ensure_line(self, line: int) -> None:
        if line < 0 or line >= len(self._lines):
            raise OutOfRangeError(
                f"Line {line} out of range for {len(self._lines)} lines"
            )


__all__ = ["TextDocument"]
