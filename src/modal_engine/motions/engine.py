"""Motion resolution: pure functions from a cursor offset to a target offset.

Word motions classify characters only as alphanumeric or not; any change of
class between neighbours is a word boundary, so whitespace followed by
punctuation counts as one too.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from modal_engine.buffer import Buffer, Cursor, TextSequence
from modal_engine.intents import Motion

MotionRule = Callable[[Buffer, Cursor], Cursor]


def is_word_char(character: str) -> bool:
    return character.isalnum()


def _run_length(sequence: TextSequence, start: int, step: int, word: bool) -> int:
    """Count characters from ``start`` (moving by ``step``) sharing ``word``."""

    length = sequence.length()
    count = 0
    index = start
    while 0 <= index < length and is_word_char(sequence.char_at(index)) == word:
        count += 1
        index += step
    return count


def forward_word(buffer: Buffer, cursor: Cursor) -> Cursor:
    document = buffer.document
    if cursor >= document.length():
        return buffer.horizontal_move(cursor, 0)
    word = is_word_char(document.char_at(cursor))
    return buffer.horizontal_move(cursor, _run_length(document, cursor, 1, word))


def forward_word_end(buffer: Buffer, cursor: Cursor) -> Cursor:
    # Classification is anchored one character past the cursor, so the
    # result lands on the last character before the next boundary.
    start = buffer.horizontal_move(cursor, 1)
    if start == cursor:
        return cursor
    document = buffer.document
    word = is_word_char(document.char_at(start))
    return buffer.horizontal_move(cursor, _run_length(document, start, 1, word))


def back_word(buffer: Buffer, cursor: Cursor) -> Cursor:
    document = buffer.document
    cursor = min(cursor, document.length())
    if cursor == 0:
        return 0
    word = is_word_char(document.char_at(cursor - 1))
    return max(0, cursor - _run_length(document, cursor - 1, -1, word))


_RULES: Dict[Motion, MotionRule] = {
    Motion.LEFT: lambda buffer, cursor: buffer.horizontal_move(cursor, -1),
    Motion.RIGHT: lambda buffer, cursor: buffer.horizontal_move(cursor, 1),
    Motion.UP: lambda buffer, cursor: buffer.vertical_move(cursor, -1),
    Motion.DOWN: lambda buffer, cursor: buffer.vertical_move(cursor, 1),
    Motion.END_OF_LINE: lambda buffer, cursor: buffer.end_of_line(cursor),
    Motion.FORWARD_WORD: forward_word,
    Motion.FORWARD_WORD_END: forward_word_end,
    Motion.BACK_WORD: back_word,
}


def resolve(motion: Motion, buffer: Buffer, cursor: Optional[Cursor] = None) -> Cursor:
    """Return the target of ``motion`` without touching the buffer.

    ``cursor`` defaults to the buffer's own cursor.
    """

    origin = buffer.cursor if cursor is None else cursor
    return _RULES[motion](buffer, origin)


__all__ = [
    "back_word",
    "forward_word",
    "forward_word_end",
    "is_word_char",
    "resolve",
]
