"""Text storage, cursor arithmetic, and buffer snapshots."""

from .buffer import Buffer, BufferDelta, BufferView, Cursor, Transaction
from .document import TextDocument
from .sequence import OutOfRangeError, TextSequence
from .validation import clamp, ensure_offset, ensure_span

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferView",
    "Cursor",
    "Transaction",
    "TextDocument",
    "TextSequence",
    "OutOfRangeError",
    "clamp",
    "ensure_offset",
    "ensure_span",
]
