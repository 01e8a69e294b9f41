"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .sequence import OutOfRangeError, TextSequence


def ensure_offset(
    sequence: TextSequence, offset: int, *, allow_end: bool = False
) -> int:
    limit = sequence.length() if allow_end else sequence.length() - 1
    if offset < 0 or offset > limit:
        raise OutOfRangeError(
            f"Offset {offset} out of range for length {sequence.length()}",
            offset=offset,
        )
    return offset


def ensure_span(sequence: TextSequence, start: int, end: int) -> tuple[int, int]:
    ensure_offset(sequence, start, allow_end=True)
    ensure_offset(sequence, end, allow_end=True)
    if start > end:
        raise OutOfRangeError(f"Range start {start} after end {end}", offset=start)
    return start, end


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


__all__ = ["clamp", "ensure_offset", "ensure_span"]
