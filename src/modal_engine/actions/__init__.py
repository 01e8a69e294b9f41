"""High-level editing verbs invoked by the mode handlers."""

from .core import (
    apply_mode_change,
    apply_operator,
    backspace,
    delete_char,
    forward_delete,
    insert_text,
)
from .command import submit_command_line

__all__ = [
    "apply_mode_change",
    "apply_operator",
    "backspace",
    "delete_char",
    "forward_delete",
    "insert_text",
    "submit_command_line",
]
