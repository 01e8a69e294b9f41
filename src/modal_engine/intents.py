"""Resolved input intents: the only things the core accepts from a host."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Motion(str, Enum):
    """Cursor motions resolved by :mod:`modal_engine.motions`."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    END_OF_LINE = "end_of_line"
    FORWARD_WORD = "forward_word"
    FORWARD_WORD_END = "forward_word_end"
    BACK_WORD = "back_word"


class Action(str, Enum):
    """Pending operators combined with the next Normal-mode motion."""

    DELETE = "delete"
    REPLACE = "replace"


class ModeChange(str, Enum):
    INSERT = "insert"
    INSERT_AFTER = "insert_after"
    INSERT_END = "insert_end"
    INSERT_START = "insert_start"
    ESCAPE = "escape"
    ENTER_COMMAND = "enter_command"
    ENTER_QUICK_MENU = "enter_quick_menu"


class Edit(str, Enum):
    """Non-printing editing keys."""

    BACKSPACE = "backspace"
    NEWLINE = "newline"
    TAB = "tab"
    DELETE = "delete"
    DELETE_CHAR = "delete_char"
    SUBMIT = "submit"


@dataclass(frozen=True, slots=True)
class TextInput:
    """A single typed character."""

    text: str

    def __post_init__(self) -> None:
        if len(self.text) != 1:
            raise ValueError("TextInput carries exactly one character")
        if unicodedata.category(self.text) == "Cs":
            raise ValueError("TextInput cannot carry a lone surrogate")


Intent = Union[Motion, Action, ModeChange, Edit, TextInput]


__all__ = [
    "Action",
    "Edit",
    "Intent",
    "ModeChange",
    "Motion",
    "TextInput",
]
