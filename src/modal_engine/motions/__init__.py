"""Motion engine."""

from modal_engine.intents import Motion

from .engine import back_word, forward_word, forward_word_end, is_word_char, resolve

__all__ = [
    "Motion",
    "back_word",
    "forward_word",
    "forward_word_end",
    "is_word_char",
    "resolve",
]
