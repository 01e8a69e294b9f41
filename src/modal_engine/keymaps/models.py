"""Dataclasses describing key strokes and the intents they are bound to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from modal_engine.editor import EditorMode
from modal_engine.intents import Action, Edit, Intent, ModeChange, Motion, TextInput

_INTENT_TYPES = (Motion, Action, ModeChange, Edit, TextInput)


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press.

    Printable keys use the produced character as ``key`` (``"A"``, ``"$"``),
    named keys use upper-case names (``"ESC"``, ``"ENTER"``).
    """

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers) + f"+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+["`` style notation."""

        if token == "+" or "+" not in token:
            return cls(token)
        *modifiers, key = token.split("+")
        return cls(key or "+", tuple(modifiers))


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a stroke in one mode with a resolved intent."""

    mode: EditorMode
    stroke: KeyStroke
    intent: Intent
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.intent, _INTENT_TYPES):
            raise TypeError(f"unsupported intent {self.intent!r}")
        object.__setattr__(self, "mode", EditorMode(self.mode))

    @property
    def id(self) -> str:
        return f"{self.mode.value}.{self.stroke.token}"


__all__ = ["Binding", "KeyStroke"]
