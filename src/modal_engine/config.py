"""Immutable startup configuration handed to the control loop."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from modal_engine.commands import DEFAULT_PREFIX
from modal_engine.keymaps import Keymap, load_default_keymap

ENV_PREFIX = "MODAL_ENGINE_"
DEFAULT_TAB_WIDTH = 4


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True)
class EditorConfig:
    tab_width: int = DEFAULT_TAB_WIDTH
    command_prefix: str = DEFAULT_PREFIX
    keymap: Keymap = field(default_factory=load_default_keymap)

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            raise ValueError("tab_width must be positive")
        if len(self.command_prefix) != 1:
            raise ValueError("command_prefix must be a single character")

    @classmethod
    def from_env(cls) -> "EditorConfig":
        tab_width = _env_int(f"{ENV_PREFIX}TAB_WIDTH", DEFAULT_TAB_WIDTH)
        if tab_width < 1:
            tab_width = DEFAULT_TAB_WIDTH
        return cls(tab_width=tab_width)


__all__ = ["DEFAULT_TAB_WIDTH", "EditorConfig"]
