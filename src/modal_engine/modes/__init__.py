"""Mode handlers, the mode manager, and the event bus."""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult, is_printable
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .command_mode import CommandMode
from .quick_menu_mode import QuickMenuMode
from .mode_manager import DEFAULT_MODES, ModeManager

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "is_printable",
    "NormalMode",
    "InsertMode",
    "CommandMode",
    "QuickMenuMode",
    "DEFAULT_MODES",
    "ModeManager",
]
