"""Key stroke to intent bindings."""

from .models import Binding, KeyStroke
from .keymap import Keymap, KeymapConflictError
from .defaults import DEFAULT_BINDINGS, load_default_keymap

__all__ = [
    "Binding",
    "KeyStroke",
    "Keymap",
    "KeymapConflictError",
    "DEFAULT_BINDINGS",
    "load_default_keymap",
]
