"""UI-agnostic modal editing core."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "config",
    "editor",
    "intents",
    "keymaps",
    "modes",
    "motions",
    "persistence",
    "runtime",
]

__version__ = "0.1.0"
