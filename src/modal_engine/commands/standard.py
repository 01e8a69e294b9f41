"""Built-in command table seeded at startup."""

from __future__ import annotations

from .models import STRING, Command, CommandKind, optional

STANDARD_COMMANDS: tuple[Command, ...] = (
    Command(
        names=("w", "write"),
        parameters=(optional(STRING),),
        kind=CommandKind.WRITE,
    ),
    Command(
        names=("e", "edit"),
        parameters=(STRING,),
        kind=CommandKind.EDIT,
    ),
    Command(
        names=("q", "quit"),
        parameters=(),
        kind=CommandKind.QUIT,
    ),
    Command(
        names=("bn", "bnext"),
        parameters=(),
        kind=CommandKind.BUFFER_NEXT,
    ),
    Command(
        names=("bp", "bprevious"),
        parameters=(),
        kind=CommandKind.BUFFER_PREVIOUS,
    ),
)


__all__ = ["STANDARD_COMMANDS"]
