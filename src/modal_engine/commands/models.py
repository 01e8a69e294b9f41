"""Dataclasses describing colon commands and their parameter schemas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

ParameterValue = Union[str, int, float, None]


class ParameterKind(str, Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    OPTIONAL = "optional"


@dataclass(frozen=True, slots=True)
class ParameterType:
    """Declared type of one command parameter.

    ``OPTIONAL`` wraps an ``inner`` type; every other kind is a leaf.
    """

    kind: ParameterKind
    inner: Optional["ParameterType"] = None

    def __post_init__(self) -> None:
        if self.kind is ParameterKind.OPTIONAL and self.inner is None:
            raise ValueError("optional parameter requires an inner type")
        if self.kind is not ParameterKind.OPTIONAL and self.inner is not None:
            raise ValueError(f"{self.kind.value} parameter cannot wrap a type")

    @property
    def optional(self) -> bool:
        return self.kind is ParameterKind.OPTIONAL

    def __str__(self) -> str:
        if self.inner is not None:
            return f"[{self.inner}]"
        return self.kind.value


STRING = ParameterType(ParameterKind.STRING)
INT = ParameterType(ParameterKind.INT)
FLOAT = ParameterType(ParameterKind.FLOAT)


def optional(inner: ParameterType) -> ParameterType:
    return ParameterType(ParameterKind.OPTIONAL, inner)


class CommandKind(str, Enum):
    """Tag selecting the handler a parsed command dispatches to."""

    WRITE = "write"
    EDIT = "edit"
    QUIT = "quit"
    BUFFER_NEXT = "bnext"
    BUFFER_PREVIOUS = "bprevious"


@dataclass(frozen=True, slots=True)
class Command:
    """Registered command: aliases, parameter schema, and handler tag."""

    names: Tuple[str, ...]
    parameters: Tuple[ParameterType, ...]
    kind: CommandKind

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError("command requires at least one name")
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def matches(self, name: str) -> bool:
        return name in self.names

    @property
    def usage(self) -> str:
        parts = [self.names[-1]]
        for parameter in self.parameters:
            parts.append(str(parameter) if parameter.optional else f"<{parameter}>")
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """Outcome of a successful parse, ready for dispatch."""

    index: int
    command: Command
    parameters: Tuple[ParameterValue, ...]

    @property
    def kind(self) -> CommandKind:
        return self.command.kind


__all__ = [
    "Command",
    "CommandKind",
    "FLOAT",
    "INT",
    "ParameterKind",
    "ParameterType",
    "ParameterValue",
    "ParsedCommand",
    "STRING",
    "optional",
]
