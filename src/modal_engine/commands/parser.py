"""Colon-command tokenizer, lookup, and parameter coercion."""

from __future__ import annotations

import re
from typing import List, Sequence

from modal_engine.runtime.telemetry import span

from .models import (
    Command,
    ParameterKind,
    ParameterType,
    ParameterValue,
    ParsedCommand,
)

DEFAULT_PREFIX = ":"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class CommandParseError(ValueError):
    """Raised when a command line cannot be matched or coerced."""

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        command: Command | None = None,
    ) -> None:
        super().__init__(message)
        self.name = name
        self.command = command


def coerce(token: str, parameter: ParameterType) -> ParameterValue:
    """Convert ``token`` to the Python value declared by ``parameter``."""

    if parameter.kind is ParameterKind.OPTIONAL:
        assert parameter.inner is not None
        return coerce(token, parameter.inner)
    if parameter.kind is ParameterKind.INT:
        if not _INT_PATTERN.fullmatch(token):
            raise CommandParseError(f"could not parse int: {token}")
        return int(token)
    if parameter.kind is ParameterKind.FLOAT:
        if not _FLOAT_PATTERN.fullmatch(token):
            raise CommandParseError(f"could not parse float: {token}")
        return float(token)
    return token


def tokenize(line: str, *, prefix: str = DEFAULT_PREFIX) -> List[str]:
    """Strip the command prefix and split on single spaces."""

    if prefix and line.startswith(prefix):
        line = line[len(prefix) :]
    return line.split(" ")


def parse(
    commands: Sequence[Command], line: str, *, prefix: str = DEFAULT_PREFIX
) -> ParsedCommand:
    """Resolve ``line`` against ``commands``.

    The first command whose aliases contain the typed name wins. Declared
    parameters are coerced in order; a missing optional becomes ``None`` and
    a missing required parameter fails the whole parse. Extra tokens are
    ignored.
    """

    name, *arguments = tokenize(line, prefix=prefix)
    with span(
        "commands::parse",
        component="commands",
        metadata={"name": name, "arguments": len(arguments)},
    ) as handle:
        for index, command in enumerate(commands):
            if not command.matches(name):
                continue
            handle.add_metadata("kind", command.kind.value)
            values: List[ParameterValue] = []
            for position, parameter in enumerate(command.parameters):
                if position < len(arguments):
                    try:
                        values.append(coerce(arguments[position], parameter))
                    except CommandParseError as exc:
                        raise CommandParseError(
                            str(exc), name=name, command=command
                        ) from None
                elif parameter.optional:
                    values.append(None)
                else:
                    raise CommandParseError(
                        "too few parameters provided", name=name, command=command
                    )
            return ParsedCommand(index=index, command=command, parameters=tuple(values))

        handle.add_metadata("status", "not_found")
        raise CommandParseError(f"command not found: {name}", name=name)


__all__ = ["CommandParseError", "DEFAULT_PREFIX", "coerce", "parse", "tokenize"]
