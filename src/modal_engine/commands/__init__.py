"""Colon-command schemas, parser, and the standard command table."""

from .models import (
    FLOAT,
    INT,
    STRING,
    Command,
    CommandKind,
    ParameterKind,
    ParameterType,
    ParameterValue,
    ParsedCommand,
    optional,
)
from .parser import DEFAULT_PREFIX, CommandParseError, coerce, parse, tokenize
from .standard import STANDARD_COMMANDS

__all__ = [
    "Command",
    "CommandKind",
    "CommandParseError",
    "DEFAULT_PREFIX",
    "FLOAT",
    "INT",
    "ParameterKind",
    "ParameterType",
    "ParameterValue",
    "ParsedCommand",
    "STANDARD_COMMANDS",
    "STRING",
    "coerce",
    "optional",
    "parse",
    "tokenize",
]
