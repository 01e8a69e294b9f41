from __future__ import annotations

import pytest

from modal_engine.commands import (
    FLOAT,
    INT,
    STANDARD_COMMANDS,
    STRING,
    Command,
    CommandKind,
    CommandParseError,
    ParameterKind,
    ParameterType,
    coerce,
    optional,
    parse,
    tokenize,
)


def make_table() -> tuple[Command, ...]:
    return STANDARD_COMMANDS + (
        Command(
            names=("resize",),
            parameters=(INT, optional(FLOAT)),
            kind=CommandKind.WRITE,
        ),
    )


def test_write_with_path() -> None:
    parsed = parse(STANDARD_COMMANDS, ":w foo.txt")

    assert parsed.kind is CommandKind.WRITE
    assert parsed.index == 0
    assert parsed.parameters == ("foo.txt",)


def test_write_without_path_yields_empty_optional() -> None:
    parsed = parse(STANDARD_COMMANDS, ":write")

    assert parsed.kind is CommandKind.WRITE
    assert parsed.parameters == (None,)


def test_aliases_resolve_to_the_same_command() -> None:
    assert parse(STANDARD_COMMANDS, ":bn").kind is CommandKind.BUFFER_NEXT
    assert parse(STANDARD_COMMANDS, ":bnext").kind is CommandKind.BUFFER_NEXT
    assert parse(STANDARD_COMMANDS, ":bp").kind is CommandKind.BUFFER_PREVIOUS
    assert parse(STANDARD_COMMANDS, ":quit").kind is CommandKind.QUIT


def test_unknown_command() -> None:
    with pytest.raises(CommandParseError, match="command not found: bogus") as info:
        parse(STANDARD_COMMANDS, ":bogus")
    assert info.value.name == "bogus"


def test_names_are_case_sensitive() -> None:
    with pytest.raises(CommandParseError, match="command not found: W"):
        parse(STANDARD_COMMANDS, ":W")


def test_missing_required_parameter() -> None:
    with pytest.raises(CommandParseError, match="too few parameters provided"):
        parse(STANDARD_COMMANDS, ":e")


def test_extra_tokens_are_ignored() -> None:
    parsed = parse(STANDARD_COMMANDS, ":e a.txt b.txt")

    assert parsed.kind is CommandKind.EDIT
    assert parsed.parameters == ("a.txt",)


def test_numeric_parameters_are_coerced() -> None:
    parsed = parse(make_table(), ":resize 12 1.5")

    assert parsed.index == len(STANDARD_COMMANDS)
    assert parsed.parameters == (12, 1.5)


def test_int_coercion_failure() -> None:
    with pytest.raises(CommandParseError, match="could not parse int: twelve"):
        parse(make_table(), ":resize twelve")


def test_float_coercion_failure_inside_optional() -> None:
    with pytest.raises(CommandParseError, match="could not parse float: wide"):
        parse(make_table(), ":resize 3 wide")


def test_first_matching_command_wins() -> None:
    table = (
        Command(names=("x",), parameters=(), kind=CommandKind.QUIT),
        Command(names=("x",), parameters=(), kind=CommandKind.WRITE),
    )

    assert parse(table, ":x").kind is CommandKind.QUIT


def test_custom_prefix() -> None:
    parsed = parse(STANDARD_COMMANDS, ";w out.txt", prefix=";")

    assert parsed.parameters == ("out.txt",)


def test_tokenize_splits_on_single_spaces() -> None:
    assert tokenize(":w  a") == ["w", "", "a"]
    assert tokenize("w a") == ["w", "a"]


@pytest.mark.parametrize(
    "token, parameter, expected",
    [
        ("abc", STRING, "abc"),
        ("-4", INT, -4),
        ("+7", INT, 7),
        ("2", FLOAT, 2.0),
        ("1e3", FLOAT, 1000.0),
        ("9", optional(INT), 9),
    ],
)
def test_coerce(token: str, parameter: ParameterType, expected: object) -> None:
    assert coerce(token, parameter) == expected


def test_coerce_rejects_malformed_numbers() -> None:
    with pytest.raises(CommandParseError):
        coerce("1.5", INT)
    with pytest.raises(CommandParseError):
        coerce("1_000", INT)
    with pytest.raises(CommandParseError):
        coerce("", FLOAT)


def test_parameter_type_validation() -> None:
    with pytest.raises(ValueError):
        ParameterType(ParameterKind.OPTIONAL)
    with pytest.raises(ValueError):
        ParameterType(ParameterKind.INT, STRING)


def test_command_usage() -> None:
    write = STANDARD_COMMANDS[0]
    edit = STANDARD_COMMANDS[1]

    assert write.usage == "write [string]"
    assert edit.usage == "edit <string>"


def test_every_kind_has_a_standard_command() -> None:
    assert {command.kind for command in STANDARD_COMMANDS} == set(CommandKind)


def test_parse_errors_name_the_matched_command() -> None:
    with pytest.raises(CommandParseError) as missing:
        parse(STANDARD_COMMANDS, ":e")
    assert missing.value.command is STANDARD_COMMANDS[1]

    with pytest.raises(CommandParseError) as coercion:
        parse(make_table(), ":resize x")
    assert coercion.value.command.usage == "resize <int> [float]"

    with pytest.raises(CommandParseError) as unknown:
        parse(STANDARD_COMMANDS, ":nope")
    assert unknown.value.command is None
