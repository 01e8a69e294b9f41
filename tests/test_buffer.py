from __future__ import annotations

from modal_engine.buffer import Buffer


def make_buffer(text: str, cursor: int = 0) -> Buffer:
    buffer = Buffer.from_text(text)
    buffer.cursor = cursor
    return buffer


def test_horizontal_move_saturates_at_both_ends() -> None:
    buffer = make_buffer("abc")

    assert buffer.horizontal_move(0, -1) == 0
    assert buffer.horizontal_move(2, 1) == 2
    assert buffer.horizontal_move(1, 10) == 2
    assert buffer.horizontal_move(1, -10) == 0


def test_horizontal_move_crosses_line_breaks() -> None:
    buffer = make_buffer("ab\ncd")

    assert buffer.horizontal_move(1, 1) == 2
    assert buffer.horizontal_move(2, 1) == 3


def test_horizontal_move_on_empty_buffer_is_zero() -> None:
    buffer = Buffer()

    assert buffer.horizontal_move(0, 1) == 0
    assert buffer.horizontal_move(0, -1) == 0


def test_constructor_clamps_cursor() -> None:
    buffer = Buffer(document=Buffer.from_text("abc").document, cursor=10)

    assert buffer.cursor == 2


def test_find_line_position() -> None:
    buffer = make_buffer("ab\ncde")

    assert buffer.find_line_position(1) == 1
    assert buffer.find_line_position(3) == 0
    assert buffer.find_line_position(5) == 2


def test_vertical_move_clamps_column_to_shorter_line() -> None:
    buffer = make_buffer("abcdef\nxy\n123456", cursor=4)

    assert buffer.vertical_move(4, 1) == 9  # "\n" is the last char of "xy\n"
    assert buffer.vertical_move(4, 2) == 14


def test_vertical_move_recomputes_column_each_time() -> None:
    buffer = make_buffer("abcdef\nxy\n123456", cursor=4)

    buffer.move_y(1)
    buffer.move_y(1)

    # The column shrank on the short line and is not remembered.
    assert buffer.cursor == 12


def test_vertical_round_trip_restores_column_within_bounds() -> None:
    buffer = make_buffer("abc\nabcdef", cursor=1)

    buffer.move_y(1)
    assert buffer.cursor == 5
    buffer.move_y(-1)
    assert buffer.cursor == 1


def test_vertical_move_saturates_at_first_and_last_line() -> None:
    buffer = make_buffer("ab\ncd", cursor=1)

    assert buffer.vertical_move(1, -1) == 1
    assert buffer.vertical_move(4, 5) == 4


def test_vertical_move_onto_trailing_empty_line_stays_in_range() -> None:
    buffer = make_buffer("ab\n", cursor=1)

    assert buffer.vertical_move(1, 1) == 2


def test_end_of_line() -> None:
    buffer = make_buffer("abc\nde")

    assert buffer.end_of_line(0) == 3
    assert buffer.end_of_line(4) == 5


def test_end_of_line_on_empty_buffer() -> None:
    assert Buffer().end_of_line(0) == 0


def test_insert_at_cursor_leaves_cursor() -> None:
    buffer = make_buffer("ac", cursor=1)

    delta = buffer.insert_at_cursor("b")

    assert buffer.text == "abc"
    assert buffer.cursor == 1
    assert (delta.start, delta.end, delta.text) == (1, 2, "b")


def test_delete_range_orders_bounds_and_reports_removed_text() -> None:
    buffer = make_buffer("hello world", cursor=8)

    delta = buffer.delete_range(5, 0)

    assert buffer.text == " world"
    assert buffer.cursor == 0
    assert delta.text == "hello"
    assert delta.label == "delete_range"


def test_delete_range_clamps_cursor_at_end() -> None:
    buffer = make_buffer("abc", cursor=2)

    buffer.delete_range(1, 3)

    assert buffer.text == "a"
    assert buffer.cursor == 0


def test_snapshot_reports_line_and_column() -> None:
    buffer = Buffer.from_text("ab\ncd", name="notes", filepath="notes.txt")
    buffer.cursor = 4

    view = buffer.snapshot()

    assert view.text == "ab\ncd"
    assert (view.line, view.column) == (1, 1)
    assert view.name == "notes"
    assert view.filepath == "notes.txt"
