import pytest

from rawedit.buffer import Buffer, OutOfBoundsError


def make_buffer(*lines: str) -> Buffer:
    return Buffer.from_lines(lines)


def test_empty_buffer_has_one_empty_line() -> None:
    assert Buffer().lines == ("",)
    assert Buffer.from_lines([]).lines == ("",)
    assert Buffer.from_text("").lines == ("",)


def test_queries() -> None:
    buffer = make_buffer("hello", "", "xy")

    assert buffer.line_count == 3
    assert buffer.line_length(0) == 5
    assert buffer.line_length(1) == 0
    assert buffer.line(2) == "xy"


def test_line_length_out_of_range_raises() -> None:
    with pytest.raises(OutOfBoundsError) as info:
        make_buffer("a").line_length(1)

    assert info.value.row == 1


def test_insert_returns_new_buffer_and_leaves_receiver() -> None:
    original = make_buffer("ab", "cd")

    updated = original.insert("x", 0, 1)

    assert updated.lines == ("axb", "cd")
    assert original.lines == ("ab", "cd")
    # untouched lines are shared, not copied
    assert updated.lines[1] is original.lines[1]


def test_insert_at_end_of_line_appends() -> None:
    assert make_buffer("ab").insert("c", 0, 2).lines == ("abc",)


def test_insert_rejects_bad_indexes() -> None:
    buffer = make_buffer("ab")

    with pytest.raises(OutOfBoundsError):
        buffer.insert("x", 1, 0)
    with pytest.raises(OutOfBoundsError):
        buffer.insert("x", 0, 3)
    with pytest.raises(OutOfBoundsError):
        buffer.insert("x", -1, 0)


def test_delete_removes_character() -> None:
    original = make_buffer("abc")

    assert original.delete(0, 1).lines == ("ac",)
    assert original.lines == ("abc",)


def test_delete_at_line_end_raises() -> None:
    with pytest.raises(OutOfBoundsError) as info:
        make_buffer("abc").delete(0, 3)

    assert info.value.col == 3


def test_split_line_adds_exactly_one_line() -> None:
    original = make_buffer("hello", "world")

    assert original.split_line(0, 2).lines == ("he", "llo", "world")
    assert original.split_line(0, 0).lines == ("", "hello", "world")
    assert original.split_line(1, 5).lines == ("hello", "world", "")
    assert original.lines == ("hello", "world")


def test_split_line_rejects_bad_column() -> None:
    with pytest.raises(OutOfBoundsError):
        make_buffer("ab").split_line(0, 5)


def test_delete_then_reinsert_restores_buffer() -> None:
    buffer = make_buffer("hello", "wörld", "")
    for row, line in enumerate(buffer.lines):
        for col in range(1, len(line) + 1):
            removed = line[col - 1]
            restored = buffer.delete(row, col - 1).insert(removed, row, col - 1)
            assert restored == buffer


def test_text_conversion() -> None:
    assert Buffer.from_text("a\nb\n").lines == ("a", "b")
    assert Buffer.from_text("a\nb").lines == ("a", "b")
    assert Buffer.from_text("a\n\n").lines == ("a", "")
    assert make_buffer("a", "").to_text() == "a\n\n"
    assert Buffer().to_text() == "\n"
