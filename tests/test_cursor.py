from rawedit.buffer import Buffer, Cursor


def make_buffer(*lines: str) -> Buffer:
    return Buffer.from_lines(lines)


def assert_in_bounds(cursor: Cursor, buffer: Buffer) -> None:
    assert 0 <= cursor.row <= buffer.line_count - 1
    assert 0 <= cursor.col <= buffer.line_length(cursor.row)


def test_moves_within_line() -> None:
    buffer = make_buffer("abc")

    cursor = Cursor(0, 1)

    assert cursor.right(buffer) == Cursor(0, 2)
    assert cursor.left(buffer) == Cursor(0, 0)


def test_right_allows_one_past_end_but_no_further() -> None:
    buffer = make_buffer("ab")

    cursor = Cursor(0, 2)

    assert cursor.right(buffer) == Cursor(0, 2)


def test_left_stops_at_zero() -> None:
    assert Cursor(0, 0).left(make_buffer("ab")) == Cursor(0, 0)


def test_up_and_down_stop_at_buffer_edges() -> None:
    buffer = make_buffer("a", "b")

    assert Cursor(0, 0).up(buffer) == Cursor(0, 0)
    assert Cursor(1, 0).down(buffer) == Cursor(1, 0)


def test_vertical_move_snaps_column_to_shorter_line() -> None:
    buffer = make_buffer("long line", "ab", "another long one")

    cursor = Cursor(0, 7).down(buffer)
    assert cursor == Cursor(1, 2)

    # the snapped column is not remembered
    assert cursor.down(buffer) == Cursor(2, 2)


def test_clamp_uses_row_after_clamping() -> None:
    buffer = make_buffer("abcdef", "xy")

    assert Cursor(9, 5).clamp(buffer) == Cursor(1, 2)
    assert Cursor(-3, -3).clamp(buffer) == Cursor(0, 0)


def test_move_to_column() -> None:
    buffer = make_buffer("abc", "defgh")

    assert Cursor(1, 4).move_to_column(buffer) == Cursor(1, 0)
    assert Cursor(0, 0).move_to_column(buffer, 9) == Cursor(0, 3)


def test_every_motion_keeps_cursor_in_bounds() -> None:
    buffer = make_buffer("", "abc", "a", "abcdef", "")
    moves = ("up", "down", "left", "right")
    for row in range(-1, buffer.line_count + 1):
        for col in range(-1, 8):
            start = Cursor(row, col)
            for move in moves:
                assert_in_bounds(getattr(start, move)(buffer), buffer)


def test_cursor_is_immutable_value() -> None:
    buffer = make_buffer("abc")
    cursor = Cursor(0, 0)

    moved = cursor.right(buffer)

    assert cursor == Cursor(0, 0)
    assert moved.as_tuple() == (0, 1)
