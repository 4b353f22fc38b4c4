"""Plain text placement tests."""
from __future__ import annotations

from petsciiview.buffer import ScreenBuffer
from petsciiview.text import place_char, place_text


def test_line_feed_moves_to_next_row(buffer: ScreenBuffer) -> None:
    place_text(buffer, "AB\nCD", 0, 3)

    assert buffer.rows[0].startswith("AB ")
    assert buffer.rows[1].startswith("CD ")
    assert [buffer.colour_at(offset) for offset in (0, 1, 40, 41)] == [3, 3, 3, 3]
    assert buffer.colour_at(2) is None


def test_line_feed_is_anchored_to_line_start(buffer: ScreenBuffer) -> None:
    place_text(buffer, "ABCDE\nF", 2, 1)

    assert buffer.char_at(42) == "F"


def test_consecutive_line_feeds_advance_one_row_each(buffer: ScreenBuffer) -> None:
    place_text(buffer, "A\n\nB", 5, 1)

    assert buffer.char_at(5) == "A"
    assert buffer.char_at(85) == "B"
    assert buffer.rows[1].strip() == ""


def test_braces_are_written_literally(buffer: ScreenBuffer) -> None:
    place_text(buffer, "{CLR}", 0, 1)

    assert buffer.rows[0].startswith("{CLR}")


def test_empty_and_missing_text_are_ignored(buffer: ScreenBuffer) -> None:
    place_text(buffer, "", 0, 1)
    place_text(buffer, None, 0, 1)

    assert set(buffer.cells) == {" "}
    assert set(buffer.colours) == {None}


def test_text_running_off_the_screen_is_dropped(buffer: ScreenBuffer) -> None:
    place_text(buffer, "XYZ", 999, 2)
    place_text(buffer, "Q", -1, 2)

    assert buffer.char_at(999) == "X"
    assert buffer.cells.count("Y") == 0
    assert "Q" not in buffer.cells


def test_invalid_colour_still_places_characters(buffer: ScreenBuffer) -> None:
    place_text(buffer, "HI", 0, 42)

    assert buffer.rows[0].startswith("HI")
    assert buffer.colour_at(0) is None


def test_place_char_writes_both_grids(buffer: ScreenBuffer) -> None:
    place_char(buffer, "M", 41, 13)

    assert buffer.char_at_xy(1, 1) == "M"
    assert buffer.colour_at_xy(1, 1) == 13
