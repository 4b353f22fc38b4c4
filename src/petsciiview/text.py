"""Plain text placement into a :class:`~petsciiview.buffer.ScreenBuffer`."""
from __future__ import annotations

from .buffer import ScreenBuffer

LINE_FEED = "\n"


def place_char(buffer: ScreenBuffer, char: str, offset: int, colour: int) -> None:
    """Write ``char`` and ``colour`` into the cell at ``offset``."""

    buffer.put_char(char, offset)
    buffer.put_colour(colour, offset)


def place_text(
    buffer: ScreenBuffer, text: str | None, offset: int, colour: int
) -> None:
    """Write ``text`` starting at ``offset`` using a single ``colour``.

    A line feed moves to the start of the next line relative to where the
    current line began, not to where the writes have drifted.  Braces are
    written literally.
    """

    if not text:
        return

    line_start = offset
    for char in text:
        if char == LINE_FEED:
            offset = line_start + buffer.width
            line_start = offset
        else:
            place_char(buffer, char, offset, colour)
            offset += 1


__all__ = ["LINE_FEED", "place_char", "place_text"]
