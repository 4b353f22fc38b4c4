"""Display object pairing a :class:`ScreenBuffer` with its view attributes."""
from __future__ import annotations

import logging

from . import charset
from .buffer import ScreenBuffer
from .colours import BLUE, LIGHT_BLUE, valid_colour
from .formatter import interpret
from .text import place_char, place_text

LOGGER = logging.getLogger(__name__)

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 25
DEFAULT_BORDER_COLOUR = LIGHT_BLUE
DEFAULT_BACKGROUND_COLOUR = BLUE
DEFAULT_CURSOR_COLOUR = LIGHT_BLUE
DEFAULT_FONT_SIZE = 16


class PetsciiScreen:
    """40×25 style character screen with border, background and cursor colours.

    The screen owns exactly one :class:`ScreenBuffer`.  Changing either
    dimension or the font size replaces that buffer with a freshly allocated
    one, so references to the previous :attr:`buffer` must not be reused
    afterwards.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        *,
        border_colour: int = DEFAULT_BORDER_COLOUR,
        background_colour: int = DEFAULT_BACKGROUND_COLOUR,
        cursor_colour: int = DEFAULT_CURSOR_COLOUR,
        font_size: int = DEFAULT_FONT_SIZE,
        test_picture: bool = False,
    ) -> None:
        self._font_size = _require_font_size(font_size)
        self._border_colour = DEFAULT_BORDER_COLOUR
        self._background_colour = DEFAULT_BACKGROUND_COLOUR
        self._cursor_colour = DEFAULT_CURSOR_COLOUR
        self.set_border_colour(border_colour)
        self.set_background_colour(background_colour)
        self.set_cursor_colour(cursor_colour)
        self.screen_ram_enabled = True
        self.colour_ram_enabled = True
        self._buffer = self._allocate(width, height)
        if test_picture:
            self.print_test_picture()

    def _allocate(self, width: int, height: int) -> ScreenBuffer:
        buffer = ScreenBuffer(width, height)
        buffer.fill_char(" ")
        buffer.fill_colour(self._cursor_colour)
        LOGGER.debug("allocated %dx%d screen buffer", width, height)
        return buffer

    @property
    def buffer(self) -> ScreenBuffer:
        """Return the active screen buffer."""

        return self._buffer

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    def set_screen_width(self, width: int) -> None:
        """Reallocate the screen with ``width`` columns, discarding its contents."""

        self.resize(width, self.height)

    def set_screen_height(self, height: int) -> None:
        """Reallocate the screen with ``height`` rows, discarding its contents."""

        self.resize(self.width, height)

    def resize(self, width: int, height: int) -> None:
        self._buffer = self._allocate(width, height)

    @property
    def font_size(self) -> int:
        """Return the cell size in pixels an external renderer should use."""

        return self._font_size

    def set_font_size(self, size: int) -> None:
        """Change the font size, reallocating the screen and discarding its contents."""

        self._font_size = _require_font_size(size)
        self._buffer = self._allocate(self.width, self.height)

    # colours

    @property
    def border_colour(self) -> int:
        return self._border_colour

    @property
    def background_colour(self) -> int:
        return self._background_colour

    @property
    def cursor_colour(self) -> int:
        return self._cursor_colour

    def set_border_colour(self, colour: int) -> None:
        if valid_colour(colour):
            self._border_colour = colour

    def set_background_colour(self, colour: int) -> None:
        if valid_colour(colour):
            self._background_colour = colour

    def set_cursor_colour(self, colour: int) -> None:
        if valid_colour(colour):
            self._cursor_colour = colour

    # screen manipulation

    def put_char(self, char: str, offset: int) -> None:
        self._buffer.put_char(char, offset)

    def put_char_xy(self, char: str, x: int, y: int) -> None:
        self._buffer.put_char_xy(char, x, y)

    def put_colour(self, colour: int, offset: int) -> None:
        self._buffer.put_colour(colour, offset)

    def put_colour_xy(self, colour: int, x: int, y: int) -> None:
        self._buffer.put_colour_xy(colour, x, y)

    def fill_char(self, char: str) -> None:
        self._buffer.fill_char(char)

    def fill_char_region(
        self, char: str, from_x: int, from_y: int, to_x: int, to_y: int
    ) -> None:
        self._buffer.fill_char_region(char, from_x, from_y, to_x, to_y)

    def fill_colour(self, colour: int) -> None:
        self._buffer.fill_colour(colour)

    def fill_colour_region(
        self, colour: int, from_x: int, from_y: int, to_x: int, to_y: int
    ) -> None:
        self._buffer.fill_colour_region(colour, from_x, from_y, to_x, to_y)

    def print_text(self, text: str | None, x: int, y: int, colour: int) -> None:
        """Place plain ``text`` at ``(x, y)``."""

        self.print_text_at(text, self._buffer.offset(x, y), colour)

    def print_text_at(self, text: str | None, offset: int, colour: int) -> None:
        place_text(self._buffer, text, offset, colour)

    def print_formatted_text(
        self, text: str | None, x: int, y: int, colour: int
    ) -> None:
        """Interpret formatted ``text`` starting at ``(x, y)``."""

        self.print_formatted_text_at(text, self._buffer.offset(x, y), colour)

    def print_formatted_text_at(
        self, text: str | None, offset: int, colour: int
    ) -> None:
        interpret(self._buffer, text, offset, colour)

    # renderer accessors

    def effective_colour_at(self, offset: int) -> int | None:
        """Return the colour a renderer should use for the cell at ``offset``.

        With colour RAM disabled every cell is drawn in the cursor colour.
        """

        colour = self._buffer.colour_at(offset)
        if not self.colour_ram_enabled:
            return self._cursor_colour
        return colour

    @property
    def effective_colour_rows(self) -> tuple[tuple[int | None, ...], ...]:
        if not self.colour_ram_enabled:
            return tuple(
                (self._cursor_colour,) * self.width for _ in range(self.height)
            )
        return self._buffer.colour_rows

    @property
    def visible_rows(self) -> tuple[str, ...]:
        """Return the rows a renderer should draw; blank while screen RAM is off."""

        if not self.screen_ram_enabled:
            return tuple(" " * self.width for _ in range(self.height))
        return self._buffer.rows

    def print_test_picture(self) -> None:
        """Draw the title banner followed by both character maps."""

        from . import __version__

        colour = self._cursor_colour
        self.print_text(f"**** PETSCII View {__version__} ****", 6, 1, colour)

        self.print_text("CHARACTER MAP UPPERCASE:", 0, 4, colour)
        offset = 6 * self.width
        for char in charset.UPPERCASE:
            place_char(self._buffer, char, offset, colour)
            offset += 1

        self.print_text("CHARACTER MAP LOWERCASE:", 0, 15, colour)
        offset = 17 * self.width
        for char in charset.LOWERCASE:
            place_char(self._buffer, char, offset, colour)
            offset += 1


def _require_font_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"font size must be a positive integer, received {size!r}")
    return size


__all__ = [
    "DEFAULT_BACKGROUND_COLOUR",
    "DEFAULT_BORDER_COLOUR",
    "DEFAULT_CURSOR_COLOUR",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "PetsciiScreen",
]
