"""Screen and colour RAM for a character-cell display."""
from __future__ import annotations

from typing import Iterator

from .colours import valid_colour

_SPACE = " "


class ScreenBuffer:
    """Parallel character and colour grids addressed by row-major offsets.

    Every write is validated before it touches either grid.  Offsets outside
    ``[0, width * height)`` and colours outside the C64 table are dropped
    silently so fills and text placement never need per-cell error handling.
    The dimensions are fixed; a different size requires a new buffer.
    """

    def __init__(self, width: int, height: int) -> None:
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise ValueError(f"width must be a positive integer, received {width!r}")
        if isinstance(height, bool) or not isinstance(height, int) or height <= 0:
            raise ValueError(f"height must be a positive integer, received {height!r}")
        self._width = width
        self._height = height
        self._cells: list[str] = [_SPACE] * (width * height)
        self._colours: list[int | None] = [None] * (width * height)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, height={self._height})"

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Return the number of cells in each grid."""

        return self._width * self._height

    def offset(self, x: int, y: int) -> int:
        """Translate ``(x, y)`` into a row-major offset without range checks."""

        return x + y * self._width

    def valid_offset(self, offset: int) -> bool:
        """Return ``True`` when ``offset`` addresses a cell of this buffer."""

        return 0 <= offset < self._width * self._height

    @staticmethod
    def valid_colour(colour: int) -> bool:
        return valid_colour(colour)

    # writes

    def put_char(self, char: str, offset: int) -> None:
        """Store ``char`` at ``offset``; bad offsets and multi-character values are dropped."""

        if self.valid_offset(offset) and len(char) == 1:
            self._cells[offset] = char

    def put_char_xy(self, char: str, x: int, y: int) -> None:
        self.put_char(char, self.offset(x, y))

    def put_colour(self, colour: int, offset: int) -> None:
        """Store ``colour`` in colour RAM when both offset and colour are valid."""

        if self.valid_offset(offset):
            if valid_colour(colour):
                self._colours[offset] = colour

    def put_colour_xy(self, colour: int, x: int, y: int) -> None:
        self.put_colour(colour, self.offset(x, y))

    def fill_char(self, char: str) -> None:
        for offset in range(self.size):
            self.put_char(char, offset)

    def fill_char_region(
        self, char: str, from_x: int, from_y: int, to_x: int, to_y: int
    ) -> None:
        """Fill the closed rectangle ``[from_x, to_x] × [from_y, to_y]``.

        Cells are visited row by row through :meth:`put_char_xy`, so the parts
        of the rectangle that fall outside the buffer are clipped.  Note that a
        column beyond the right edge maps onto the following row, exactly as
        an ``(x, y)`` write does.
        """

        for y in range(from_y, to_y + 1):
            for x in range(from_x, to_x + 1):
                self.put_char_xy(char, x, y)

    def fill_colour(self, colour: int) -> None:
        for offset in range(self.size):
            self.put_colour(colour, offset)

    def fill_colour_region(
        self, colour: int, from_x: int, from_y: int, to_x: int, to_y: int
    ) -> None:
        """Colour the closed rectangle ``[from_x, to_x] × [from_y, to_y]``."""

        for y in range(from_y, to_y + 1):
            for x in range(from_x, to_x + 1):
                self.put_colour_xy(colour, x, y)

    # reads

    def _require_offset(self, offset: int) -> int:
        if not self.valid_offset(offset):
            raise IndexError(f"offset {offset} outside screen of {self.size} cells")
        return offset

    def char_at(self, offset: int) -> str:
        """Return the character stored at ``offset``."""

        return self._cells[self._require_offset(offset)]

    def char_at_xy(self, x: int, y: int) -> str:
        return self.char_at(self.offset(x, y))

    def colour_at(self, offset: int) -> int | None:
        """Return the colour stored at ``offset`` or ``None`` if never written."""

        return self._colours[self._require_offset(offset)]

    def colour_at_xy(self, x: int, y: int) -> int | None:
        return self.colour_at(self.offset(x, y))

    @property
    def cells(self) -> tuple[str, ...]:
        """Return a snapshot of screen RAM."""

        return tuple(self._cells)

    @property
    def colours(self) -> tuple[int | None, ...]:
        """Return a snapshot of colour RAM."""

        return tuple(self._colours)

    def _row_slices(self) -> Iterator[slice]:
        for y in range(self._height):
            start = y * self._width
            yield slice(start, start + self._width)

    @property
    def rows(self) -> tuple[str, ...]:
        """Return screen RAM as one string per row."""

        return tuple("".join(self._cells[row]) for row in self._row_slices())

    @property
    def colour_rows(self) -> tuple[tuple[int | None, ...], ...]:
        """Return colour RAM as one tuple per row."""

        return tuple(tuple(self._colours[row]) for row in self._row_slices())


__all__ = ["ScreenBuffer"]
