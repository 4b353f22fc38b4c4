"""Interpreter for text carrying ``{TOKEN}`` and ``{TOKEN:NN}`` escapes.

Supported tokens, matched in this order:

``{CLR}``
    Clear screen RAM to spaces and home the cursor.
``{HOM}``
    Home the cursor without clearing.
``{CUP:NN}`` / ``{CDN:NN}``
    Move the cursor ``NN`` rows up or down.
``{CLT:NN}`` / ``{CRT:NN}``
    Add ``NN`` to, or subtract it from, the cursor offset.  ``CLT`` moves the
    cursor forward and ``CRT`` backward; existing formatted text depends on
    this, so the names are kept as they are.
``{COL:NN}``
    Switch the write colour to ``NN``.
``{RON}`` / ``{ROF}``
    Toggle reverse video for the characters that follow.

``NN`` is always two characters wide.  Malformed input never raises: the
interpreter stops and writes a diagnostic over the first two rows instead.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

from .buffer import ScreenBuffer
from .charset import reverse_char
from .colours import WHITE
from .text import LINE_FEED, place_char, place_text

LOGGER = logging.getLogger(__name__)

CLR: Final[str] = "CLR"
HOM: Final[str] = "HOM"
CUP: Final[str] = "CUP"
CDN: Final[str] = "CDN"
CLT: Final[str] = "CLT"
CRT: Final[str] = "CRT"
COL: Final[str] = "COL"
RON: Final[str] = "RON"
ROF: Final[str] = "ROF"

TOKENS: Final[tuple[str, ...]] = (CLR, HOM, CUP, CDN, CLT, CRT, COL, RON, ROF)

UNKNOWN_FORMATTER_ERROR: Final[str] = "UNKNOWN FORMATTER ERROR"
NUMBER_FORMAT_ERROR: Final[str] = "NUMBER FORMAT ERROR"
PARSING_ERROR: Final[str] = "PARSING ERROR"

DIAGNOSTIC_COLOUR: Final[int] = WHITE

TOKEN_START = "{"
_NAME_LENGTH = 3
_FIELD_WIDTH = 2
_FIELD_START = 1 + _NAME_LENGTH + 1
_BARE_TOKEN_LENGTH = 1 + _NAME_LENGTH + 1
_NUMERIC_TOKEN_LENGTH = _FIELD_START + _FIELD_WIDTH + 1

_NUMBER_FIELD = re.compile(r"[+-]?\d+")


class FormatterError(Exception):
    """Raised inside the interpreter when formatted text cannot be applied."""

    kind: str = PARSING_ERROR

    def __init__(self, position: int) -> None:
        super().__init__(f"{self.kind} AT POSITION {position}")
        self.position = position


class UnknownFormatterError(FormatterError):
    """Raised when ``{`` is not followed by a supported token name."""

    kind = UNKNOWN_FORMATTER_ERROR


class NumberFormatError(FormatterError):
    """Raised when a token's two-character field is not an integer."""

    kind = NUMBER_FORMAT_ERROR


class ParsingError(FormatterError):
    """Raised for any other malformed token, such as one cut off by the end of the text."""

    kind = PARSING_ERROR


@dataclass
class _InterpreterState:
    """Cursor and attribute state scoped to a single :func:`interpret` call."""

    width: int
    offset: int
    line_start: int
    colour: int
    reverse: bool = False
    index: int = 0

    def home(self) -> None:
        self.offset = 0
        self.line_start = 0

    def line_break(self) -> None:
        self.offset = self.line_start + self.width
        self.line_start = self.offset


def interpret(
    buffer: ScreenBuffer, text: str | None, offset: int, colour: int
) -> None:
    """Write formatted ``text`` into ``buffer`` starting at ``offset``.

    Errors are reported on screen rather than raised: the first row receives a
    reverse-video ``<KIND> AT POSITION <n>`` line and the second row the
    offending text.
    """

    if not text:
        return

    state = _InterpreterState(
        width=buffer.width, offset=offset, line_start=offset, colour=colour
    )
    try:
        _run(buffer, text, state)
    except FormatterError as exc:
        print_error_message(buffer, exc.kind, text, exc.position)
    except Exception:
        LOGGER.debug("unexpected failure interpreting %r", text, exc_info=True)
        print_error_message(buffer, PARSING_ERROR, text, state.index)


def print_error_message(
    buffer: ScreenBuffer, kind: str, text: str, position: int
) -> None:
    """Write the two-line diagnostic for ``kind`` at the top of ``buffer``."""

    LOGGER.warning("%s at position %d in formatted text %r", kind, position, text)
    headline = f"{kind} AT POSITION {position}"
    place_text(
        buffer, "".join(reverse_char(char) for char in headline), 0, DIAGNOSTIC_COLOUR
    )
    place_text(buffer, text, buffer.width, DIAGNOSTIC_COLOUR)


def _run(buffer: ScreenBuffer, text: str, state: _InterpreterState) -> None:
    length = len(text)
    while state.index < length:
        char = text[state.index]
        if char == TOKEN_START:
            _apply_token(buffer, text, state)
        elif char == LINE_FEED:
            state.line_break()
            state.index += 1
        else:
            if state.reverse:
                char = reverse_char(char)
            place_char(buffer, char, state.offset, state.colour)
            state.offset += 1
            state.index += 1


def _apply_token(buffer: ScreenBuffer, text: str, state: _InterpreterState) -> None:
    index = state.index
    if text.startswith(CLR, index + 1):
        state.index += _BARE_TOKEN_LENGTH
        buffer.fill_char(" ")
        state.home()
    elif text.startswith(HOM, index + 1):
        state.index += _BARE_TOKEN_LENGTH
        state.home()
    elif text.startswith(CUP, index + 1):
        state.offset -= _read_number(text, state) * state.width
    elif text.startswith(CDN, index + 1):
        state.offset += _read_number(text, state) * state.width
    elif text.startswith(CLT, index + 1):
        state.offset += _read_number(text, state)
    elif text.startswith(CRT, index + 1):
        state.offset -= _read_number(text, state)
    elif text.startswith(COL, index + 1):
        state.colour = _read_number(text, state)
    elif text.startswith(RON, index + 1):
        state.index += _BARE_TOKEN_LENGTH
        state.reverse = True
    elif text.startswith(ROF, index + 1):
        state.index += _BARE_TOKEN_LENGTH
        state.reverse = False
    else:
        raise UnknownFormatterError(index + 1)
    # A token cut short by the end of the text still takes effect first.
    if state.index > len(text):
        raise ParsingError(state.index)


def _read_number(text: str, state: _InterpreterState) -> int:
    start = state.index
    field_end = start + _FIELD_START + _FIELD_WIDTH
    if field_end > len(text):
        raise ParsingError(start)
    field = text[start + _FIELD_START : field_end]
    if _NUMBER_FIELD.fullmatch(field) is None:
        raise NumberFormatError(start + _FIELD_START)
    state.index += _NUMERIC_TOKEN_LENGTH
    return int(field)


__all__ = [
    "CDN",
    "CLR",
    "CLT",
    "COL",
    "CRT",
    "CUP",
    "DIAGNOSTIC_COLOUR",
    "FormatterError",
    "HOM",
    "NUMBER_FORMAT_ERROR",
    "NumberFormatError",
    "PARSING_ERROR",
    "ParsingError",
    "ROF",
    "RON",
    "TOKENS",
    "UNKNOWN_FORMATTER_ERROR",
    "UnknownFormatterError",
    "interpret",
    "print_error_message",
]
