"""Screen-code character tables for the two C64 character ROM banks.

Both tables are indexed by screen code.  Codes ``0x00-0x7F`` hold the normal
glyphs and ``0x80-0xFF`` their reversed counterparts, so the hardware reverse
bit becomes a rotation of 128 positions within one table.  Glyphs that have a
natural Unicode equivalent use it; the remaining graphics and every reversed
glyph live in the private use area the C64 Pro Mono font reserves for them
(``U+E000`` for the uppercase bank, ``U+E100`` for the lowercase bank).
"""
from __future__ import annotations

from typing import Final

_UPPERCASE_PRIVATE_BASE = 0xE000
_LOWERCASE_PRIVATE_BASE = 0xE100

REVERSE_BIT: Final[int] = 0x80


def _build_shared_glyphs(table: list[str]) -> None:
    table[0x00] = "@"
    table[0x1B] = "["
    table[0x1C] = "£"
    table[0x1D] = "]"
    table[0x1E] = "↑"
    table[0x1F] = "←"
    for code in range(0x20, 0x40):
        table[code] = chr(code)


def _build_uppercase() -> tuple[str, ...]:
    table = [chr(_UPPERCASE_PRIVATE_BASE + code) for code in range(0x100)]
    _build_shared_glyphs(table)
    for offset in range(26):
        table[0x01 + offset] = chr(ord("A") + offset)
    return tuple(table)


def _build_lowercase() -> tuple[str, ...]:
    table = [chr(_LOWERCASE_PRIVATE_BASE + code) for code in range(0x100)]
    _build_shared_glyphs(table)
    for offset in range(26):
        table[0x01 + offset] = chr(ord("a") + offset)
        table[0x41 + offset] = chr(ord("A") + offset)
    return tuple(table)


def _index_table(table: tuple[str, ...]) -> dict[str, int]:
    index: dict[str, int] = {}
    for code, char in enumerate(table):
        index.setdefault(char, code)
    return index


UPPERCASE: Final[tuple[str, ...]] = _build_uppercase()
LOWERCASE: Final[tuple[str, ...]] = _build_lowercase()

_UPPERCASE_CODES: Final[dict[str, int]] = _index_table(UPPERCASE)
_LOWERCASE_CODES: Final[dict[str, int]] = _index_table(LOWERCASE)


def screen_code(char: str) -> int | None:
    """Return the screen code of ``char``, preferring the uppercase bank."""

    code = _UPPERCASE_CODES.get(char)
    if code is None:
        code = _LOWERCASE_CODES.get(char)
    return code


def reverse_char(char: str) -> str:
    """Return the reverse-video counterpart of ``char``.

    The uppercase bank is consulted first; characters found in neither bank
    are returned unchanged.
    """

    code = _UPPERCASE_CODES.get(char)
    if code is not None:
        return UPPERCASE[(code + REVERSE_BIT) % 0x100]
    code = _LOWERCASE_CODES.get(char)
    if code is not None:
        return LOWERCASE[(code + REVERSE_BIT) % 0x100]
    return char


def is_reversed(char: str) -> bool:
    """Return ``True`` when ``char`` is a reversed glyph in either bank."""

    code = screen_code(char)
    return code is not None and bool(code & REVERSE_BIT)


__all__ = [
    "LOWERCASE",
    "REVERSE_BIT",
    "UPPERCASE",
    "is_reversed",
    "reverse_char",
    "screen_code",
]
