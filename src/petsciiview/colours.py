"""Commodore 64 colour table shared by the screen buffer and its renderers."""
from __future__ import annotations

from typing import Final

C64: Final[tuple[str, ...]] = (
    "#000000",  # 00 black
    "#ffffff",  # 01 white
    "#880000",  # 02 red
    "#aaffee",  # 03 cyan
    "#cc44cc",  # 04 violet
    "#00cc55",  # 05 green
    "#0000aa",  # 06 blue
    "#eeee77",  # 07 yellow
    "#dd8855",  # 08 orange
    "#664400",  # 09 brown
    "#ff7777",  # 10 light red
    "#333333",  # 11 grey 1
    "#777777",  # 12 grey 2
    "#aaff66",  # 13 light green
    "#0088ff",  # 14 light blue
    "#bbbbbb",  # 15 grey 3
)

NAMES: Final[tuple[str, ...]] = (
    "black",
    "white",
    "red",
    "cyan",
    "violet",
    "green",
    "blue",
    "yellow",
    "orange",
    "brown",
    "light red",
    "grey 1",
    "grey 2",
    "light green",
    "light blue",
    "grey 3",
)

COLOUR_COUNT: Final[int] = len(C64)

BLACK: Final[int] = 0
WHITE: Final[int] = 1
BLUE: Final[int] = 6
LIGHT_BLUE: Final[int] = 14


def valid_colour(colour: object) -> bool:
    """Return ``True`` when ``colour`` indexes the C64 colour table."""

    if isinstance(colour, bool) or not isinstance(colour, int):
        return False
    return 0 <= colour < COLOUR_COUNT


def _require_colour(colour: int) -> int:
    if not valid_colour(colour):
        raise ValueError(
            f"colour {colour!r} outside supported range 0-{COLOUR_COUNT - 1}"
        )
    return colour


def colour_name(colour: int) -> str:
    """Return the descriptive name for ``colour``."""

    return NAMES[_require_colour(colour)]


def hex_colour(colour: int) -> str:
    """Return the ``#rrggbb`` string an external renderer should paint."""

    return C64[_require_colour(colour)]


def rgb_colour(colour: int) -> tuple[int, int, int]:
    """Return ``colour`` as an ``(r, g, b)`` triple of 8-bit channels."""

    value = hex_colour(colour)
    return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))


__all__ = [
    "BLACK",
    "BLUE",
    "C64",
    "COLOUR_COUNT",
    "LIGHT_BLUE",
    "NAMES",
    "WHITE",
    "colour_name",
    "hex_colour",
    "rgb_colour",
    "valid_colour",
]
