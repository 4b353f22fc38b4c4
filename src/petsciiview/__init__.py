"""Character-cell screen emulation in the style of the Commodore 64 text mode."""
from __future__ import annotations

__version__ = "1.0.0"

from .buffer import ScreenBuffer
from .charset import LOWERCASE, UPPERCASE, reverse_char
from .colours import C64, valid_colour
from .config import ScreenConfigError, ScreenSettings, load_screen_config
from .formatter import (
    NUMBER_FORMAT_ERROR,
    PARSING_ERROR,
    UNKNOWN_FORMATTER_ERROR,
    interpret,
)
from .screen import PetsciiScreen
from .text import place_char, place_text

__all__ = [
    "C64",
    "LOWERCASE",
    "NUMBER_FORMAT_ERROR",
    "PARSING_ERROR",
    "PetsciiScreen",
    "ScreenBuffer",
    "ScreenConfigError",
    "ScreenSettings",
    "UNKNOWN_FORMATTER_ERROR",
    "UPPERCASE",
    "__version__",
    "interpret",
    "load_screen_config",
    "place_char",
    "place_text",
    "reverse_char",
    "valid_colour",
]
