"""Screen settings loaded from TOML configuration files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

import tomllib

from .colours import COLOUR_COUNT, valid_colour
from .screen import (
    DEFAULT_BACKGROUND_COLOUR,
    DEFAULT_BORDER_COLOUR,
    DEFAULT_CURSOR_COLOUR,
    DEFAULT_FONT_SIZE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    PetsciiScreen,
)

_DIMENSION_KEYS = ("width", "height", "font_size")
_COLOUR_KEYS = ("border_colour", "background_colour", "cursor_colour")
_FLAG_KEYS = ("test_picture",)
KNOWN_KEYS = frozenset(_DIMENSION_KEYS + _COLOUR_KEYS + _FLAG_KEYS)


class ScreenConfigError(ValueError):
    """Raised when a screen configuration file fails validation."""


@dataclass(frozen=True)
class ScreenSettings:
    """Validated attributes used to construct a :class:`PetsciiScreen`."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    border_colour: int = DEFAULT_BORDER_COLOUR
    background_colour: int = DEFAULT_BACKGROUND_COLOUR
    cursor_colour: int = DEFAULT_CURSOR_COLOUR
    font_size: int = DEFAULT_FONT_SIZE
    test_picture: bool = False

    def create_screen(self) -> PetsciiScreen:
        """Return a new screen configured with these settings."""

        return PetsciiScreen(
            self.width,
            self.height,
            border_colour=self.border_colour,
            background_colour=self.background_colour,
            cursor_colour=self.cursor_colour,
            font_size=self.font_size,
            test_picture=self.test_picture,
        )


def load_screen_config(config_path: Path) -> ScreenSettings:
    """Parse and validate the ``[screen]`` table stored at ``config_path``."""

    with config_path.open("rb") as stream:
        try:
            raw_data = tomllib.load(stream)
        except tomllib.TOMLDecodeError as exc:
            raise ScreenConfigError(f"invalid TOML in {config_path}: {exc}") from exc

    return parse_screen_settings(raw_data)


def parse_screen_settings(data: Mapping[str, Any]) -> ScreenSettings:
    """Return :class:`ScreenSettings` from already-decoded configuration ``data``."""

    screen = _parse_screen_section(data)
    unknown = sorted(set(screen) - KNOWN_KEYS)
    if unknown:
        raise ScreenConfigError(
            f"unknown [screen] keys: {', '.join(unknown)}"
        )

    overrides: Dict[str, Any] = {}
    for key in _DIMENSION_KEYS:
        if key in screen:
            overrides[key] = _coerce_dimension(key, screen[key])
    for key in _COLOUR_KEYS:
        if key in screen:
            overrides[key] = _coerce_colour(key, screen[key])
    for key in _FLAG_KEYS:
        if key in screen:
            value = screen[key]
            if not isinstance(value, bool):
                raise ScreenConfigError(f"screen.{key} must be a boolean")
            overrides[key] = value
    return ScreenSettings(**overrides)


def _parse_screen_section(data: Mapping[str, Any]) -> Mapping[str, Any]:
    screen = data.get("screen")
    if screen is None:
        raise ScreenConfigError("screen configuration requires a [screen] table")
    if not isinstance(screen, Mapping):
        raise ScreenConfigError("[screen] section must be a mapping")
    return screen


def _coerce_int(key: str, raw_value: Any) -> int:
    if isinstance(raw_value, bool):
        raise ScreenConfigError(f"screen.{key} must be an integer")
    if isinstance(raw_value, int):
        return raw_value
    if isinstance(raw_value, str):
        text = raw_value.strip()
        try:
            return int(text, base=10)
        except ValueError as exc:
            raise ScreenConfigError(
                f"screen.{key} must be an integer, received {raw_value!r}"
            ) from exc
    raise ScreenConfigError(f"screen.{key} must be an integer")


def _coerce_dimension(key: str, raw_value: Any) -> int:
    value = _coerce_int(key, raw_value)
    if value <= 0:
        raise ScreenConfigError(f"screen.{key} must be positive, received {value}")
    return value


def _coerce_colour(key: str, raw_value: Any) -> int:
    value = _coerce_int(key, raw_value)
    if not valid_colour(value):
        raise ScreenConfigError(
            f"screen.{key} {value} outside supported range 0-{COLOUR_COUNT - 1}"
        )
    return value


__all__ = [
    "KNOWN_KEYS",
    "ScreenConfigError",
    "ScreenSettings",
    "load_screen_config",
    "parse_screen_settings",
]
