"""Render PETSCII formatted text into a screen buffer and dump the result."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, TypedDict

from .config import ScreenSettings, load_screen_config
from .screen import PetsciiScreen

LOGGER = logging.getLogger(__name__)


class ScreenPayload(TypedDict):
    """Structured dump of a rendered screen."""

    width: int
    height: int
    rows: list[str]
    colours: list[list[int | None]]


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    """Return parsed command-line arguments for the render CLI."""

    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "text",
        nargs="?",
        help="Formatted text to render, e.g. '{CLR}{COL:07}HELLO'",
    )
    source.add_argument(
        "--file",
        type=Path,
        help="Read the text to render from this file",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a screen configuration TOML file",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Place the text literally without interpreting escape tokens",
    )
    parser.add_argument("--x", type=int, default=0, help="Start column")
    parser.add_argument("--y", type=int, default=0, help="Start row")
    parser.add_argument(
        "--colour",
        type=int,
        default=None,
        help="Initial text colour (defaults to the cursor colour)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit structured JSON with the screen and colour RAM",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity for the renderer.",
    )
    return parser.parse_args(argv)


def build_screen_payload(screen: PetsciiScreen) -> ScreenPayload:
    """Collect the screen and colour RAM of ``screen`` for serialisation."""

    return {
        "width": screen.width,
        "height": screen.height,
        "rows": list(screen.visible_rows),
        "colours": [list(row) for row in screen.effective_colour_rows],
    }


def render(
    text: str,
    settings: ScreenSettings,
    *,
    x: int = 0,
    y: int = 0,
    colour: int | None = None,
    plain: bool = False,
) -> PetsciiScreen:
    """Return a screen built from ``settings`` with ``text`` drawn at ``(x, y)``."""

    screen = settings.create_screen()
    resolved_colour = screen.cursor_colour if colour is None else colour
    if plain:
        screen.print_text(text, x, y, resolved_colour)
    else:
        screen.print_formatted_text(text, x, y, resolved_colour)
    return screen


def main(argv: List[str] | None = None) -> int:
    """Entry point for the ``petsciiview`` command."""

    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    settings = ScreenSettings()
    if args.config is not None:
        config_path: Path = args.config
        if not config_path.exists():
            raise SystemExit(f"configuration file not found: {config_path}")
        settings = load_screen_config(config_path)
        LOGGER.info("Loaded screen settings from %s", config_path)

    if args.file is not None:
        text_path: Path = args.file
        if not text_path.is_file():
            raise SystemExit(f"text file not found: {text_path}")
        text = text_path.read_text(encoding="utf-8")
    else:
        text = args.text

    screen = render(
        text,
        settings,
        x=args.x,
        y=args.y,
        colour=args.colour,
        plain=args.plain,
    )
    if args.json:
        print(json.dumps(build_screen_payload(screen), ensure_ascii=False))
    else:
        print("\n".join(screen.visible_rows))
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via python -m
    raise SystemExit(main())
