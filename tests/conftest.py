"""Pytest configuration to ensure the petsciiview package is importable."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

_SRC = Path(__file__).resolve().parents[1] / "src"
_src_str = str(_SRC)
if _src_str not in sys.path:
    sys.path.insert(0, _src_str)

from petsciiview.buffer import ScreenBuffer  # noqa: E402


@pytest.fixture
def buffer() -> ScreenBuffer:
    """Return a 40×25 buffer with blank screen RAM and unset colour RAM."""

    return ScreenBuffer(40, 25)
