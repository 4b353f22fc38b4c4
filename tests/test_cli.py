from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest

from petsciiview import cli
from petsciiview.charset import reverse_char
from petsciiview.config import ScreenSettings


def _write(tmp_path: Path, name: str, body: str) -> Path:
    path = tmp_path / name
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def test_main_prints_screen_rows(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["{COL:07}HI"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 25
    assert lines[0] == "HI" + " " * 38


def test_main_emits_json_payload(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--json", "--x", "1", "--y", "2", "{COL:07}HI"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["width"] == 40
    assert payload["height"] == 25
    assert payload["rows"][2][1:3] == "HI"
    assert payload["colours"][2][1] == 7
    assert payload["colours"][0][0] == 14


def test_main_plain_mode_keeps_tokens_literal(
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(["--plain", "--colour", "3", "{CLR}"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("{CLR}")


def test_main_reads_text_and_config_files(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write(
        tmp_path,
        "screen.toml",
        """
        [screen]
        width = 10
        height = 3
        """,
    )
    text_path = tmp_path / "banner.txt"
    text_path.write_text("AB\nCD", encoding="utf-8")

    cli.main(["--config", str(config_path), "--file", str(text_path)])

    assert capsys.readouterr().out.splitlines() == [
        "AB        ",
        "CD        ",
        "          ",
    ]


def test_main_shows_diagnostic_for_bad_input(
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(["{XYZ}"])

    lines = capsys.readouterr().out.splitlines()
    headline = "".join(reverse_char(char) for char in "UNKNOWN FORMATTER ERROR AT POSITION 1")
    assert lines[0].startswith(headline)
    assert lines[1].startswith("{XYZ}")


def test_main_rejects_missing_files(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="configuration file not found"):
        cli.main(["--config", str(tmp_path / "missing.toml"), "X"])
    with pytest.raises(SystemExit, match="text file not found"):
        cli.main(["--file", str(tmp_path / "missing.txt")])


def test_render_defaults_to_cursor_colour() -> None:
    screen = cli.render("A", ScreenSettings(width=4, height=1, cursor_colour=9))

    assert screen.buffer.colour_at(0) == 9
    payload = cli.build_screen_payload(screen)
    assert payload == {"width": 4, "height": 1, "rows": ["A   "], "colours": [[9, 9, 9, 9]]}
