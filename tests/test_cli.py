from __future__ import annotations

import json


def _write(tmp_path, text: str) -> str:
    path = tmp_path / "quiz.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_parse_command_prints_json(app, tmp_path, sample_text) -> None:
    result = app.test_cli_runner().invoke(args=["quiz", "parse", _write(tmp_path, sample_text)])
    assert result.exit_code == 0
    steps = json.loads(result.output)
    assert len(steps) == 2
    assert steps[0]["question"]["ka"] == "რა არის დიაგნოზი?"


def test_parse_command_strict_fails_on_stray_line(app, tmp_path) -> None:
    path = _write(tmp_path, "//// Q\n// A\nstray")
    result = app.test_cli_runner().invoke(args=["quiz", "parse", "--strict", path])
    assert result.exit_code != 0
    assert "stray" in result.output


def test_format_command(app, tmp_path) -> None:
    result = app.test_cli_runner().invoke(args=["quiz", "format", _write(tmp_path, "//// Q\n// A\n/// B")])
    assert result.exit_code == 0
    assert result.output == "//// Q | Q\n// A | A\n/// B | B\n"


def test_check_command(app, tmp_path, sample_text) -> None:
    runner = app.test_cli_runner()
    ok = runner.invoke(args=["quiz", "check", _write(tmp_path, sample_text)])
    assert ok.exit_code == 0
    assert "OK: 2 steps" in ok.output

    bad = runner.invoke(args=["quiz", "check", _write(tmp_path, "//// Q\n/// A")])
    assert bad.exit_code == 1
