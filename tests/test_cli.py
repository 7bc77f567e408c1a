"""Tests for the mars-robots CLI entrypoint."""

from __future__ import annotations

import io
import sys
from unittest.mock import patch

import pytest

from mars_robots.cli import main

SAMPLE_INPUT = "5 3\n1 1 E\nRFRFRFRF\n\n3 2 N\nFRRFLLFFRRFLL\n\n0 3 W\nLLFFFLFLFL\n"


def _run(stdin_text: str, capsys: pytest.CaptureFixture[str]) -> tuple[str, str]:
    with patch.object(sys, "stdin", io.StringIO(stdin_text)):
        main([])
    captured = capsys.readouterr()
    return captured.out, captured.err


def test_prints_one_line_per_robot(capsys: pytest.CaptureFixture[str]) -> None:
    out, err = _run(SAMPLE_INPUT, capsys)
    assert out.splitlines() == ["1 1 E", "3 3 N LOST", "2 3 S"]
    assert err == ""


def test_empty_input_exits_non_zero(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run("", capsys)
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "input is empty" in err


def test_malformed_grid_writes_nothing_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run("5\n1 1 E\nF\n", capsys)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing y coordinate" in captured.err


def test_bad_instruction_keeps_earlier_results(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run("5 3\n1 1 E\nF\n1 1 E\nFQ\n", capsys)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["2 1 E"]
    assert "line 5: instruction must be F, L, or R" in captured.err


def test_rejects_unknown_arguments() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--verbose"])
    assert excinfo.value.code == 2
