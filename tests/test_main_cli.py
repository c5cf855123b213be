"""Tests for the command line entry point."""

from __future__ import annotations

import io

import pytest

import main
from config.config import validate_config


def test_cli_prints_result(capsys: pytest.CaptureFixture[str]) -> None:
    code = main.main(["5 1 2 + 4 * + 3 -"])

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.strip() == "14"


def test_cli_reports_error_on_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    code = main.main(["3 4 %"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err.startswith("error: invalid postfix expression")


def test_cli_trace_prints_steps(capsys: pytest.CaptureFixture[str]) -> None:
    code = main.main(["--trace", "3 4 +"])

    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert lines == ["  PUSH 3.0", "  PUSH 4.0", "  ADD 3.0 + 4.0 = 7.0", "  RESULT = 7.0", "7"]


def test_cli_ieee_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main(["--ieee", "1 0 /"]) == 0
    assert capsys.readouterr().out.strip() == "inf"


def test_run_reads_one_expression_per_line() -> None:
    args = main.build_parser().parse_args([])
    stdin = io.StringIO("3 4 +\n\n2 3 ^\n3 +\n")
    stdout = io.StringIO()
    stderr = io.StringIO()

    code = main.run(args, stdin=stdin, stdout=stdout, stderr=stderr)

    assert code == 1
    assert stdout.getvalue().splitlines() == ["7", "8"]
    assert "needs two operands" in stderr.getvalue()


def test_format_result() -> None:
    assert main.format_result(7.0) == "7"
    assert main.format_result(0.1 + 0.2) == "0.3"
    assert main.format_result(-2.5) == "-2.5"


def test_default_config_is_valid() -> None:
    validate_config()


def test_cli_loose_decimal_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main(["1.2.3 1 +"]) == 1
    capsys.readouterr()

    code = main.main(["--loose_decimal", "1.2.3 1 +"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "2.2"
