"""Tests for the Typer CLI."""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from linecalc.__main__ import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("LINECALC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LINECALC_SKIP_BLANK", raising=False)


@pytest.fixture
def linecalc_logger():
    """The package logger, restored to WARNING after the test."""
    logger = logging.getLogger("linecalc")
    yield logger
    logger.setLevel(logging.WARNING)


def test_run_reads_stdin():
    result = runner.invoke(app, ["run"], input="divide 4 5\nsum 5 5 6 8.5\nmaq 1\n")
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "4 divided by 5 is 0.8",
        "the sum of 5 5 6 8.5 is 24.5",
        "Error: parse command ...",
    ]


def test_run_skip_blank_flag():
    result = runner.invoke(app, ["run", "--skip-blank"], input="\nmin 3 1\n")
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["the minimum of 3 1 is 1"]


def test_run_skip_blank_from_env():
    result = runner.invoke(app, ["run"], input="\nmin 3 1\n", env={"LINECALC_SKIP_BLANK": "true"})
    assert result.stdout.splitlines() == ["the minimum of 3 1 is 1"]


def test_run_flag_overrides_env():
    result = runner.invoke(
        app, ["run", "--no-skip-blank"], input="\nmin 3 1\n", env={"LINECALC_SKIP_BLANK": "1"}
    )
    assert result.stdout.splitlines() == ["Error: parse command ...", "the minimum of 3 1 is 1"]


def test_eval_success():
    result = runner.invoke(app, ["eval", "average", "4", "3", "8.5", "4"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "the average of 4 3 8.5 4 is 4.875"


def test_eval_negative_operands():
    result = runner.invoke(app, ["eval", "min", "4", "-3", "-17"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "the minimum of 4 -3 -17 is -17"


def test_eval_error_exit_code():
    result = runner.invoke(app, ["eval", "divide", "4", "0"])
    assert result.exit_code == 1
    assert result.stdout.strip() == "Error: division by zero ..."


def test_commands_lists_keywords():
    result = runner.invoke(app, ["commands"])
    assert result.exit_code == 0
    for keyword in ("sum", "average", "min", "max", "divide"):
        assert keyword in result.output


# --- Logging ---

def test_verbose_sets_debug_level(linecalc_logger):
    result = runner.invoke(app, ["run", "-v"], input="sum 1 2\n")
    assert result.exit_code == 0
    assert linecalc_logger.level == logging.DEBUG


def test_log_level_from_env(linecalc_logger):
    result = runner.invoke(app, ["eval", "max", "1", "2"], env={"LINECALC_LOG_LEVEL": "info"})
    assert result.exit_code == 0
    assert linecalc_logger.level == logging.INFO


def test_verbose_keeps_stdout_clean():
    """DEBUG records go to stderr; stdout carries only result lines."""
    root = Path(__file__).resolve().parents[2]
    env = {**os.environ, "PYTHONPATH": str(root)}
    env.pop("LINECALC_LOG_LEVEL", None)
    proc = subprocess.run(
        [sys.executable, "-m", "linecalc", "run", "-v"],
        input="divide 4 5\nmaq 1\nsum 5 5 6 8.5\n",
        capture_output=True,
        text=True,
        env=env,
        timeout=60,
    )
    assert proc.returncode == 0
    assert proc.stdout.splitlines() == [
        "4 divided by 5 is 0.8",
        "Error: parse command ...",
        "the sum of 5 5 6 8.5 is 24.5",
    ]
    assert "parsed" in proc.stderr
