"""Integration tests for CLI functionality."""

import json
import logging
import subprocess
import sys

import pytest

from btmath_pkg import config
from btmath_pkg.cli import main_entry


def run_cli(*args, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "btmath_pkg.cli", *args],
        capture_output=True,
        text=True,
        input=stdin,
        timeout=10,
    )


def test_cli_version():
    """Test --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_eval_human():
    """Test CLI evaluation with human output."""
    result = run_cli("--eval", "2+3*4")
    assert result.returncode == 0
    assert "Result of '2+3*4' = 14" in result.stdout


def test_cli_eval_json():
    """Test CLI evaluation with JSON output."""
    result = run_cli("-e", "sqrt(16)", "--format", "json")
    assert result.returncode == 0
    data = json.loads(result.stdout.strip())
    assert data["ok"] is True
    assert data["result"] == 4.0
    assert data["expression"] == "sqrt(16)"


def test_cli_error_exit_code():
    """Test that a failing expression prints an error and exits non-zero."""
    result = run_cli("5 / 0")
    assert result.returncode == 1
    assert "Error:" in result.stdout


def test_cli_module_entry():
    """Test running the package with python -m."""
    result = subprocess.run(
        [sys.executable, "-m", "btmath_pkg", "1 + 1"],
        capture_output=True,
        text=True,
        timeout=10,
    )
    assert result.returncode == 0
    assert "= 2" in result.stdout


def test_cli_repl():
    """Test the interactive loop fed from stdin."""
    result = run_cli(stdin="2 + 2\nhelp\nsqrt(-1)\nquit\n")
    assert result.returncode == 0
    assert "Result of '2 + 2' = 4" in result.stdout
    assert "Functions:" in result.stdout
    assert "Error:" in result.stdout


class TestMainEntry:
    """Call main_entry in-process."""

    @pytest.fixture(autouse=True)
    def restore_config(self, monkeypatch):
        monkeypatch.setattr(config, "OUTPUT_PRECISION", config.OUTPUT_PRECISION)
        monkeypatch.setattr(config, "MAX_STACK_DEPTH", config.MAX_STACK_DEPTH)
        yield
        logger = logging.getLogger("btmath")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    def test_multiple_expressions(self, capsys):
        assert main_entry(["2*5/2", "pow(2, 10)"]) == 0
        out = capsys.readouterr().out
        assert "Result of '2*5/2' = 5" in out
        assert "Result of 'pow(2, 10)' = 1024" in out

    def test_one_failure_fails_run(self, capsys):
        assert main_entry(["1 + 1", "(1 + 1"]) == 1
        out = capsys.readouterr().out
        assert "= 2" in out
        assert "Error: Missing ')'" in out

    def test_rpn_flag(self, capsys):
        assert main_entry(["--rpn", "2 + 3 * 4"]) == 0
        assert "RPN: 2 3 4 * +" in capsys.readouterr().out

    def test_precision_flag(self, capsys):
        assert main_entry(["-p", "3", "PI"]) == 0
        assert "= 3.14" in capsys.readouterr().out

    def test_max_stack_depth_flag(self, capsys):
        assert main_entry(["--max-stack-depth", "2", "1 ^ 1 ^ 1"]) == 1
        assert "Value stack exceeds 2 entries" in capsys.readouterr().out

    def test_json_lines(self, capsys):
        assert main_entry(["--format", "json", "1", "2 +"]) == 1
        lines = capsys.readouterr().out.strip().splitlines()
        assert [json.loads(line)["ok"] for line in lines] == [True, False]

    def test_log_file(self, tmp_path, capsys):
        log_file = tmp_path / "btmath.log"
        assert main_entry(["--log-level", "INFO", "--log-file", str(log_file), "1/0"]) == 1
        assert "DIVISION_BY_ZERO" in log_file.read_text()


@pytest.mark.slow
def test_cli_many_expressions():
    """Test a long batch of expressions in one invocation."""
    expressions = [f"{i} * 2" for i in range(200)]
    result = run_cli(*expressions)
    assert result.returncode == 0
    assert result.stdout.count("Result of") == 200
