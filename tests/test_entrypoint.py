"""Tests for running argsquote as a program."""

from __future__ import annotations

import subprocess
import sys


def run_cli(*argv: str) -> subprocess.CompletedProcess:
    """Execute the argsquote module with arguments."""
    return subprocess.run(
        [sys.executable, "-m", "argsquote.argsquote", *argv],
        capture_output=True,
        text=True,
        timeout=10,
    )


class TestEntrypoint:
    def test_success(self):
        result = run_cli("O'Reilly", "a b")
        assert result.returncode == 0, f"stderr: {result.stderr}"
        assert result.stdout == '"O\'Reilly" "a b"\n'

    def test_conflict_exit_status(self):
        result = run_cli("a'b\"c")
        assert result.returncode == 1
        assert result.stdout == ""
        assert "a'b\"c" in result.stderr

    def test_usage_exit_status(self):
        result = run_cli("--bogus")
        assert result.returncode == 2
        assert result.stdout == ""

    def test_trace_does_not_touch_stdout(self):
        result = run_cli("-d", "x")
        assert result.returncode == 0
        assert result.stdout == '"x"\n'
        assert result.stderr == "Argument [x]: No worries\n"
