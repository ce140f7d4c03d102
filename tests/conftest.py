"""
Shared test fixtures for argsquote tests.
"""

import pytest

from argsquote.core.config import ENV_DEBUG, ENV_LOG, close_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment and loggers out of every test."""
    monkeypatch.delenv(ENV_DEBUG, raising=False)
    monkeypatch.delenv(ENV_LOG, raising=False)
    yield
    close_logging()


@pytest.fixture
def cli(capsys):
    """Run main() with argv and return (exit code, stdout, stderr)."""
    from argsquote.argsquote import main

    def _run(*argv: str):
        code = main(list(argv))
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run
