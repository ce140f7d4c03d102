"""argsquote options and logging."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import IO, Any

import structlog

from argsquote.core.quoter import Classification

ENV_DEBUG = "ARGSQUOTE_DEBUG"
ENV_LOG = "ARGSQUOTE_LOG"

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class UsageError(ValueError):
    """Malformed invocation."""


@dataclass(frozen=True)
class Options:
    """Parsed invocation."""

    trace: bool = False
    property_name: str | None = None  # e.g. '--args' or '-Dexec.args'
    shell: bool = False  # bash-quote the whole output
    command: str | None = None  # bash word list given with -c
    log: Path | None = None  # None = no audit log
    args: tuple[str, ...] = field(default_factory=tuple)
    """Arguments to quote, in order."""

    show_help: bool = False
    show_version: bool = False


# === Option Parsing ===

# Flags that take no value, mapped to the Options field they set
_SWITCHES = {
    "-d": "trace",
    "--debug": "trace",
    "-s": "shell",
    "--shell": "shell",
    "-h": "show_help",
    "--help": "show_help",
    "-V": "show_version",
    "--version": "show_version",
}

# Flags that take a value
_VALUED = {
    "-p": "property_name",
    "--property": "property_name",
    "-c": "command",
    "-l": "log",
    "--log": "log",
}


def _env_options(environ: Mapping[str, str]) -> Options:
    """Defaults taken from the environment. Flags override these."""
    log = environ.get(ENV_LOG)
    return Options(
        trace=environ.get(ENV_DEBUG, "").strip().lower() in TRUE_VALUES,
        log=Path(log).expanduser() if log else None,
    )


def _next_value(argv: list[str], i: int, name: str) -> tuple[str, int]:
    """Take the value of option ``name`` from argv[i]."""
    if i >= len(argv):
        raise UsageError(f"option '{name}' requires a value")
    return argv[i], i + 1


def _set_value(settings: dict[str, Any], name: str, value: str) -> None:
    # -c '' is an empty word list; every other value must be non-empty
    if not value and name != "-c":
        raise UsageError(f"option '{name}' requires a value")
    settings[_VALUED[name]] = value


def parse_options(
    argv: list[str], environ: Mapping[str, str] | None = None
) -> Options:
    """Parse command line arguments into Options. Raises UsageError on bad input."""
    if environ is None:
        environ = os.environ
    options = _env_options(environ)
    settings: dict[str, Any] = {}
    args: list[str] = []

    i = 0
    while i < len(argv):
        token = argv[i]
        i += 1

        if token == "--":
            args.extend(argv[i:])
            break
        if token == "-" or not token.startswith("-"):
            args.append(token)
            args.extend(argv[i:])
            break

        if not token.startswith("--"):
            # getopts-style cluster: -ds, -dp NAME, -pNAME
            for pos in range(1, len(token)):
                name = "-" + token[pos]
                if name in _SWITCHES:
                    settings[_SWITCHES[name]] = True
                elif name in _VALUED:
                    value = token[pos + 1 :]
                    if not value:
                        value, i = _next_value(argv, i, name)
                    _set_value(settings, name, value)
                    break
                else:
                    raise UsageError(f"unknown option '{name}'")
            continue

        name, has_inline, inline = token.partition("=")
        if name in _SWITCHES:
            if has_inline:
                raise UsageError(f"option '{name}' takes no value")
            settings[_SWITCHES[name]] = True

        elif name in _VALUED:
            if has_inline:
                value = inline
            else:
                value, i = _next_value(argv, i, name)
            _set_value(settings, name, value)

        else:
            raise UsageError(f"unknown option '{token}'")

    if "log" in settings:
        settings["log"] = Path(settings["log"]).expanduser()
    if "command" in settings and args:
        raise UsageError("'-c' cannot be combined with positional arguments")

    return replace(options, args=tuple(args), **settings)


# === Logging ===

_tracer: structlog.BoundLogger | None = None
_audit: structlog.BoundLogger | None = None
_audit_file: IO[str] | None = None


def _render_trace(_logger: Any, _method: str, event_dict: dict) -> str:
    """Render a trace event as a plain line."""
    return f"Argument [{event_dict['argument']}]: {event_dict['event']}"


def configure_logging(options: Options, stream: IO[str] | None = None) -> None:
    """Configure tracing and audit logging. Call once at startup.

    Trace lines go to ``stream`` (stderr by default), never to stdout.
    """
    global _tracer, _audit, _audit_file
    close_logging()

    if options.trace:
        _tracer = structlog.wrap_logger(
            structlog.PrintLogger(file=stream if stream is not None else sys.stderr),
            processors=[_render_trace],
            wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        )

    if options.log is not None:
        options.log.parent.mkdir(parents=True, exist_ok=True)
        _audit_file = open(options.log, "a", encoding="utf-8")
        _audit = structlog.wrap_logger(
            structlog.WriteLogger(file=_audit_file),
            processors=[
                structlog.processors.TimeStamper(fmt="iso", key="ts"),
                structlog.processors.add_log_level,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        )


def close_logging() -> None:
    """Drop configured loggers and close the audit log file."""
    global _tracer, _audit, _audit_file
    _tracer = None
    _audit = None
    if _audit_file is not None:
        _audit_file.close()
        _audit_file = None


def trace_argument(arg: str, classification: Classification) -> None:
    """Emit one trace line. No-op if tracing is off."""
    if _tracer is None:
        return
    _tracer.info(classification.message, argument=arg)


def log_event(event: str, **fields: Any) -> None:
    """Append an audit record. No-op if no log path is configured."""
    if _audit is None:
        return
    _audit.info(event, **fields)
