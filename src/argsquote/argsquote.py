#!/usr/bin/env python3
"""Quote shell arguments for a build tool's argument-forwarding property.

Gradle's ``--args=...`` and the Maven exec plugin's ``-Dexec.args=...`` take a
whole argument list as one string and split it back with simple rules: a
token opened by a double quote ends at the next double quote, one opened by
an apostrophe ends at the next apostrophe, and nothing can be escaped. This
tool turns "$@" into a string that survives that split.

Usage:
    argsquote [-d] [-s] [-p NAME] [-l PATH] [--] ARG...
    argsquote [-d] [-s] [-p NAME] [-l PATH] -c 'WORDS'

Typical use from a wrapper script:
    ./gradlew run --args="$(argsquote -- "$@")" || exit

Exit codes:
- 0: Success. Encoded string on stdout.
- 1: An argument contains both ' and ". Nothing on stdout.
- 2: Usage error or unusable log path. Nothing on stdout.
"""

from __future__ import annotations

import sys

from argsquote import __version__
from argsquote.core.config import (
    ENV_DEBUG,
    ENV_LOG,
    Options,
    UsageError,
    close_logging,
    configure_logging,
    log_event,
    parse_options,
    trace_argument,
)
from argsquote.core.parser import split_words
from argsquote.core.quoter import BothQuoteCharsPresent, quote_args

PROG = "argsquote"

EXIT_OK = 0
EXIT_CONFLICT = 1
EXIT_USAGE = 2

USAGE = f"""\
usage: {PROG} [options] [--] ARG...
       {PROG} [options] -c 'WORDS'

Quote ARGs into one string for --args / -Dexec.args style properties.

options:
  -d, --debug           trace how each argument is quoted (stderr)
  -s, --shell           quote the whole output as one bash word
  -p, --property NAME   print NAME=<encoded> instead of the bare string
  -c WORDS              take the arguments from a bash word list
  -l, --log PATH        append JSON audit records to PATH
  -h, --help            show this help and exit
  -V, --version         show the version and exit

environment:
  {ENV_DEBUG}=1       same as --debug
  {ENV_LOG}=PATH      same as --log PATH
"""


def _error(message: str) -> None:
    print(f"{PROG}: {message}", file=sys.stderr)


# Characters still special to bash inside double quotes
_DOUBLE_QUOTE_SPECIAL = ("\\", '"', "$", "`")


def shell_word(output: str) -> str:
    """Wrap rendered output as one bash word, for pasting at a prompt.

    Encoded output is mostly quote characters, so pick the wrapping that
    keeps it readable: single quotes unless it holds an apostrophe, then
    double quotes. History expansion of ! inside double quotes can't be
    escaped cleanly, so that case splices '\\'' into single quotes.
    """
    if "'" not in output:
        return "'" + output + "'"
    if "!" not in output:
        for c in _DOUBLE_QUOTE_SPECIAL:
            output = output.replace(c, "\\" + c)
        return '"' + output + '"'
    return "'" + output.replace("'", "'\\''") + "'"


def render(encoded: str, options: Options) -> str:
    """Apply the property prefix and shell wrapping to an encoded string."""
    output = encoded
    if options.property_name is not None:
        output = f"{options.property_name}={output}"
    if options.shell:
        output = shell_word(output)
    return output


def run(options: Options) -> int:
    """Quote the arguments named by options and print the result."""
    if options.command is not None:
        try:
            args = split_words(options.command)
        except ValueError as e:
            _error(f"-c: {e}")
            log_event("usage_error", message=str(e))
            return EXIT_USAGE
    else:
        args = list(options.args)

    try:
        encoded = quote_args(args, trace=trace_argument)
    except BothQuoteCharsPresent as e:
        _error(str(e))
        log_event("conflict", argument=e.argument)
        return EXIT_CONFLICT

    log_event("quoted", count=len(args), args=args)
    print(render(encoded, options))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_options(argv)
    except UsageError as e:
        _error(str(e))
        print(f"Try '{PROG} --help' for more information.", file=sys.stderr)
        return EXIT_USAGE

    if options.show_help:
        print(USAGE, end="")
        return EXIT_OK
    if options.show_version:
        print(f"{PROG} {__version__}")
        return EXIT_OK

    try:
        configure_logging(options)
    except OSError as e:
        close_logging()
        _error(f"cannot open log {options.log}: {e.strerror or e}")
        return EXIT_USAGE

    try:
        return run(options)
    finally:
        close_logging()


if __name__ == "__main__":
    sys.exit(main())
