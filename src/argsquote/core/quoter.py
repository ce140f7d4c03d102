"""
Argument quoting for property-based argument forwarding.

Build tools such as Gradle (``--args=...``) and the Maven exec plugin
(``-Dexec.args=...``) accept a whole argument list as one string and split it
again with a weak decoder: whitespace separates tokens, a token opened with
``"`` or ``'`` runs to the next identical quote, and there is no way to escape
the quote character inside its own quoting style.

Every argument is therefore wrapped in whichever quote it does not contain.
An argument holding both ``'`` and ``"`` cannot survive the decoder.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum

APOSTROPHE = "'"
QUOTATION_MARK = '"'


class Classification(Enum):
    """Which quoting style an argument needs."""

    CONTAINS_QUOTE = "Embedded quotation mark detected"
    CONTAINS_APOSTROPHE = "Embedded apostrophe detected"
    PLAIN = "No worries"

    @property
    def message(self) -> str:
        return self.value


class QuoteError(ValueError):
    """Base class for arguments that cannot be quoted."""


class BothQuoteCharsPresent(QuoteError):
    """An argument contains both an apostrophe and a quotation mark."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"argument contains both ' and \": {argument}")


TraceHook = Callable[[str, Classification], None]


def classify(arg: str) -> Classification:
    """Classify an argument. Raises BothQuoteCharsPresent if it is unrepresentable."""
    has_quote = QUOTATION_MARK in arg
    has_apostrophe = APOSTROPHE in arg
    if has_quote and has_apostrophe:
        raise BothQuoteCharsPresent(arg)
    if has_quote:
        return Classification.CONTAINS_QUOTE
    if has_apostrophe:
        return Classification.CONTAINS_APOSTROPHE
    return Classification.PLAIN


def _token(arg: str, classification: Classification) -> str:
    if classification is Classification.CONTAINS_QUOTE:
        return APOSTROPHE + arg + APOSTROPHE
    # Apostrophes and plain text share the double-quoted form
    escaped = arg.replace(QUOTATION_MARK, "\\" + QUOTATION_MARK)
    return QUOTATION_MARK + escaped + QUOTATION_MARK


def quote_arg(arg: str) -> str:
    """Quote a single argument as one decoder token."""
    return _token(arg, classify(arg))


def quote_args(args: Iterable[str], trace: TraceHook | None = None) -> str:
    """Quote an argument list into one space-separated string.

    Args:
        args: Arguments in the order they should reach the program.
        trace: Optional hook called with each argument and its classification,
            in input order, as soon as the argument has been classified.

    Returns:
        The encoded string. An empty argument list gives "".

    Raises:
        BothQuoteCharsPresent: on the first argument that holds both quote
            characters. No partial result is produced.
    """
    tokens: list[str] = []
    for arg in args:
        classification = classify(arg)
        if trace is not None:
            trace(arg, classification)
        tokens.append(_token(arg, classification))
    return " ".join(tokens)
