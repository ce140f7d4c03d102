"""
Reference model of the build tool's argument splitter.

The real splitter lives in the build tool. This model follows the same rules
and is used to check that quoted output survives the trip.
"""

from __future__ import annotations

QUOTE_CHARS = frozenset({'"', "'"})


def split_args(encoded: str) -> list[str]:
    """Split an encoded argument string the way the build tool does.

    - Whitespace outside quotes separates tokens
    - A token opened by " or ' runs to the next identical quote character
    - There are no escapes inside a quoted token

    Raises ValueError on an unterminated quote.
    """
    args: list[str] = []
    i = 0
    n = len(encoded)
    while i < n:
        c = encoded[i]
        if c.isspace():
            i += 1
            continue

        if c in QUOTE_CHARS:
            end = encoded.find(c, i + 1)
            if end == -1:
                raise ValueError(f"unterminated {c} at position {i}")
            args.append(encoded[i + 1 : end])
            i = end + 1
            continue

        j = i
        while j < n and not encoded[j].isspace():
            j += 1
        args.append(encoded[i:j])
        i = j
    return args
