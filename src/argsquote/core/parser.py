"""
Bash word-list parsing using bashlex.

Lets a caller hand over an argument list as it would be typed at a prompt,
e.g. ``-c "run --name 'O Reilly' --verbose"``.
"""

from __future__ import annotations

from typing import Any

import bashlex

# Node kinds that carry a plain word after quote removal
WORD_KINDS = frozenset({"word", "assignment"})


def split_words(command: str) -> list[str]:
    """Parse a bash string into the words of one simple command.

    Quote removal is applied; expansions are kept literally.
    Raises ValueError for parse errors, pipelines, lists and redirects.
    """
    if not command or not command.strip():
        return []

    try:
        parts = bashlex.parse(command)
    except (bashlex.errors.ParsingError, NotImplementedError) as e:
        raise ValueError(f"invalid bash: {e}") from None

    if len(parts) != 1 or parts[0].kind != "command":
        raise ValueError("expected a single simple command")
    return _command_words(parts[0], command)


def _command_words(node: Any, command: str) -> list[str]:
    words = []
    for part in node.parts:
        if part.kind not in WORD_KINDS:
            raise ValueError(f"unsupported construct: {part.kind}")
        # bashlex does not decode $'...' escapes
        start, end = part.pos
        if "$'" in command[start:end]:
            raise ValueError("unsupported construct: ANSI-C quoting")
        words.append(part.word)
    return words
