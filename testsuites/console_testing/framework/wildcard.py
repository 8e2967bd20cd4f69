"""
================================================================================
Wildcard ("like") Matching
================================================================================

Pattern matching used by the ``expect_like`` family of assertions. Patterns
are translated to anchored regular expressions, the same approach as
``fnmatch.translate``, with this grammar:

    *       any run of characters, including none and line breaks
    ?       exactly one character
    #       exactly one decimal digit
    [abc]   one character from the set; ranges like [a-z] are allowed
    [!abc]  one character not in the set

Everything else is literal and matching is case-sensitive. When an escape
character is given, the character following it is taken literally, so with
escape ``\\`` the pattern ``100\\*`` only matches ``100*``.

================================================================================
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional, Pattern


WILDCARD_CHARACTERS = ("[", "]", "?", "*", "#")


def contains_wildcards(text: str) -> bool:
    """Return True if ``text`` contains any wildcard metacharacter."""
    return any(c in text for c in WILDCARD_CHARACTERS)


def _translate(pattern: str, escape_character: Optional[str]) -> str:
    parts = []
    i = 0
    n = len(pattern)

    while i < n:
        c = pattern[i]
        i += 1

        if escape_character is not None and c == escape_character:
            if i < n:
                parts.append(re.escape(pattern[i]))
                i += 1
            else:
                parts.append(re.escape(c))
        elif c == "*":
            # Collapse runs of '*' so the regex does not backtrack per star
            while i < n and pattern[i] == "*":
                i += 1
            parts.append(".*")
        elif c == "?":
            parts.append(".")
        elif c == "#":
            parts.append("[0-9]")
        elif c == "[":
            end = _find_set_end(pattern, i)
            if end < 0:
                parts.append(re.escape(c))
            else:
                parts.append(_translate_set(pattern[i:end]))
                i = end + 1
        else:
            parts.append(re.escape(c))

    return r"(?s:" + "".join(parts) + r")\Z"


def _find_set_end(pattern: str, start: int) -> int:
    """Index of the ']' closing a set that opens just before ``start``, or -1."""
    j = start
    if j < len(pattern) and pattern[j] == "!":
        j += 1
    # A ']' directly after '[' or '[!' is a member, not the terminator
    if j < len(pattern) and pattern[j] == "]":
        j += 1
    return pattern.find("]", j)


def _translate_set(body: str) -> str:
    negate = body.startswith("!")
    if negate:
        body = body[1:]

    members = []
    i = 0
    while i < len(body):
        if i + 2 < len(body) and body[i + 1] == "-":
            low, high = body[i], body[i + 2]
            if low <= high:
                members.append(f"{re.escape(low)}-{re.escape(high)}")
            i += 3
        else:
            members.append(re.escape(body[i]))
            i += 1

    if not members:
        # An empty or fully reversed set can never match
        return "(?!)" if not negate else "."

    return "[" + ("^" if negate else "") + "".join(members) + "]"


@lru_cache(maxsize=256)
def _compile(pattern: str, escape_character: Optional[str]) -> Pattern[str]:
    return re.compile(_translate(pattern, escape_character))


class WildcardPattern:
    """
    A compiled wildcard pattern.

    Example:
        >>> WildcardPattern("Total: #.## EUR").is_match("Total: 4.20 EUR")
        True
    """

    def __init__(self, pattern: str, escape_character: Optional[str] = None):
        if escape_character is not None and len(escape_character) != 1:
            raise ValueError(f"Escape character must be a single character, got {escape_character!r}")
        self.pattern = pattern
        self.escape_character = escape_character
        self.regex = _compile(pattern, escape_character)

    def is_match(self, text: str) -> bool:
        return self.regex.match(text) is not None

    def __repr__(self) -> str:
        return f"WildcardPattern({self.pattern!r}, escape_character={self.escape_character!r})"


def is_like(text: str, pattern: str, escape_character: Optional[str] = None) -> bool:
    """
    Check whether ``text`` matches the wildcard ``pattern`` in full.

    Args:
        text: Text to test, typically captured console output
        pattern: Wildcard pattern, typically the expected output
        escape_character: Optional character that makes the next one literal

    Returns:
        True if the whole text matches
    """
    return WildcardPattern(pattern, escape_character).is_match(text)


__all__ = [
    "WILDCARD_CHARACTERS",
    "WildcardPattern",
    "contains_wildcards",
    "is_like",
]
