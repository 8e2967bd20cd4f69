"""
================================================================================
Diff Reporter
================================================================================

Builds the failure message shown when console output does not match.

Fragments are appended in a fixed order:
    1. Character codes of the last two characters of each string
    2. A note when the expected text contains wildcard characters
    3. Expected and actual text, as blocks when multi-line, inline otherwise
    4. Length mismatch details, including surplus trailing characters
    5. Otherwise, the first differing character position

================================================================================
"""

from __future__ import annotations

from .line_endings import NEWLINE
from .wildcard import WILDCARD_CHARACTERS, contains_wildcards


SEPARATOR = "-" * 35


def _tail_codes(text: str) -> str:
    return f"{ord(text[-2])} {ord(text[-1])}"


def build_failure_message(expected: str, actual: str, newline: str = NEWLINE) -> str:
    """
    Describe how ``actual`` differs from ``expected``.

    Args:
        expected: Expected console output
        actual: Captured console output
        newline: Line break used to join message lines

    Returns:
        Human-readable failure message
    """
    result = ""

    # Trailing character codes make CR/LF mix-ups visible
    if len(expected) > 2 and len(actual) > 2:
        result += f"expected: {_tail_codes(expected)}{newline}"
        result += f"actual: {_tail_codes(actual)}{newline}"

    if contains_wildcards(expected):
        result += (
            "NOTE: The expected string contains wildcard characters: "
            + ",".join(WILDCARD_CHARACTERS)
            + newline
        )

    if newline in expected:
        result += newline.join([
            "AreEqual failed:", "",
            "Expected:", SEPARATOR, expected, SEPARATOR,
            "Actual: ", SEPARATOR, actual, SEPARATOR,
        ])
    else:
        result += newline.join([
            "AreEqual failed:",
            "Expected: ", expected,
            "Actual:   ", actual,
        ])

    if len(expected) != len(actual):
        result += (
            f"{newline}The expected length of {len(expected)} does not match "
            f"the output length of {len(actual)}. "
        )
        shorter, longer = sorted((expected, actual), key=len)
        if longer.startswith(shorter):
            result += f"{newline}The additional characters are '{longer[len(shorter):]}'."
    else:
        for index, (expected_char, actual_char) in enumerate(zip(expected, actual)):
            if expected_char != actual_char:
                result += (
                    f"{newline}Character {index} did not match: "
                    f"'{expected_char}' != '{actual_char}'"
                )
                break

    return result


__all__ = [
    "SEPARATOR",
    "build_failure_message",
]
