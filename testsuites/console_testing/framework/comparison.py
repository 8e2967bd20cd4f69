"""
================================================================================
Comparison Operators
================================================================================

Strategies deciding whether captured console output satisfies the expected
output. An operator is any callable taking ``(expected, actual)`` and
returning a bool, so tests can pass their own:

    expect(view, main, comparison=lambda expected, actual: actual.startswith(expected))

================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Union

from .wildcard import is_like


ComparisonOperator = Callable[[str, str], bool]


class ComparisonType(str, Enum):
    """Built-in comparison strategies."""
    EXACT = "exact"
    LIKE = "like"


def exact_match(expected: str, actual: str) -> bool:
    return expected == actual


def like_match(expected: str, actual: str) -> bool:
    """Treat ``expected`` as a wildcard pattern the actual output must match."""
    return is_like(actual, expected)


def like_match_with_escape(escape_character: str) -> ComparisonOperator:
    """Build a wildcard operator honouring ``escape_character``."""

    def operator(expected: str, actual: str) -> bool:
        return is_like(actual, expected, escape_character)

    operator.__name__ = f"like_match_with_escape({escape_character!r})"
    return operator


_OPERATORS = {
    ComparisonType.EXACT: exact_match,
    ComparisonType.LIKE: like_match,
}


def get_comparison_operator(
    comparison: Optional[Union[ComparisonType, str, ComparisonOperator]] = None,
) -> ComparisonOperator:
    """
    Resolve a comparison strategy.

    Args:
        comparison: A ComparisonType, its string value, a custom callable,
                    or None for exact matching

    Returns:
        The comparison operator

    Raises:
        ValueError: If a string does not name a built-in strategy
    """
    if comparison is None:
        return exact_match
    if callable(comparison):
        return comparison
    try:
        return _OPERATORS[ComparisonType(comparison)]
    except ValueError:
        valid = ", ".join(t.value for t in ComparisonType)
        raise ValueError(f"Unknown comparison type: {comparison!r} (expected one of: {valid})") from None


__all__ = [
    "ComparisonOperator",
    "ComparisonType",
    "exact_match",
    "like_match",
    "like_match_with_escape",
    "get_comparison_operator",
]
