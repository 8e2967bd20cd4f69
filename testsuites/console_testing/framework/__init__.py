"""
================================================================================
Console Testing Framework
================================================================================

Assertion harness for console programs.

Modules:
    - view_parser: Split a console view into input and expected output
    - line_endings: Line-break normalization
    - wildcard: Wildcard ("like") pattern matching
    - comparison: Pluggable comparison operators
    - diff_report: Failure message construction
    - console_assert: stdin/stdout redirection and view assertions

Author: Automation Team
License: MIT
================================================================================
"""

from .comparison import (
    ComparisonOperator,
    ComparisonType,
    exact_match,
    get_comparison_operator,
    like_match,
    like_match_with_escape,
)
from .console_assert import (
    ConsoleAssertionError,
    ConsoleTestError,
    ProcessResult,
    ReturnValueMismatchError,
    assert_expectation,
    execute,
    execute_process,
    expect,
    expect_like,
    expect_no_trim_output,
    redirected_console,
)
from .diff_report import build_failure_message
from .line_endings import NEWLINE, normalize_line_endings
from .view_parser import ParsedView, parse_view
from .wildcard import WILDCARD_CHARACTERS, WildcardPattern, contains_wildcards, is_like

__all__ = [
    "ComparisonOperator",
    "ComparisonType",
    "exact_match",
    "get_comparison_operator",
    "like_match",
    "like_match_with_escape",
    "ConsoleAssertionError",
    "ConsoleTestError",
    "ProcessResult",
    "ReturnValueMismatchError",
    "assert_expectation",
    "execute",
    "execute_process",
    "expect",
    "expect_like",
    "expect_no_trim_output",
    "redirected_console",
    "build_failure_message",
    "NEWLINE",
    "normalize_line_endings",
    "ParsedView",
    "parse_view",
    "WILDCARD_CHARACTERS",
    "WildcardPattern",
    "contains_wildcards",
    "is_like",
]
