"""
================================================================================
Console Assertions
================================================================================

Assertions for console programs. A "view" of what the user would see in the
terminal is given as one string, with the text they type wrapped in double
angle brackets:

    def greet():
        name = input("Name: ")
        print(f"Hello {name}")

    expect("Name: <<Inigo\n>>Hello Inigo", greet)

The typed text is fed to ``sys.stdin``, everything written to ``sys.stdout``
while ``greet`` runs is captured, and the captured text must match the view
with the input sections removed. Typed input is not echoed, just as when
stdin is not a terminal.

Key Features:
- Process-wide stdin/stdout redirection, serialized across threads
- Streams always restored, even when the action raises
- Line-ending normalization
- Exact, wildcard and custom comparison strategies
- Descriptive diff on failure, attached to the Allure report
- External process variant with captured stdout/stderr

Only code that looks up ``sys.stdout`` / ``sys.stdin`` at call time (print,
input, sys.stdout.write) is captured; a stream reference cached before the
call keeps writing to the real console.

================================================================================
"""

from __future__ import annotations

import io
import os
import shlex
import subprocess
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Generator, Optional, Sequence, Union

import allure
from loguru import logger

from .comparison import (
    ComparisonOperator,
    ComparisonType,
    get_comparison_operator,
    like_match,
    like_match_with_escape,
)
from .diff_report import build_failure_message
from . import line_endings
from .line_endings import NEWLINE
from .view_parser import parse_view


# sys.stdin/sys.stdout are process-global; one redirection at a time
_EXECUTE_LOCK = threading.RLock()

_NO_RETURN = object()


# ================================================================================
# Errors
# ================================================================================

class ConsoleTestError(Exception):
    """Base class for console harness errors."""
    pass


class ConsoleAssertionError(ConsoleTestError, AssertionError):
    """Raised when captured output does not satisfy the expected output."""

    def __init__(self, message: str, expected: Optional[str] = None, actual: Optional[str] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ReturnValueMismatchError(ConsoleAssertionError):
    """Raised when the action's return value differs from the expected one."""
    pass


@dataclass
class ProcessResult:
    """Finished external process with its captured streams."""
    process: subprocess.Popen
    stdout: str
    stderr: str

    @property
    def returncode(self) -> Optional[int]:
        return self.process.returncode


# ================================================================================
# Execution
# ================================================================================

@contextmanager
def redirected_console(given_input: Optional[str]) -> Generator[io.StringIO, None, None]:
    """
    Replace ``sys.stdin`` and ``sys.stdout`` for the duration of the block.

    Args:
        given_input: Text served to readers of stdin. Empty or
                     whitespace-only input is served as an empty stream.

    Yields:
        The buffer receiving everything written to stdout
    """
    if not given_input or given_input.isspace():
        given_input = ""

    # newline=None translates \r\n and \r to \n for input()/readline()
    reader = io.StringIO(given_input, newline=None)
    writer = io.StringIO()

    with _EXECUTE_LOCK:
        saved_stdin, saved_stdout = sys.stdin, sys.stdout
        sys.stdin, sys.stdout = reader, writer
        try:
            yield writer
        finally:
            sys.stdin, sys.stdout = saved_stdin, saved_stdout


def execute(
    given_input: Optional[str],
    action: Callable[[], Any],
    normalize_line_endings: bool = True,
) -> str:
    """
    Run ``action`` with ``given_input`` on stdin and capture its stdout.

    Args:
        given_input: Text the action reads from stdin
        action: Zero-argument callable to run
        normalize_line_endings: Normalize line breaks and trim one trailing newline

    Returns:
        Captured output

    Raises:
        Whatever ``action`` raises, after the streams are restored
    """
    logger.debug(f"Executing {_action_name(action)} with {len(given_input or '')} chars of input")

    with redirected_console(given_input) as writer:
        action()
        output = writer.getvalue()

    if normalize_line_endings:
        output = line_endings.normalize_line_endings(output, trim_trailing_newline=True)

    logger.debug(f"Captured {len(output)} chars of output from {_action_name(action)}")
    return output


def assert_expectation(
    expected_output: str,
    output: str,
    comparison: ComparisonOperator,
) -> None:
    """
    Fail with a diff message unless ``comparison(expected_output, output)`` holds.

    Raises:
        ConsoleAssertionError: If the comparison returns False
    """
    if comparison(expected_output, output):
        return

    message = build_failure_message(expected_output, output)
    logger.error(f"Console output mismatch:{NEWLINE}{message}")

    allure.attach(expected_output, name="Expected output", attachment_type=allure.attachment_type.TEXT)
    allure.attach(output, name="Actual output", attachment_type=allure.attachment_type.TEXT)
    allure.attach(message, name="Diff", attachment_type=allure.attachment_type.TEXT)

    raise ConsoleAssertionError(message, expected=expected_output, actual=output)


# ================================================================================
# View Assertions
# ================================================================================

def _action_name(action: Callable) -> str:
    return getattr(action, "__name__", repr(action))


def _invoke(action: Callable, argv: Optional[Sequence[str]]) -> Any:
    if argv is None:
        return action()
    return action(list(argv))


def _expect_view(
    view: str,
    action: Callable[[], Any],
    comparison: ComparisonOperator,
    normalize_line_endings: bool = True,
) -> str:
    parsed = parse_view(view)

    output = execute(parsed.input, action, normalize_line_endings)

    expected_output = parsed.output
    if normalize_line_endings:
        expected_output = line_endings.normalize_line_endings(expected_output, trim_trailing_newline=True)

    assert_expectation(expected_output, output, comparison)
    return output


def expect(
    view: str,
    action: Callable[..., Any],
    *,
    argv: Optional[Sequence[str]] = None,
    expected_return: Any = _NO_RETURN,
    normalize_line_endings: bool = True,
    comparison: Optional[Union[ComparisonType, str, ComparisonOperator]] = None,
) -> str:
    """
    Assert that running ``action`` produces the given console view.

    Args:
        view: Expected console view with input wrapped in ``<<`` / ``>>``
        action: Callable under test
        argv: When given, the action is called as ``action(list(argv))``
        expected_return: When given, the action's return value must equal it
        normalize_line_endings: Ignore line-ending style and one trailing newline
        comparison: Comparison strategy, exact matching by default

    Returns:
        The captured output

    Raises:
        ConsoleAssertionError: If the output does not match
        ReturnValueMismatchError: If the output matches but the return value does not
    """
    operator = get_comparison_operator(comparison)
    returned = []

    def run() -> None:
        returned.append(_invoke(action, argv))

    run.__name__ = _action_name(action)

    with allure.step(f"Expect console view from {_action_name(action)}"):
        output = _expect_view(view, run, operator, normalize_line_endings)

        if expected_return is not _NO_RETURN and returned[0] != expected_return:
            raise ReturnValueMismatchError(
                f"The value returned from {_action_name(action)} ({returned[0]!r}) "
                f"was not the expected_return ({expected_return!r}) value.",
                expected=repr(expected_return),
                actual=repr(returned[0]),
            )

    return output


def expect_no_trim_output(
    view: str,
    action: Callable[..., Any],
    *,
    argv: Optional[Sequence[str]] = None,
) -> str:
    """
    Like :func:`expect`, but line endings are compared as written and
    trailing newlines are kept.
    """
    return expect(view, action, argv=argv, normalize_line_endings=False)


def expect_like(
    view: str,
    action: Callable[..., Any],
    escape_character: Optional[str] = None,
    *,
    argv: Optional[Sequence[str]] = None,
) -> str:
    """
    Like :func:`expect`, but the output part of the view is a wildcard
    pattern (``*``, ``?``, ``#``, ``[...]``).

    Args:
        view: Expected console view
        action: Callable under test
        escape_character: Optional character making the next pattern character literal
        argv: When given, the action is called as ``action(list(argv))``
    """
    operator = like_match if escape_character is None else like_match_with_escape(escape_character)
    return expect(view, action, argv=argv, comparison=operator)


# ================================================================================
# External Processes
# ================================================================================

def execute_process(
    expected: str,
    executable: str,
    args: str = "",
    working_directory: Optional[str] = None,
) -> ProcessResult:
    """
    Run an executable and assert its stdout matches the wildcard ``expected``.

    The call blocks until the process exits; there is no timeout. The exit
    code is not checked, inspect ``ProcessResult.returncode`` for that.

    Args:
        expected: Wildcard pattern for the process's stdout
        executable: Path to the program
        args: Argument string, split with shell-like quoting rules
        working_directory: Working directory, the current one by default

    Returns:
        ProcessResult with the finished process and its stdout/stderr

    Raises:
        ConsoleAssertionError: If stdout does not match ``expected``
    """
    command = [executable, *shlex.split(args or "", posix=os.name != "nt")]
    cwd = working_directory or os.getcwd()

    with allure.step(f"Execute process: {' '.join(command)}"):
        logger.debug(f"Starting process {command} in {cwd}")
        process = subprocess.Popen(
            command,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
        )
        stdout, stderr = process.communicate()
        logger.debug(f"Process {executable} exited with code {process.returncode}")

        if stderr:
            allure.attach(stderr, name="stderr", attachment_type=allure.attachment_type.TEXT)

        assert_expectation(expected, stdout, like_match)

    return ProcessResult(process=process, stdout=stdout, stderr=stderr)


__all__ = [
    "ConsoleTestError",
    "ConsoleAssertionError",
    "ReturnValueMismatchError",
    "ProcessResult",
    "redirected_console",
    "execute",
    "assert_expectation",
    "expect",
    "expect_no_trim_output",
    "expect_like",
    "execute_process",
]
