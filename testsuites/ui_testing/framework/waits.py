# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Explicit-wait polling for browser element state.
#
# Playwright already auto-waits inside its own actions; these helpers cover the
# cases where a test wants a yes/no answer ("did the label appear within 8s?")
# or wants to retry an interaction that the page is not ready for yet.
#
# Usage:
#   appeared = poll_until(lambda: locator.is_visible(), timeout_seconds=8)
#   retry_until(lambda: locator.click(timeout=500), timeout_seconds=5, description="click")
#
# ================================================================================

import time
from typing import Any, Callable, Optional, TypeVar

from loguru import logger
from playwright.sync_api import Error as PlaywrightError


T = TypeVar('T')


class WaitTimeoutError(Exception):
    """Raised when an element interaction keeps failing until the timeout."""
    pass


def poll_until(
    condition: Callable[[], Any],
    timeout_seconds: float,
    poll_interval_seconds: float = 0.25,
    description: str = "condition",
) -> bool:
    """
    Poll ``condition`` until it returns a truthy value or the timeout elapses.

    Driver errors raised by the condition (element detached, page navigating)
    count as "not yet" and polling continues.

    Args:
        condition: Zero-argument callable checked on every attempt
        timeout_seconds: Total time to keep polling
        poll_interval_seconds: Delay between attempts
        description: Human-readable description for logging

    Returns:
        True if the condition was met, False on timeout
    """
    deadline = time.monotonic() + timeout_seconds
    attempt = 0

    while True:
        attempt += 1
        try:
            if condition():
                logger.debug(f"{description} met after {attempt} attempts")
                return True
        except PlaywrightError as e:
            logger.debug(f"Attempt {attempt} for {description} raised: {e}")

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            logger.debug(f"{description} not met within {timeout_seconds}s")
            return False

        time.sleep(min(poll_interval_seconds, remaining))


def retry_until(
    action: Callable[[], T],
    timeout_seconds: float,
    poll_interval_seconds: float = 0.25,
    description: str = "action",
) -> T:
    """
    Retry ``action`` until it completes without a driver error.

    Returns:
        The action's result

    Raises:
        WaitTimeoutError: If the action still fails when the timeout elapses,
                          chained to the last driver error
    """
    deadline = time.monotonic() + timeout_seconds
    attempt = 0
    last_error: Optional[PlaywrightError] = None

    while True:
        attempt += 1
        try:
            return action()
        except PlaywrightError as e:
            last_error = e
            logger.debug(f"Attempt {attempt} for {description} failed: {e}")

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            error_msg = f"Timeout after {timeout_seconds}s and {attempt} attempts: {description}"
            logger.error(error_msg)
            raise WaitTimeoutError(error_msg) from last_error

        time.sleep(min(poll_interval_seconds, remaining))


__all__ = [
    "WaitTimeoutError",
    "poll_until",
    "retry_until",
]
