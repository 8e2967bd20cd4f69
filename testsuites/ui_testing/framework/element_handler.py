"""
================================================================================
Element Handler
================================================================================

Thin wrapper around a Playwright locator adding explicit waits.

State checks (``wait_for_displayed`` and friends) poll until the state is
reached and answer True/False instead of raising, so they read naturally in
assertions. ``click`` and ``send_keys`` wait until the element is ready and then
act exactly once; reads, ``clear`` and selections are retried until the element
accepts them. Either way ``WaitTimeoutError`` is raised once the timeout elapses.

Usage:
    label = ElementHandler(page, "#finish h4")
    start.click()
    assert label.set_timeout_seconds(8).wait_for_displayed()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from typing import Optional

import allure
from loguru import logger
from playwright.sync_api import Locator, Page

from .waits import WaitTimeoutError, poll_until, retry_until


DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_POLL_INTERVAL_SECONDS = 0.25


class ElementHandler:
    """
    Explicit-wait wrapper for the element(s) matched by one selector.

    Args:
        page: Playwright Page
        selector: Playwright selector (CSS, text=, data-testid=...)
        timeout_seconds: How long waits and interactions keep trying
        poll_interval_seconds: Delay between attempts
    """

    def __init__(
        self,
        page: Page,
        selector: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
    ):
        self.page = page
        self.selector = selector
        self.timeout_seconds = timeout_seconds
        self.poll_interval_seconds = poll_interval_seconds

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.selector!r})"

    # =========================================================================
    # Configuration
    # =========================================================================

    def set_timeout_seconds(self, seconds: float) -> "ElementHandler":
        """Set the wait timeout; returns self for chaining."""
        if seconds < 0:
            raise ValueError(f"Timeout must not be negative, got {seconds}")
        self.timeout_seconds = seconds
        return self

    def set_poll_interval_seconds(self, seconds: float) -> "ElementHandler":
        """Set the delay between attempts; returns self for chaining."""
        if seconds <= 0:
            raise ValueError(f"Poll interval must be positive, got {seconds}")
        self.poll_interval_seconds = seconds
        return self

    @property
    def locator(self) -> Locator:
        return self.page.locator(self.selector)

    @property
    def _attempt_timeout_ms(self) -> float:
        # Each driver call gets one poll interval; the outer loop owns the deadline
        return max(self.poll_interval_seconds, 0.1) * 1000

    # =========================================================================
    # State Waits
    # =========================================================================

    def wait_for_displayed(self) -> bool:
        """Wait until the element is visible."""
        return self._poll(lambda: self.locator.is_visible(), "displayed")

    def wait_for_not_displayed(self) -> bool:
        """Wait until the element is hidden or no longer attached."""
        return self._poll(lambda: not self.locator.is_visible(), "not displayed")

    def wait_for_enabled_state(self) -> bool:
        """Wait until the element is enabled."""
        return self._poll(lambda: self.locator.is_enabled(), "enabled")

    def wait_for_disabled_state(self) -> bool:
        """Wait until the element is disabled."""
        return self._poll(lambda: self.locator.is_disabled(), "disabled")

    def _poll(self, condition, state: str) -> bool:
        return poll_until(
            condition,
            timeout_seconds=self.timeout_seconds,
            poll_interval_seconds=self.poll_interval_seconds,
            description=f"{self.selector} {state}",
        )

    # =========================================================================
    # Interactions
    # =========================================================================

    def click(self) -> None:
        """Wait until the element is visible and enabled, then click it once."""
        with allure.step(f"Click: {self.selector}"):
            timeout_ms = self._wait_until_ready(
                lambda: self.locator.is_visible() and self.locator.is_enabled(),
                "clickable",
            )
            self.locator.click(timeout=timeout_ms)
            logger.debug(f"Clicked: {self.selector}")

    def send_keys(self, text: str) -> None:
        """Wait until the element is editable, then type ``text`` key by key once."""
        with allure.step(f"Send keys to {self.selector}"):
            timeout_ms = self._wait_until_ready(
                lambda: self.locator.is_visible() and self.locator.is_editable(),
                "editable",
            )
            self.locator.press_sequentially(text, timeout=timeout_ms)

    def clear(self) -> None:
        with allure.step(f"Clear: {self.selector}"):
            self._retry(lambda: self.locator.clear(timeout=self._attempt_timeout_ms), "clear")

    def replace_text(self, text: str) -> None:
        """Clear the element, then type ``text``."""
        self.clear()
        self.send_keys(text)

    def get_attribute(self, name: str) -> Optional[str]:
        return self._retry(
            lambda: self.locator.get_attribute(name, timeout=self._attempt_timeout_ms),
            f"get attribute {name}",
        )

    def text(self) -> str:
        """Rendered text of the element."""
        return self._retry(
            lambda: self.locator.inner_text(timeout=self._attempt_timeout_ms),
            "get text",
        )

    def _retry(self, action, description: str):
        return retry_until(
            action,
            timeout_seconds=self.timeout_seconds,
            poll_interval_seconds=self.poll_interval_seconds,
            description=f"{description} on {self.selector}",
        )

    def _wait_until_ready(self, condition, state: str) -> float:
        """
        Poll ``condition`` and return what is left of the timeout, in ms.

        Keystrokes and clicks are not safe to repeat, so only the readiness
        check is retried; the action itself runs once with the remaining time.

        Raises:
            WaitTimeoutError: If the element never reaches the state
        """
        deadline = time.monotonic() + self.timeout_seconds
        if not self._poll(condition, state):
            error_msg = f"Timeout after {self.timeout_seconds}s: {self.selector} not {state}"
            logger.error(error_msg)
            raise WaitTimeoutError(error_msg)
        # Playwright treats timeout=0 as "no timeout"
        remaining = max(deadline - time.monotonic(), self.poll_interval_seconds)
        return remaining * 1000


class SelectElementHandler(ElementHandler):
    """Element handler for ``<select>`` elements."""

    def select_by_text(self, text: str) -> None:
        with allure.step(f"Select '{text}' in {self.selector}"):
            self._retry(
                lambda: self.locator.select_option(label=text, timeout=self._attempt_timeout_ms),
                f"select {text!r}",
            )

    def select_by_value(self, value: str) -> None:
        with allure.step(f"Select value '{value}' in {self.selector}"):
            self._retry(
                lambda: self.locator.select_option(value=value, timeout=self._attempt_timeout_ms),
                f"select value {value!r}",
            )

    def selected_option_text(self) -> str:
        return self._retry(
            lambda: self.locator.locator("option:checked").inner_text(timeout=self._attempt_timeout_ms),
            "get selected option",
        )


__all__ = [
    "ElementHandler",
    "SelectElementHandler",
]
