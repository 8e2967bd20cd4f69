"""
================================================================================
Driver Handler
================================================================================

Entry point for browser tests: wraps a Playwright page, navigates, and hands
out element handlers preconfigured with the suite's wait timeouts.

Timeouts and the base URL come from configuration (``ui.timeout_seconds``,
``ui.poll_interval_seconds``, ``ui.base_url``) unless passed explicitly.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

import allure
from loguru import logger
from playwright.sync_api import Page

from testtools.common import get_config, get_float_config

from .element_handler import ElementHandler, SelectElementHandler


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class DriverHandler:
    """
    Owns the Playwright page used by a test.

    Usage:
        driver = DriverHandler(page)
        driver.navigate_to_page("/dynamic_loading/1")
        driver.find_element("#start button").click()
    """

    def __init__(
        self,
        page: Page,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        poll_interval_seconds: Optional[float] = None,
    ):
        self.page = page
        self.base_url = (base_url or get_config("ui.base_url", "")).rstrip("/")
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None
            else get_float_config("ui.timeout_seconds", 5.0)
        )
        self.poll_interval_seconds = (
            poll_interval_seconds if poll_interval_seconds is not None
            else get_float_config("ui.poll_interval_seconds", 0.25)
        )

    @property
    def current_url(self) -> str:
        return self.page.url

    def resolve_url(self, url: str) -> str:
        """URLs with a scheme (http:, about:, data:...) pass through; paths are joined to the base URL."""
        if urlsplit(url).scheme or not self.base_url:
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    def navigate_to_page(self, url: str, wait_until: str = "load") -> None:
        """
        Navigate to ``url``.

        Args:
            url: Absolute URL or path relative to the base URL
            wait_until: Playwright load state to wait for
        """
        full_url = self.resolve_url(url)
        with allure.step(f"Navigate to {full_url}"):
            self.page.goto(full_url, wait_until=wait_until)
            logger.debug(f"Navigated to: {full_url}")

    def find_element(self, selector: str) -> ElementHandler:
        return ElementHandler(
            self.page,
            selector,
            timeout_seconds=self.timeout_seconds,
            poll_interval_seconds=self.poll_interval_seconds,
        )

    def find_select(self, selector: str) -> SelectElementHandler:
        return SelectElementHandler(
            self.page,
            selector,
            timeout_seconds=self.timeout_seconds,
            poll_interval_seconds=self.poll_interval_seconds,
        )

    def take_screenshot(self, name: str, full_page: bool = False) -> Path:
        """
        Save a screenshot and attach it to the Allure report.

        Returns:
            Path to the saved PNG
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        png = self.page.screenshot(path=str(filepath), full_page=full_page)
        allure.attach(png, name=name, attachment_type=allure.attachment_type.PNG)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "DriverHandler",
    "SCREENSHOT_DIR",
]
