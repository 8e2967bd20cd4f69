"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation on top of
DriverHandler.

Page objects declare their elements as properties returning handlers, so each
access builds a fresh locator and tests can tune waits per use:

    class DynamicLoadingPage(BasePage):
        URL_PATH = "/dynamic_loading/1"

        @property
        def start_button(self) -> ElementHandler:
            return self.element("#start button")

        @property
        def hello_world_label(self) -> ElementHandler:
            return self.element("#finish h4")

    page = DynamicLoadingPage(driver)
    page.navigate()
    page.start_button.click()
    assert page.hello_world_label.set_timeout_seconds(8).wait_for_displayed()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from .driver_handler import DriverHandler
from .element_handler import ElementHandler, SelectElementHandler


class BasePage:
    """
    Base class for all page objects.
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(self, driver: DriverHandler):
        self.driver = driver

    @property
    def url(self) -> str:
        """Get full page URL."""
        return self.driver.resolve_url(self.URL_PATH)

    def navigate(self, wait_until: str = "load") -> None:
        """Navigate to this page."""
        self.driver.navigate_to_page(self.URL_PATH, wait_until=wait_until)

    def element(self, selector: str) -> ElementHandler:
        return self.driver.find_element(selector)

    def select(self, selector: str) -> SelectElementHandler:
        return self.driver.find_select(selector)


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
