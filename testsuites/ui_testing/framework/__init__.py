"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based page-object helpers with explicit waits.

Components:
    - waits: Polling and retry loops around driver calls
    - element_handler: Element wrappers with wait-for-state helpers
    - driver_handler: Page navigation and element lookup
    - page_base: Base page object

Author: Automation Team
License: MIT
================================================================================
"""

from .driver_handler import DriverHandler
from .element_handler import ElementHandler, SelectElementHandler
from .page_base import BasePage, PageBase
from .waits import WaitTimeoutError, poll_until, retry_until

__all__ = [
    "DriverHandler",
    "ElementHandler",
    "SelectElementHandler",
    "BasePage",
    "PageBase",
    "WaitTimeoutError",
    "poll_until",
    "retry_until",
]
