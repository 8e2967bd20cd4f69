"""
================================================================================
Test Tools
================================================================================

Shared utilities for the console and browser test harnesses.

Modules:
    - common: Shared configuration and logging utilities
    - test_framework: Test-block aware debug logger

Example:
    from testtools.common import init_logger
    from testtools.test_framework import DebugLogger

    init_logger()
    log = DebugLogger(test_case_key="TC-101")
    with log.test_block("Login"):
        log.info("Submitting credentials")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "test_framework",
]
