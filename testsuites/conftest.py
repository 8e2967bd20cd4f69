"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and provides shared fixtures.

================================================================================
"""

from typing import Generator, List

import pytest
from loguru import logger

from testtools.common import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers and logging."""

    # Sinks from config/config.yaml; stdout stays free for console capture
    init_logger()

    # Test type markers
    config.addinivalue_line(
        "markers", "unit: Fast tests with no external dependencies"
    )
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests (run_tests.py --tags smoke)"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite, applied to every console and ui test"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "console: Console harness tests"
    )
    config.addinivalue_line(
        "markers", "ui: Browser wrapper tests"
    )
    config.addinivalue_line(
        "markers", "process: Tests that spawn external processes"
    )


def pytest_collection_modifyitems(config, items):
    """
    Add markers based on where a test lives.

    Every console and ui test belongs to the regression suite; smoke is
    chosen per test with @pytest.mark.smoke.
    """
    for item in items:
        path = str(item.fspath)

        if "unit" in path:
            item.add_marker(pytest.mark.unit)

        if "test_console_" in path:
            item.add_marker(pytest.mark.console)
            item.add_marker(pytest.mark.regression)

        if "test_ui_" in path:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.regression)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Console & Browser Test Harness",
        "=" * 60,
        "",
    ]


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """
    Collect loguru messages emitted during the test.

    Yields:
        List receiving each formatted message
    """
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
