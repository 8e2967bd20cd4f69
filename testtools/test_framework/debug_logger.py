"""
================================================================================
Debug Logger
================================================================================

Logger that prefixes every message with the test case key and the test block
currently executing, so interleaved output from a long scenario can be traced
back to the step that produced it.

Usage:
    log = DebugLogger(test_case_key="TC-101")
    with log.test_block("Checkout"):
        log.test_block_input("cart=3 items")
        log.info("Submitting order")
        log.test_block_output("order_id=42")

================================================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from loguru import logger


class DebugLogger:
    """
    Loguru-backed logger scoped to one test case.

    Messages are rendered as ``"{test_case_key} - {current_test_block} - {kind}: {message}"``
    and carry ``test_case`` / ``test_block`` as bound extra fields for sinks
    that want structured output.
    """

    def __init__(self, test_case_key: str = "", current_test_block: str = ""):
        self.test_case_key = test_case_key
        self.current_test_block = current_test_block

    def debug(self, message: str) -> None:
        self._log("DEBUG", f"Debug: {message}")

    def info(self, message: str) -> None:
        self._log("INFO", f"Info: {message}")

    def critical(self, message: str) -> None:
        self._log("CRITICAL", f"Error: {message}")

    def test_block_input(self, input_arguments: str) -> None:
        self._log("DEBUG", f"Input arguments: {input_arguments}")

    def test_block_output(self, output: str) -> None:
        self._log("DEBUG", f"Output returns: {output}")

    @contextmanager
    def test_block(self, name: str) -> Generator["DebugLogger", None, None]:
        """
        Run a section of the test with ``current_test_block`` set to ``name``.

        The previous block name is restored on exit, including when the block
        raises.
        """
        previous = self.current_test_block
        self.current_test_block = name
        try:
            yield self
        finally:
            self.current_test_block = previous

    def _log(self, level: str, message: str) -> None:
        logger.bind(
            test_case=self.test_case_key,
            test_block=self.current_test_block,
        ).opt(depth=2).log(level, f"{self.test_case_key} - {self.current_test_block} - {message}")


__all__ = [
    "DebugLogger",
]
