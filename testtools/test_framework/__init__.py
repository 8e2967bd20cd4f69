"""
Test framework helpers shared by console and UI suites.
"""

from .debug_logger import DebugLogger

__all__ = [
    "DebugLogger",
]
