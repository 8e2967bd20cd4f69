"""
================================================================================
Test Tools Common Utilities
================================================================================

This module provides shared configuration management and logging setup for
the console and browser test harnesses.

Exports:
    - get_config: Get configuration values by dot-notation key
    - set_config: Override configuration values at runtime
    - reload_config: Reload configuration from disk
    - init_logger: Initialize loguru logger with standard settings

Usage:
    from testtools.common import get_config, init_logger

    init_logger()
    timeout = get_config("ui.timeout_seconds", 5)

================================================================================
"""

from .global_config import (
    ConfigurationError,
    get_config,
    get_float_config,
    init_logger,
    reload_config,
    set_config,
)

__all__ = [
    "ConfigurationError",
    "get_config",
    "get_float_config",
    "init_logger",
    "reload_config",
    "set_config",
]
