"""
Repository-level pytest configuration.

Why this exists:
  - Provide safe defaults so local runs need no environment setup
  - Keep the repo root importable for `run_tests.py` and the test packages
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _safe_env_defaults() -> Generator[None, None, None]:
    """
    Set environment defaults if not already provided by the user/CI.

    Double-underscore variables override config/config.yaml keys.
    """
    defaults = {
        "UI__BASE_URL": "http://localhost:3000",
        "LOGGING__LEVEL": "INFO",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
