"""
Shared pytest fixtures and configuration for stdont tests.

This module provides:
- ``src/`` on the import path for uninstalled checkouts
- Settings cache reset so ``STDONT_*`` env overrides apply per test
- structlog reset so logging configuration never leaks between tests
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
import structlog

# Ensure stdont package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stdont.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings() -> Generator[None, None, None]:
    """Drop cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def clean_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def log_unwraps(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable unwrap_failed logging for the duration of a test."""
    monkeypatch.setenv("STDONT_LOG_UNWRAP_FAILURES", "true")
