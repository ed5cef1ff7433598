"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import structlog


def pytest_sessionstart() -> None:
    """Add src and project root to sys.path for package and fixture imports."""
    project_root = Path(__file__).resolve().parent.parent
    for import_root in (project_root / "src", project_root):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))


@pytest.fixture(autouse=True)
def _reset_structlog_config():
    """Drop global structlog config after each test.

    configure_logging binds the current sys.stderr, which under pytest is a
    per-test capture stream that is closed once the test ends.
    """
    yield
    structlog.reset_defaults()
