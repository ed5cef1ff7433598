"""Unit tests for structured logging setup."""

from __future__ import annotations

from structlog.testing import capture_logs

from core.config import TrieStoreConfig
from core.logging_config import get_logger


def test_config_logger_filters_below_its_level() -> None:
    """A logger built from config drops events below the configured level."""
    logger = get_logger("tests.logging", TrieStoreConfig(log_level="WARNING"))

    with capture_logs() as logs:
        logger.info("hidden_event")
        logger.warning("shown_event", detail=1)

    assert [entry["event"] for entry in logs] == ["shown_event"]
    assert logs[0]["detail"] == 1
