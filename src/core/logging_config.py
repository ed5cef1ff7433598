"""Structured logging configuration.

This module initializes structlog with a stable structured format.
Events go to stderr so command output on stdout stays parseable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.config import TrieStoreConfig


def configure_logging(config: TrieStoreConfig) -> None:
    """Configure structlog from runtime config.

    Args:
        config: Runtime configuration with level and renderer choice.
    """
    renderer: Any
    if config.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=_filtering_wrapper(config),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str, config: TrieStoreConfig | None = None) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.
        config: Optional config whose level filters this logger only.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        configure_logging(config or TrieStoreConfig.from_env())
    if config is None:
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        None,
        wrapper_class=_filtering_wrapper(config),
        logger_factory_args=(name,),
    )


def _filtering_wrapper(config: TrieStoreConfig) -> Any:
    return structlog.make_filtering_bound_logger(getattr(logging, config.log_level))
