"""Runtime configuration model for the trie store.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_FORMATS,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import TrieStoreConfigError


@dataclass(frozen=True)
class TrieStoreConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum structured log level that is emitted.
        log_format: Renderer for log events, ``json`` or ``console``.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_env(cls) -> "TrieStoreConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TrieStoreConfigError: If environment values are invalid.
        """
        log_level = parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        log_format = _parse_log_format(os.getenv(LOG_FORMAT_ENV_VAR, DEFAULT_LOG_FORMAT))
        return cls(log_level=log_level, log_format=log_format)


def parse_log_level(raw_value: str) -> str:
    """Parse a log level name.

    Args:
        raw_value: Raw level name from environment or CLI.

    Returns:
        Upper-case level name.

    Raises:
        TrieStoreConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise TrieStoreConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: got '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level


def _parse_log_format(raw_value: str) -> str:
    log_format = raw_value.strip().lower()
    if log_format not in SUPPORTED_LOG_FORMATS:
        raise TrieStoreConfigError(
            f"Invalid {LOG_FORMAT_ENV_VAR} value: got '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_LOG_FORMATS)}."
        )
    return log_format
