"""Core constants used across trie store modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

LOG_LEVEL_ENV_VAR = "TRIESTORE_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "TRIESTORE_LOG_FORMAT"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SUPPORTED_LOG_FORMATS = ("json", "console")
BYTES_KEY_ENCODING = "latin-1"
INITIAL_VERSION = 0
RUN_SPEC_SCHEMA_VERSION = 1
NOT_FOUND_LABEL = "<not found>"
