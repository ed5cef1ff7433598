"""Trie store CLI entry points.

This module exposes scripted store sessions from the command line.
It maps argparse commands onto versioned store calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from core.config import TrieStoreConfig, parse_log_level
from core.constants import SUPPORTED_LOG_LEVELS
from core.errors import TrieStoreError
from core.logging_config import configure_logging
from store.versioned_store import VersionedStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="triestore",
        description="Versioned persistent trie store CLI",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=SUPPORTED_LOG_LEVELS,
        help="Override TRIESTORE_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the trie store CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        store = _build_store(args.log_level)
        if args.command == "run-spec":
            return run_run_spec_command(store, args)
    except TrieStoreError as error:
        parser.exit(1, f"error: {error}\n")
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_store(log_level: str | None) -> VersionedStore:
    """Build a store with optional log-level override.

    Args:
        log_level: Optional override level name.

    Returns:
        Store configured from the environment.
    """
    config = TrieStoreConfig.from_env()
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    configure_logging(config)
    return VersionedStore(config)
