"""Run-spec execution engine.

This module replays validated run-spec steps against a versioned store
and renders one printable line per step.
"""

from __future__ import annotations

from core.constants import NOT_FOUND_LABEL
from core.logging_config import get_logger
from core.run_spec import (
    GetStep,
    LatestVersionStep,
    PutStep,
    RemoveStep,
    RunSpec,
    RunSpecStep,
    load_run_spec,
)
from store.versioned_store import VersionedStore

_LOGGER = get_logger(__name__)


def execute_run_spec_file(store: VersionedStore, spec_file: str) -> tuple[str, ...]:
    """Load and execute a run-spec file, returning printable output lines."""
    return execute_run_spec(store, load_run_spec(spec_file))


def execute_run_spec(store: VersionedStore, spec: RunSpec) -> tuple[str, ...]:
    """Execute a parsed run-spec object and return output lines."""
    output_lines = tuple(_execute_step(store, step) for step in spec.steps)
    _LOGGER.info(
        "run_spec_executed",
        step_count=len(spec.steps),
        latest_version=store.latest_version(),
    )
    return output_lines


def _execute_step(store: VersionedStore, step: RunSpecStep) -> str:
    if isinstance(step, PutStep):
        return f"put {step.key} -> {store.put(step.key, step.value, step.value_type)}"
    if isinstance(step, GetStep):
        return _execute_get_step(store, step)
    if isinstance(step, RemoveStep):
        return f"remove {step.key} -> {store.remove(step.key)}"
    if isinstance(step, LatestVersionStep):
        return f"latest-version {store.latest_version()}"
    raise TypeError(f"Unhandled run-spec step {step!r}")


def _execute_get_step(store: VersionedStore, step: GetStep) -> str:
    guard = store.get(step.key, step.value_type, step.version)
    if guard is None:
        label = step.version if step.version is not None else store.latest_version()
        return f"get {step.key}@{label} = {NOT_FOUND_LABEL}"
    return f"get {step.key}@{guard.version} = {guard.value!r}"
