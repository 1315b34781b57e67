"""Shared pytest fixtures for CLI, demonstration and module-entry tests.

All shared fixtures live here and are discovered implicitly by pytest.
Fixture names read as plain English.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner

if TYPE_CHECKING:
    from callable_demo.adapters.memory.transcript import TranscriptSpy
    from callable_demo.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _shutdown_logging_runtime() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture(autouse=True)
def isolated_logging_runtime() -> Iterator[None]:
    """Start and end every test without a lib_log_rich runtime.

    The runtime is process-global; a CliRunner invocation initialises it and
    ``main()`` shuts it down, so leftovers would make tests order-dependent.
    """
    _shutdown_logging_runtime()
    yield
    _shutdown_logging_runtime()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when asserting on the demonstration transcript so
    that log records on stderr cannot interfere.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real adapters)."""
    from callable_demo.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before and after the test."""
    from callable_demo.adapters.config.loader import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()


@dataclass
class TranscriptCliContext:
    """Services factory plus the spy that records what the demonstrations emit.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: TranscriptSpy holding the emitted lines.
    """

    factory: Callable[[], Any]
    spy: TranscriptSpy


@pytest.fixture
def transcript_cli_context() -> TranscriptCliContext:
    """Wire services whose output lands in a TranscriptSpy.

    Configuration and output are in-memory; logging stays production because
    every command opens a ``lib_log_rich.runtime.bind`` scope.

    Example:
        def test_run(cli_runner: CliRunner, transcript_cli_context: TranscriptCliContext) -> None:
            cli_runner.invoke(cli, ["run"], obj=transcript_cli_context.factory)
            assert transcript_cli_context.spy.lines[0] == "Inside block greet: 1"
    """
    from callable_demo.adapters.memory import TranscriptSpy as TranscriptSpyImpl
    from callable_demo.composition import build_production, build_testing

    spy = TranscriptSpyImpl()
    services = dataclasses.replace(build_testing(spy=spy), init_logging=build_production().init_logging)
    return TranscriptCliContext(factory=lambda: services, spy=spy)
