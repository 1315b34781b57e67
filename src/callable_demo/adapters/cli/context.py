"""Click context state and traceback flag handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click

if TYPE_CHECKING:
    from callable_demo.composition import AppServices

TracebackState = tuple[bool, bool]
"""``lib_cli_exit_tools`` flags as ``(traceback, traceback_force_color)``."""


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root group resolves once and every subcommand reads."""

    services: AppServices
    traceback: bool = False


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root group stored on *ctx*.

    Raises:
        RuntimeError: If the root group has not run yet.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized; the root group stores it before any subcommand runs.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Set both ``lib_cli_exit_tools`` traceback flags to *enabled*.

    Example:
        >>> saved = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        (True, True)
        >>> restore_traceback_state(saved)
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags."""
    config = lib_cli_exit_tools.config
    return bool(config.traceback), bool(config.traceback_force_color)


def restore_traceback_state(state: TracebackState) -> None:
    """Write back flags returned by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
