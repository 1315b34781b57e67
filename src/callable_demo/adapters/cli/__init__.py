"""Command-line interface built on rich-click.

Re-exports the root group, the entry wrapper, the subcommands and the
traceback helpers so callers need not know the module layout.
"""

from __future__ import annotations

from .commands import cli_block, cli_lambda, cli_proc, cli_run
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_block",
    "cli_lambda",
    "cli_proc",
    "cli_run",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
