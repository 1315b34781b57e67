"""Process-level wrapper around the root group.

The console script and ``python -m callable_demo`` both go through
:func:`main`, which turns every outcome into an exit code, prints failures
via ``lib_cli_exit_tools`` and tears logging down.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from callable_demo import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from callable_demo.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print the active exception and return its exit code.

    Must be called from inside an ``except`` block.
    """
    verbose, _ = snapshot_traceback_state()
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(argv: Sequence[str] | None, services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the traceback flags back as they were before the run.
        services_factory: Builds the AppServices for this run; entry points
            pass ``build_production``.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from callable_demo.composition import build_production
        >>> main(["--version"], services_factory=build_production)  # doctest: +SKIP
        callable-demo version 1.0.0
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = snapshot_traceback_state()
    try:
        return _invoke(argv, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        # Worker threads may still hold the runtime; only the main thread shuts it down.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
