"""Demonstration commands for the three kinds of deferred code.

Contents:
    * :func:`cli_run` - Run all demonstrations in order.
    * :func:`cli_block` - Block handed to a procedure.
    * :func:`cli_proc` - Stored callable passed explicitly.
    * :func:`cli_lambda` - Strict callable passed explicitly.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from callable_demo.domain.actions import DeferredAction
from callable_demo.domain.behaviors import (
    block_greet,
    build_block,
    build_stored_callable,
    build_strict_callable,
    lambda_greet,
    proc_greet,
    run_demonstrations,
)
from callable_demo.domain.enums import CallableKind
from callable_demo.domain.errors import ArityMismatchError, MissingDeferredActionError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)

_ARG_HELP = "Positional argument passed to the callable (repeatable)"


@click.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_run(ctx: click.Context) -> None:
    """Run the block, stored-callable and strict-callable demonstrations.

    This is also what runs when no subcommand is given.

    Example:
        >>> from click.testing import CliRunner
        >>> from callable_demo.composition import build_production
        >>> from callable_demo.adapters.cli.root import cli
        >>> result = CliRunner().invoke(cli, ["run"], obj=build_production)
        >>> result.stdout.splitlines()[1]
        'Yield called!'
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-run", extra={"command": "run"}):
        logger.info("Running all demonstrations")
        run_demonstrations(cli_ctx.services.emit_line)


@click.command("block", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--without-block",
    is_flag=True,
    default=False,
    help="Call the procedure without a block to show the failure path",
)
@click.pass_context
def cli_block(ctx: click.Context, without_block: bool) -> None:
    """Hand a block to a procedure that runs it between two trace lines."""
    cli_ctx = get_cli_context(ctx)
    emit = cli_ctx.services.emit_line
    block = None if without_block else build_block(emit)

    extra = {"command": "block", "kind": CallableKind.BLOCK.value, "without_block": without_block}
    with lib_log_rich.runtime.bind(job_id="cli-block", extra=extra):
        logger.info("Running block demonstration")
        try:
            block_greet(emit, block)
        except MissingDeferredActionError as exc:
            logger.error("Procedure reached its block but none was given", extra={"error": str(exc)})
            raise


@click.command("proc", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--arg", "args", multiple=True, metavar="VALUE", help=_ARG_HELP)
@click.pass_context
def cli_proc(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Pass a stored callable to a procedure; extra arguments are ignored."""
    cli_ctx = get_cli_context(ctx)
    emit = cli_ctx.services.emit_line
    action: DeferredAction = build_stored_callable(emit)

    extra = {"command": "proc", "kind": action.kind.value, "arg_count": len(args)}
    with lib_log_rich.runtime.bind(job_id="cli-proc", extra=extra):
        logger.info("Running stored-callable demonstration")
        proc_greet(emit, action, args)


@click.command("lambda", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--arg", "args", multiple=True, metavar="VALUE", help=_ARG_HELP)
@click.pass_context
def cli_lambda(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Pass a strict callable to a procedure; any argument is rejected."""
    cli_ctx = get_cli_context(ctx)
    emit = cli_ctx.services.emit_line
    action: DeferredAction = build_strict_callable(emit)

    extra = {"command": "lambda", "kind": action.kind.value, "arg_count": len(args)}
    with lib_log_rich.runtime.bind(job_id="cli-lambda", extra=extra):
        logger.info("Running strict-callable demonstration")
        try:
            lambda_greet(emit, action, args)
        except ArityMismatchError as exc:
            logger.error("Strict callable rejected its arguments", extra={"error": str(exc)})
            raise


__all__ = ["cli_block", "cli_lambda", "cli_proc", "cli_run"]
