"""Root command group.

Builds the services, starts logging and records the traceback preference
before any subcommand runs. Invoked without a subcommand it runs every
demonstration.

Contents:
    * :func:`cli` - Root command group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from callable_demo import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences

if TYPE_CHECKING:
    from callable_demo.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show the full Python traceback when a demonstration fails",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Run the demonstrations, or the one named by a subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from callable_demo.composition import build_production
        >>> result = CliRunner().invoke(cli, [], obj=build_production)
        >>> result.exit_code, result.stdout.splitlines()[-1]
        (0, 'Inside greet: 2')
    """
    # ctx.obj arrives as the services factory and leaves as the CLIContext.
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()
    services.init_logging(services.get_config())
    ctx.obj = CLIContext(services=services, traceback=traceback)
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        from .commands import cli_run

        ctx.invoke(cli_run)


# Command modules import from this package, so they are attached after the
# group exists.
def _register_commands() -> None:
    from .commands import cli_block, cli_lambda, cli_proc, cli_run

    for cmd in (cli_run, cli_block, cli_proc, cli_lambda):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
