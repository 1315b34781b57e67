"""CLI subcommands registered on the root group.

Contents:
    * Demonstration commands from :mod:`.demo`
"""

from __future__ import annotations

from .demo import cli_block, cli_lambda, cli_proc, cli_run

__all__ = [
    "cli_block",
    "cli_lambda",
    "cli_proc",
    "cli_run",
]
