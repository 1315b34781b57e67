"""Write demonstration output lines to stdout through Click."""

from __future__ import annotations

import rich_click as click


def echo_line(line: str) -> None:
    """Write *line* followed by a newline to stdout.

    Example:
        >>> echo_line("Yield called!")
        Yield called!
    """
    click.echo(line)


__all__ = ["echo_line"]
