"""Console adapter - demonstration output on stdout.

Contents:
    * :func:`.echo.echo_line` - Write one line through Click
"""

from __future__ import annotations

from .echo import echo_line

__all__ = ["echo_line"]
