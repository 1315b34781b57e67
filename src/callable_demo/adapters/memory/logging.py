"""In-memory logging adapter for testing.

Leaves the lib_log_rich runtime untouched. Only use it with services that
are called directly; CLI commands open ``lib_log_rich.runtime.bind`` scopes
and need the production initializer.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept *config* and do nothing."""


__all__ = ["init_logging_in_memory"]
