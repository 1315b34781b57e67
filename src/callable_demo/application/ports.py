"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol defines a ``__call__`` whose signature matches the adapter
function that implements it, so module-level functions satisfy the ports
structurally.

``Config`` is imported under ``TYPE_CHECKING`` only; the application layer
has no runtime dependency on infrastructure packages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load the layered configuration on top of the bundled defaults."""

    def __call__(self) -> Config: ...


class InitLogging(Protocol):
    """Start the lib_log_rich runtime from the loaded configuration."""

    def __call__(self, config: Config) -> None: ...


class EmitLine(Protocol):
    """Write one line of demonstration output."""

    def __call__(self, line: str) -> None: ...


__all__ = [
    "EmitLine",
    "GetConfig",
    "InitLogging",
]
