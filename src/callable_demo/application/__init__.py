"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import EmitLine, GetConfig, InitLogging

__all__ = [
    "EmitLine",
    "GetConfig",
    "InitLogging",
]
