"""In-memory adapter implementations for testing.

Lightweight stand-ins for the configuration, logging and output ports that
never touch the filesystem or the console.

Contents:
    * :mod:`.config` - Fixed in-memory configuration
    * :mod:`.logging` - No-op logging initializer
    * :mod:`.transcript` - Output sink recording lines (TranscriptSpy class)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .logging import init_logging_in_memory
from .transcript import TranscriptSpy

# Static conformance assertions
if TYPE_CHECKING:
    from callable_demo.application.ports import GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "TranscriptSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
]
