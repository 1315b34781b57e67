"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import get_config
from ..adapters.console.echo import echo_line
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright checks each adapter against its port.
if TYPE_CHECKING:
    from ..adapters.memory.transcript import TranscriptSpy
    from ..application.ports import EmitLine, GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_emit_line: EmitLine = echo_line


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    emit_line: EmitLine


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        emit_line=echo_line,
    )


def build_testing(*, spy: TranscriptSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Logging is left uninitialised, so the result suits direct calls into
    the services. CLI tests replace ``init_logging`` with the production
    initializer.

    Args:
        spy: TranscriptSpy receiving the demonstration output. A fresh one
            is created when None.
    """
    from ..adapters.memory import (
        TranscriptSpy,
        get_config_in_memory,
        init_logging_in_memory,
    )

    transcript = spy if spy is not None else TranscriptSpy()

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        emit_line=transcript.emit_line,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "echo_line",
    "get_config",
    "init_logging",
]
