"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to external
systems and frameworks (CLI, configuration, console output, logging).

Contents:
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.config` - Layered configuration loading
    * :mod:`.console` - Demonstration output on stdout
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
