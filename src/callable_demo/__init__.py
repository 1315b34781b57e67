"""Public package surface: the demonstrations, their callables and errors.

Imports are routed through the architectural layers:
- Domain exports: deferred-action variants, demonstrations, errors
- Composition exports: the wired configuration loader
"""

from __future__ import annotations

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.actions import StoredCallable, StrictCallable
from .domain.behaviors import (
    EXPECTED_TRANSCRIPT,
    block_greet,
    lambda_greet,
    proc_greet,
    run_demonstrations,
)
from .domain.errors import ArityMismatchError, MissingDeferredActionError

__all__ = [
    "EXPECTED_TRANSCRIPT",
    "ArityMismatchError",
    "MissingDeferredActionError",
    "StoredCallable",
    "StrictCallable",
    "block_greet",
    "get_config",
    "lambda_greet",
    "proc_greet",
    "run_demonstrations",
]
