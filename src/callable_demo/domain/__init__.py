"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the deferred-action variants, the demonstration procedures and the
error taxonomy that form the core of the application.

Contents:
    * :mod:`.actions` - Stored and strict callable variants
    * :mod:`.behaviors` - Demonstration procedures and the default run
    * :mod:`.enums` - Deferred-action kind enumeration
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .actions import DeferredAction, StoredCallable, StrictCallable, positional_arity
from .behaviors import (
    EXPECTED_TRANSCRIPT,
    TraceSink,
    block_greet,
    lambda_greet,
    proc_greet,
    run_demonstrations,
)
from .enums import CallableKind
from .errors import ArityMismatchError, MissingDeferredActionError

__all__ = [
    # Actions
    "DeferredAction",
    "StoredCallable",
    "StrictCallable",
    "positional_arity",
    # Behaviors
    "EXPECTED_TRANSCRIPT",
    "TraceSink",
    "block_greet",
    "lambda_greet",
    "proc_greet",
    "run_demonstrations",
    # Enums
    "CallableKind",
    # Errors
    "ArityMismatchError",
    "MissingDeferredActionError",
]
