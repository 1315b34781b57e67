"""Pure domain functions with no I/O or framework dependencies.

Every demonstration writes through an injected ``emit`` sink, so the same
code drives the console in production and a recording list in tests.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from .actions import StoredCallable, StrictCallable
from .errors import MissingDeferredActionError

TraceSink = Callable[[str], None]
"""Receives one output line per call."""

BLOCK_BEFORE = "Inside block greet: 1"
BLOCK_AFTER = "Inside block greet: 2"
BLOCK_MESSAGE = "Yield called!"

PROC_BEFORE = "Inside proc greet: 1"
PROC_AFTER = "Inside proc greet: 2"
PROC_MESSAGE = "Proc called!"

LAMBDA_BEFORE = "Inside greet: 1"
LAMBDA_AFTER = "Inside greet: 2"
LAMBDA_MESSAGE = "Lambda called!"

EXPECTED_TRANSCRIPT: tuple[str, ...] = (
    BLOCK_BEFORE,
    BLOCK_MESSAGE,
    BLOCK_AFTER,
    PROC_BEFORE,
    PROC_MESSAGE,
    PROC_AFTER,
    LAMBDA_BEFORE,
    LAMBDA_MESSAGE,
    LAMBDA_AFTER,
)


def build_block(emit: TraceSink) -> Callable[[], None]:
    """Return the plain function handed to :func:`block_greet`."""

    def block() -> None:
        emit(BLOCK_MESSAGE)

    return block


def build_stored_callable(emit: TraceSink) -> StoredCallable:
    """Return the lenient callable handed to :func:`proc_greet`."""
    return StoredCallable(lambda: emit(PROC_MESSAGE))


def build_strict_callable(emit: TraceSink) -> StrictCallable:
    """Return the strict callable handed to :func:`lambda_greet`."""
    return StrictCallable(lambda: emit(LAMBDA_MESSAGE))


def block_greet(emit: TraceSink, block: Callable[[], Any] | None = None) -> None:
    """Run *block* between two trace lines.

    The block is an optional parameter rather than an argument the caller
    must name, so omitting it is legal at the call site and only fails once
    the procedure reaches the point where the block runs.

    Args:
        emit: Output sink for trace lines.
        block: Zero-argument action run exactly once.

    Raises:
        MissingDeferredActionError: When *block* is ``None``. The first trace
            line has already been written at that point.

    Example:
        >>> lines = []
        >>> block_greet(lines.append, lambda: lines.append("body"))
        >>> lines
        ['Inside block greet: 1', 'body', 'Inside block greet: 2']
    """
    emit(BLOCK_BEFORE)
    if block is None:
        raise MissingDeferredActionError("no block given (yield)")
    block()
    emit(BLOCK_AFTER)


def proc_greet(emit: TraceSink, proc_object: Callable[..., Any], args: Sequence[Any] = ()) -> None:
    """Invoke *proc_object* once with *args* between two trace lines.

    Example:
        >>> lines = []
        >>> proc_greet(lines.append, build_stored_callable(lines.append), args=("ignored",))
        >>> lines
        ['Inside proc greet: 1', 'Proc called!', 'Inside proc greet: 2']
    """
    emit(PROC_BEFORE)
    proc_object(*args)
    emit(PROC_AFTER)


def lambda_greet(emit: TraceSink, lambda_object: Callable[..., Any], args: Sequence[Any] = ()) -> None:
    """Invoke *lambda_object* once with *args* between two trace lines.

    Raises:
        ArityMismatchError: When *lambda_object* is a strict callable and
            *args* does not match its declared parameters.

    Example:
        >>> lines = []
        >>> lambda_greet(lines.append, build_strict_callable(lines.append))
        >>> lines
        ['Inside greet: 1', 'Lambda called!', 'Inside greet: 2']
    """
    emit(LAMBDA_BEFORE)
    lambda_object(*args)
    emit(LAMBDA_AFTER)


def run_demonstrations(emit: TraceSink) -> None:
    """Run the block, stored-callable and strict-callable demonstrations in order.

    Example:
        >>> lines = []
        >>> run_demonstrations(lines.append)
        >>> tuple(lines) == EXPECTED_TRANSCRIPT
        True
    """
    block_greet(emit, build_block(emit))
    proc_greet(emit, build_stored_callable(emit))
    lambda_greet(emit, build_strict_callable(emit))


__all__ = [
    "BLOCK_AFTER",
    "BLOCK_BEFORE",
    "BLOCK_MESSAGE",
    "EXPECTED_TRANSCRIPT",
    "LAMBDA_AFTER",
    "LAMBDA_BEFORE",
    "LAMBDA_MESSAGE",
    "PROC_AFTER",
    "PROC_BEFORE",
    "PROC_MESSAGE",
    "TraceSink",
    "block_greet",
    "build_block",
    "build_stored_callable",
    "build_strict_callable",
    "lambda_greet",
    "proc_greet",
    "run_demonstrations",
]
