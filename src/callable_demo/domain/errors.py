"""Domain-specific exceptions raised while invoking deferred actions."""

from __future__ import annotations


class MissingDeferredActionError(Exception):
    """A procedure expected a block but none was supplied.

    Raised by the implicit-block demonstration at the point where the block
    would run. There is no recovery path; the error propagates to the CLI
    boundary and terminates the remaining demonstrations.

    Example:
        >>> from callable_demo.domain.errors import MissingDeferredActionError
        >>> err = MissingDeferredActionError("no block given (yield)")
        >>> str(err)
        'no block given (yield)'
    """


class ArityMismatchError(TypeError):
    """A strict callable was invoked with the wrong number of arguments.

    Inherits from TypeError, which is what Python itself raises for a call
    with an unexpected argument count.

    Attributes:
        given: Number of positional arguments supplied.
        expected_min: Number of required positional parameters.
        expected_max: Upper bound of positional parameters, ``None`` when
            the callable accepts ``*args``.

    Example:
        >>> err = ArityMismatchError(given=1, expected_min=0, expected_max=0)
        >>> str(err)
        'wrong number of arguments (given 1, expected 0)'
        >>> isinstance(err, TypeError)
        True
        >>> str(ArityMismatchError(given=0, expected_min=1, expected_max=None))
        'wrong number of arguments (given 0, expected 1+)'
        >>> str(ArityMismatchError(given=3, expected_min=1, expected_max=2))
        'wrong number of arguments (given 3, expected 1..2)'
    """

    def __init__(self, *, given: int, expected_min: int, expected_max: int | None) -> None:
        self.given = given
        self.expected_min = expected_min
        self.expected_max = expected_max
        expected = _describe_range(expected_min, expected_max)
        super().__init__(f"wrong number of arguments (given {given}, expected {expected})")


def _describe_range(minimum: int, maximum: int | None) -> str:
    if maximum is None:
        return f"{minimum}+"
    if minimum == maximum:
        return str(minimum)
    return f"{minimum}..{maximum}"


__all__ = [
    "ArityMismatchError",
    "MissingDeferredActionError",
]
