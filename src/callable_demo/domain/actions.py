"""Deferred-action variants: a lenient stored callable and a strict callable.

Both wrap an ordinary Python function. They differ only in how they treat
the number of positional arguments supplied at invocation time:

* :class:`StoredCallable` adapts the arguments to the wrapped function.
  Surplus arguments are dropped and missing required ones become ``None``.
* :class:`StrictCallable` refuses a mismatching call with
  :class:`~callable_demo.domain.errors.ArityMismatchError` before the
  wrapped function runs.

Contents:
    * :func:`positional_arity` - positional parameter range of a function.
    * :class:`StoredCallable` - lenient variant.
    * :class:`StrictCallable` - strict variant.
    * :data:`DeferredAction` - union of both variants.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from .enums import CallableKind
from .errors import ArityMismatchError

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def positional_arity(fn: Callable[..., Any]) -> tuple[int, int | None]:
    """Return ``(required, maximum)`` positional argument counts of *fn*.

    ``maximum`` is ``None`` when *fn* declares ``*args``.

    Example:
        >>> positional_arity(lambda: None)
        (0, 0)
        >>> positional_arity(lambda a, b=1: None)
        (1, 2)
        >>> positional_arity(lambda a, *rest: None)
        (1, None)
    """
    required = 0
    maximum: int | None = 0
    for param in inspect.signature(fn).parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            maximum = None
        elif param.kind in _POSITIONAL:
            if maximum is not None:
                maximum += 1
            if param.default is inspect.Parameter.empty:
                required += 1
    return required, maximum


@dataclass(frozen=True, slots=True)
class StoredCallable:
    """First-class deferred action that never checks its argument count.

    May be invoked any number of times.

    Example:
        >>> calls = []
        >>> stored = StoredCallable(lambda: calls.append("ran"))
        >>> stored()
        >>> stored("ignored", "too")
        >>> calls
        ['ran', 'ran']
        >>> StoredCallable(lambda a, b: (a, b))("only-one")
        ('only-one', None)
    """

    kind: ClassVar[CallableKind] = CallableKind.STORED

    action: Callable[..., Any]

    def __call__(self, *args: Any) -> Any:
        required, maximum = positional_arity(self.action)
        if maximum is not None:
            args = args[:maximum]
        if len(args) < required:
            args = args + (None,) * (required - len(args))
        return self.action(*args)


@dataclass(frozen=True, slots=True)
class StrictCallable:
    """First-class deferred action that validates its argument count.

    Example:
        >>> strict = StrictCallable(lambda: "ran")
        >>> strict()
        'ran'
        >>> strict("extra")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        callable_demo.domain.errors.ArityMismatchError: wrong number of arguments (given 1, expected 0)
    """

    kind: ClassVar[CallableKind] = CallableKind.STRICT

    action: Callable[..., Any]

    def __call__(self, *args: Any) -> Any:
        required, maximum = positional_arity(self.action)
        if len(args) < required or (maximum is not None and len(args) > maximum):
            raise ArityMismatchError(given=len(args), expected_min=required, expected_max=maximum)
        return self.action(*args)


DeferredAction = StoredCallable | StrictCallable
"""Either deferred-action variant; dispatch on ``kind`` when it matters."""


__all__ = [
    "DeferredAction",
    "StoredCallable",
    "StrictCallable",
    "positional_arity",
]
