"""Domain enum tagging the deferred-action variants."""

from __future__ import annotations

from enum import Enum


class CallableKind(str, Enum):
    """Variants of deferred code exercised by the demonstrations.

    Inherits from str so members compare equal to their values and can be
    used directly as log context.

    Attributes:
        BLOCK: Action handed to a procedure as an optional block parameter.
        STORED: First-class callable that ignores argument-count mismatches.
        STRICT: First-class callable that validates its argument count.

    Example:
        >>> CallableKind.STRICT.value
        'strict'
        >>> CallableKind.BLOCK == "block"
        True
    """

    BLOCK = "block"
    STORED = "stored"
    STRICT = "strict"


__all__ = ["CallableKind"]
