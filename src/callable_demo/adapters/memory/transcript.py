"""In-memory output adapter for testing.

Provides a line sink that satisfies the EmitLine protocol but records the
lines instead of writing them to the console.

Contents:
    * :class:`TranscriptSpy` - Captures emitted lines for test assertions.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _empty_line_list() -> list[str]:
    """Create an empty typed list for captured lines."""
    return []


@dataclass
class TranscriptSpy:
    """Captures emitted demonstration lines for test assertions.

    Each test should create its own TranscriptSpy instance to avoid cross-test
    pollution. :meth:`emit_line` matches the EmitLine protocol expected by
    AppServices.

    Attributes:
        lines: Captured lines in emission order.
        raise_exception: When set, emit_line raises this exception after
            recording the line.

    Example:
        >>> spy = TranscriptSpy()
        >>> spy.emit_line("Proc called!")
        >>> spy.lines
        ['Proc called!']
    """

    lines: list[str] = field(default_factory=_empty_line_list)
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.lines.clear()
        self.raise_exception = None

    def emit_line(self, line: str) -> None:
        """Record *line*.

        Raises:
            Exception: If raise_exception is set, raises that exception.
        """
        self.lines.append(line)
        if self.raise_exception is not None:
            raise self.raise_exception


__all__ = ["TranscriptSpy"]
