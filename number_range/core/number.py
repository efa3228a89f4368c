"""Terms that make up a number range."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Single:
    """
    A single value.

    Example:
        >>> Single(4).is_valid()
        True
    """

    value: Any

    def is_valid(self) -> bool:
        return True

    def is_invalid(self) -> bool:
        return False


@dataclass(frozen=True)
class Range:
    """
    An inclusive arithmetic progression from ``start`` towards ``end``.

    A range is valid when the step moves start towards end:
    ``start <= end`` with a positive step, or ``start >= end`` with a
    negative one. Zero steps are never valid.

    Example:
        >>> Range(3, 2, 6).is_valid()
        True
        >>> Range(4, 1, 2).is_valid()
        False
    """

    start: Any
    step: Any
    end: Any

    def is_valid(self) -> bool:
        """Check that stepping from start can reach end."""
        return bool(
            (self.start <= self.end and self.step > 0)
            or (self.start >= self.end and self.step < 0)
        )

    def is_invalid(self) -> bool:
        return not self.is_valid()


Number = Union[Single, Range]
