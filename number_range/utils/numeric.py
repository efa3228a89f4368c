"""Number type helpers shared by the parser and the iterator."""

from __future__ import annotations

import logging
from typing import Any, Callable

import numpy as np

logger = logging.getLogger(__name__)

NumberType = Callable[[str], Any]


def resolve_number_type(number_type: Any) -> NumberType:
    """
    Normalize a user supplied number type.

    Python types (int, float, Decimal, Fraction) are returned unchanged.
    numpy dtypes and dtype names like "uint8" become their scalar type.
    """
    if isinstance(number_type, (str, np.dtype)):
        return np.dtype(number_type).type
    return number_type


def type_name(number_type: Any) -> str:
    """Human readable name for error messages."""
    return getattr(number_type, "__name__", repr(number_type))


def parse_value(text: str, number_type: NumberType) -> Any:
    """
    Convert sanitized text into a value of ``number_type``.

    numpy integer types go through Python's int and are checked against the
    type's limits, so "-4" is rejected for unsigned types instead of wrapping.

    Raises:
        ValueError, TypeError or ArithmeticError from the conversion.
    """
    _check_literal(text)
    if _is_numpy_integer(number_type):
        value = int(text)
        info = np.iinfo(number_type)
        if not info.min <= value <= info.max:
            raise ValueError(
                f"{value} out of bounds for {type_name(number_type)} "
                f"[{info.min}, {info.max}]"
            )
        return number_type(value)
    if _is_numpy_floating(number_type):
        return number_type(float(text))
    return number_type(text)


def one(number_type: NumberType) -> Any:
    """The unit value of ``number_type``, used as the implied step."""
    return number_type(1)


def advance(value: Any, step: Any) -> Any | None:
    """
    Return ``value + step``, or None when the result can't be represented.

    Bounded numpy integers report overflow as None rather than wrapping
    around. A float step too small to change ``value`` also gives None.
    """
    if isinstance(value, np.integer):
        result = int(value) + int(step)
        info = np.iinfo(type(value))
        if not info.min <= result <= info.max:
            logger.debug("Stepping %s by %s overflows %s", value, step, type(value).__name__)
            return None
        return type(value)(result)

    result = value + step
    if result == value:
        logger.debug("Stepping %s by %s does not change the value", value, step)
        return None
    return result


def _check_literal(text: str) -> None:
    """
    Reject text Python's converters accept but a plain number literal doesn't.

    int(), float() and Decimal() allow underscores, inner whitespace and
    non-ASCII digits; grouping and whitespace are handled by sanitization,
    so anything left over is an error.
    """
    if not text.isascii():
        raise ValueError(f"non-ASCII characters in {text!r}")
    if "_" in text or any(c.isspace() for c in text):
        raise ValueError(f"unexpected separator in {text!r}")


def _is_numpy_integer(number_type: Any) -> bool:
    return isinstance(number_type, type) and issubclass(number_type, np.integer)


def _is_numpy_floating(number_type: Any) -> bool:
    return isinstance(number_type, type) and issubclass(number_type, np.floating)
