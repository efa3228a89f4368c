"""Core modules for number range parsing."""

from number_range.core.config import DEFAULT_OPTIONS, NumberRangeOptions
from number_range.core.exceptions import (
    MalformedNumberError,
    NothingToParseError,
    NumberRangeError,
    TooManySeparatorsError,
)
from number_range.core.number import Number, Range, Single
from number_range.core.number_range import NumberRange, expand

__all__ = [
    "DEFAULT_OPTIONS",
    "NumberRangeOptions",
    "NumberRangeError",
    "MalformedNumberError",
    "TooManySeparatorsError",
    "NothingToParseError",
    "Number",
    "Single",
    "Range",
    "NumberRange",
    "expand",
]
