"""
number_range - Parse human readable number ranges into iterators.

Turns command-line style arguments such as "1,3:10,14:2:20" into a lazily
expanded sequence of numbers, with configurable separators, localized
number formats and default bounds.
"""

from number_range.core.config import DEFAULT_OPTIONS, NumberRangeOptions
from number_range.core.exceptions import (
    MalformedNumberError,
    NothingToParseError,
    NumberRangeError,
    TooManySeparatorsError,
)
from number_range.core.number import Number, Range, Single
from number_range.core.number_range import NumberRange, expand
from number_range.utils.page_range import parse_page_range

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_OPTIONS",
    "MalformedNumberError",
    "NothingToParseError",
    "Number",
    "NumberRange",
    "NumberRangeError",
    "NumberRangeOptions",
    "Range",
    "Single",
    "TooManySeparatorsError",
    "expand",
    "parse_page_range",
    "__version__",
]
