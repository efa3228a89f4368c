"""Errors raised while parsing number ranges."""

from __future__ import annotations


class NumberRangeError(ValueError):
    """Base class for number range parse errors."""


class MalformedNumberError(NumberRangeError):
    """A number substring could not be converted to the target type."""

    def __init__(self, text: str, type_name: str = "number"):
        self.text = text
        self.type_name = type_name
        super().__init__(f"{text!r} is not a valid {type_name}")


class TooManySeparatorsError(NumberRangeError):
    """A term contains more than two range separators."""

    def __init__(self, term: str, separator: str):
        self.term = term
        self.separator = separator
        super().__init__(f"Too many range separators ({separator}) on {term!r}")


class NothingToParseError(NumberRangeError):
    """Parsing was requested before any source string was given."""

    def __init__(self, message: str = "Nothing to parse"):
        super().__init__(message)
