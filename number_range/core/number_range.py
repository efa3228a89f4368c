"""Parsing, iteration and formatting of number ranges."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

from number_range.core.config import DEFAULT_OPTIONS, NumberRangeOptions
from number_range.core.exceptions import (
    MalformedNumberError,
    NothingToParseError,
    TooManySeparatorsError,
)
from number_range.core.number import Number, Range, Single
from number_range.utils.numeric import advance, one, parse_value, type_name

logger = logging.getLogger(__name__)


class NumberRange:
    """
    Lazily expanded list of numbers and ranges.

    Parse a string like "1,3:10,14:2:20" and iterate over it to get the
    values. Iteration consumes the terms in ``numbers``: ranges advance
    towards their end and exhausted terms are removed. ``str()`` shows
    what is left.

    Terms can also be added by hand:

    Example:
        >>> rng = NumberRange()
        >>> rng.numbers.append(Single(1))
        >>> rng.numbers.append(Range(3, 2, 6))
        >>> rng.numbers.append(Range(-4, 1, -2))
        >>> str(rng)
        '1,3:2:6,-4:-2'
        >>> list(rng)
        [1, 3, 5, -4, -3, -2]
    """

    def __init__(
        self,
        options: NumberRangeOptions | None = None,
        numbers: Iterable[Number] = (),
    ):
        """
        Create an empty number range.

        Args:
            options: Separators and defaults. If None, uses the default options.
            numbers: Initial terms
        """
        self.options = options or DEFAULT_OPTIONS
        self.numbers: deque[Number] = deque(numbers)
        self._original: str | None = None

    @classmethod
    def from_options(cls, options: NumberRangeOptions) -> NumberRange:
        return cls(options)

    def original(self) -> str:
        """The last successfully parsed string, or '' if nothing was parsed."""
        return self._original or ""

    def parse_str(self, text: str) -> NumberRange:
        """
        Parse ``text``, replacing any existing terms.

        Returns:
            self, so it can be iterated directly

        Raises:
            MalformedNumberError: If a number can't be parsed
            TooManySeparatorsError: If a term has more than two range separators
        """
        numbers = self._parse_terms(text)
        self.numbers = numbers
        self._original = text
        return self

    def parse(self) -> NumberRange:
        """
        Parse the stored original string again, restoring all its terms.

        Raises:
            NothingToParseError: If no string was ever parsed
        """
        if self._original is None:
            raise NothingToParseError()
        return self.parse_str(self._original)

    def copy(self) -> NumberRange:
        """Independent copy; iterating it leaves this range untouched."""
        other = type(self)(self.options, self.numbers)
        other._original = self._original
        return other

    def _parse_terms(self, text: str) -> deque[Number]:
        if self._sanitize_number(text) == "":
            logger.debug("Empty number range %r", text)
            return deque()

        numbers = deque(self._parse_term(term) for term in text.split(self.options.list_sep))
        logger.debug("Parsed %d terms from %r", len(numbers), text)
        return numbers

    def _parse_term(self, term: str) -> Number:
        opts = self.options
        count = term.count(opts.range_sep)

        if count == 0:
            return Single(self._parse_number(term))

        if count == 1:
            start, end = term.split(opts.range_sep)
            return Range(
                self._parse_number(start, opts.default_start),
                one(opts.number_type),
                self._parse_number(end, opts.default_end),
            )

        if count == 2:
            start, step, end = term.split(opts.range_sep)
            return Range(
                self._parse_number(start, opts.default_start),
                self._parse_number(step, one(opts.number_type)),
                self._parse_number(end, opts.default_end),
            )

        raise TooManySeparatorsError(term, opts.range_sep)

    def _sanitize_number(self, text: str) -> str:
        opts = self.options
        text = text.strip().replace(opts.group_sep, "")
        if opts.whitespace:
            text = "".join(text.split())
        return text.replace(opts.decimal_sep, ".")

    def _parse_number(self, text: str, default: Any = None) -> Any:
        """Parse one number, falling back to ``default`` when it's empty."""
        number_type = self.options.number_type
        sanitized = self._sanitize_number(text)
        if default is not None and sanitized == "":
            return default
        try:
            return parse_value(sanitized, number_type)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise MalformedNumberError(text, type_name(number_type)) from e

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        while self.numbers:
            number = self.numbers[0]
            if isinstance(number, Single):
                self.numbers.popleft()
                return number.value

            # Ranges added by hand are not checked until they're reached
            if number.is_invalid():
                logger.debug("Skipping invalid range %r", number)
                self.numbers.popleft()
                continue

            start = advance(number.start, number.step)
            following = None if start is None else Range(start, number.step, number.end)
            if following is not None and following.is_valid():
                self.numbers[0] = following
            else:
                self.numbers.popleft()
            return number.start

        raise StopIteration

    def __str__(self) -> str:
        opts = self.options
        return opts.list_sep.join(self._format_term(number) for number in self.numbers)

    def _format_term(self, number: Number) -> str:
        sep = self.options.range_sep
        if isinstance(number, Single):
            return str(number.value)
        if number.step == 1:
            return f"{number.start}{sep}{number.end}"
        return sep.join(str(v) for v in (number.start, number.step, number.end))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"


def expand(text: str, options: NumberRangeOptions | None = None) -> list[Any]:
    """
    Parse ``text`` and return every value in it.

    Example:
        >>> expand("1,3:5,10:-4:2")
        [1, 3, 4, 5, 10, 6, 2]
    """
    return list((options or DEFAULT_OPTIONS).parse(text))
