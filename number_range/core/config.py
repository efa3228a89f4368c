"""Configuration for number range parsing."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from number_range.utils.numeric import resolve_number_type

if TYPE_CHECKING:
    from number_range.core.number_range import NumberRange


@dataclass(frozen=True)
class NumberRangeOptions:
    """
    Separators and defaults used to parse and format number ranges.

    Options are immutable; every ``with_*`` method returns a new instance
    so calls can be chained.

    Attributes:
        list_sep: Separates terms. Split on first.
        range_sep: Separates start, step and end inside a term
        group_sep: Digit grouping character, removed before parsing
        whitespace: Remove whitespace inside numbers, not just around them
        decimal_sep: Decimal separator, replaced by '.' before parsing
        default_start: Used when a range omits its start
        default_end: Used when a range omits its end
        number_type: Type values are parsed into (int, float, Decimal, numpy types)

    Example:
        >>> list(NumberRangeOptions().with_range_sep("-").parse("1,4,6-8"))
        [1, 4, 6, 7, 8]
    """

    list_sep: str = ","
    range_sep: str = ":"
    group_sep: str = "_"
    whitespace: bool = False
    decimal_sep: str = "."
    default_start: Any = None
    default_end: Any = None
    number_type: Any = int

    def __post_init__(self) -> None:
        """Resolve dtype names like 'uint8' to numpy scalar types."""
        object.__setattr__(self, "number_type", resolve_number_type(self.number_type))

    @classmethod
    def default(cls) -> NumberRangeOptions:
        """The shared default options."""
        return DEFAULT_OPTIONS

    def with_list_sep(self, sep: str) -> NumberRangeOptions:
        return replace(self, list_sep=sep)

    def with_range_sep(self, sep: str) -> NumberRangeOptions:
        return replace(self, range_sep=sep)

    def with_group_sep(self, sep: str) -> NumberRangeOptions:
        return replace(self, group_sep=sep)

    def with_whitespace(self, flag: bool) -> NumberRangeOptions:
        return replace(self, whitespace=flag)

    def with_decimal_sep(self, sep: str) -> NumberRangeOptions:
        return replace(self, decimal_sep=sep)

    def with_default_start(self, value: Any) -> NumberRangeOptions:
        return replace(self, default_start=value)

    def with_default_end(self, value: Any) -> NumberRangeOptions:
        return replace(self, default_end=value)

    def with_number_type(self, number_type: Any) -> NumberRangeOptions:
        return replace(self, number_type=number_type)

    def parse(self, text: str) -> NumberRange:
        """
        Build a NumberRange with these options and parse ``text``.

        Raises:
            NumberRangeError: If the text is not a valid number range
        """
        from number_range.core.number_range import NumberRange

        return NumberRange(self).parse_str(text)

    @classmethod
    def for_pages(cls, total_pages: int | None = None) -> NumberRangeOptions:
        """Page selections like '1-3,7,9-'; open ends run to the first/last page."""
        return cls(range_sep="-", default_start=1, default_end=total_pages)

    @classmethod
    def for_decimal_comma(cls) -> NumberRangeOptions:
        """Locales writing 1.234,5 for 1234.5; terms are split on ';'."""
        return cls(
            list_sep=";",
            group_sep=".",
            decimal_sep=",",
            whitespace=True,
            number_type=float,
        )


DEFAULT_OPTIONS = NumberRangeOptions()
