"""Page range parsing utilities."""

from __future__ import annotations

from collections import deque

from number_range.core.config import NumberRangeOptions
from number_range.core.number import Number, Range


def parse_page_range(page_range: str, total_pages: int) -> list[int]:
    """
    Parse a human-friendly page range string into 0-based page indices.

    Args:
        page_range: String like "1-5", "1,3,5", "7-", "all", or combinations
        total_pages: Total number of pages in the document

    Returns:
        Sorted list of 0-based page indices. Pages outside the document
        are dropped.

    Raises:
        NumberRangeError: If the page range can't be parsed

    Examples:
        >>> parse_page_range("all", 10)
        [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
        >>> parse_page_range("1-3", 10)
        [0, 1, 2]
        >>> parse_page_range("1,5,9", 10)
        [0, 4, 8]
        >>> parse_page_range("1-3,8-", 10)
        [0, 1, 2, 7, 8, 9]
    """
    if not page_range or page_range.lower().strip() == "all":
        return list(range(total_pages))

    options = NumberRangeOptions.for_pages(total_pages).with_whitespace(True)
    rng = options.parse(page_range)
    rng.numbers = deque(_clamp(n, total_pages) for n in rng.numbers)

    pages = {p - 1 for p in rng if 1 <= p <= total_pages}
    return sorted(pages)


def _clamp(number: Number, total_pages: int) -> Number:
    """Limit a range to pages 1..total_pages, keeping it on its step."""
    if not isinstance(number, Range) or number.is_invalid():
        return number

    start, step, end = number.start, number.step, number.end
    if step > 0:
        if start < 1:
            # first value of the progression that is >= 1
            start += -((start - 1) // step) * step
        end = min(end, total_pages)
    else:
        if start > total_pages:
            start += -((total_pages - start) // -step) * step
        end = max(end, 1)
    return Range(start, step, end)
