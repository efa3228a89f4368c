"""Pytest configuration and shared fixtures."""

import pytest

from number_range.core.config import NumberRangeOptions
from number_range.core.number import Range, Single
from number_range.core.number_range import NumberRange


@pytest.fixture
def manual_range():
    """A NumberRange built by hand: 1,3:2:6,-4:-2."""
    rng = NumberRange()
    rng.numbers.append(Single(1))
    rng.numbers.append(Range(3, 2, 6))
    rng.numbers.append(Range(-4, 1, -2))
    return rng


@pytest.fixture
def dash_options():
    """Options using '-' as the range separator."""
    return NumberRangeOptions().with_range_sep("-")


@pytest.fixture
def localized_options():
    """Options for numbers grouped with commas and spaces."""
    return (
        NumberRangeOptions()
        .with_list_sep("/")
        .with_range_sep("-")
        .with_group_sep(",")
        .with_whitespace(True)
    )
