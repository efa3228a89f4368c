"""Tests for configuration module."""

import dataclasses
from decimal import Decimal

import numpy as np
import pytest

from number_range.core.config import DEFAULT_OPTIONS, NumberRangeOptions
from number_range.core.number_range import NumberRange


class TestNumberRangeOptions:
    """Tests for NumberRangeOptions class."""

    def test_default_values(self):
        """Options should have sensible defaults."""
        options = NumberRangeOptions()

        assert options.list_sep == ","
        assert options.range_sep == ":"
        assert options.group_sep == "_"
        assert options.whitespace is False
        assert options.decimal_sep == "."
        assert options.default_start is None
        assert options.default_end is None
        assert options.number_type is int

    def test_default_is_shared(self):
        """default() should return the module level default options."""
        assert NumberRangeOptions.default() is DEFAULT_OPTIONS
        assert NumberRangeOptions.default() == NumberRangeOptions()

    def test_custom_values(self):
        """Options should accept custom values."""
        options = NumberRangeOptions(list_sep="/", range_sep="-", number_type=float)

        assert options.list_sep == "/"
        assert options.range_sep == "-"
        assert options.number_type is float

    def test_frozen(self):
        """Options can't be changed after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_OPTIONS.list_sep = ";"

    def test_with_methods_chain(self):
        """with_* methods should chain and set every field."""
        options = (
            NumberRangeOptions()
            .with_list_sep("/")
            .with_range_sep("-")
            .with_group_sep(",")
            .with_whitespace(True)
            .with_decimal_sep(",")
            .with_default_start(0)
            .with_default_end(9)
            .with_number_type(Decimal)
        )

        assert options == NumberRangeOptions(
            list_sep="/",
            range_sep="-",
            group_sep=",",
            whitespace=True,
            decimal_sep=",",
            default_start=0,
            default_end=9,
            number_type=Decimal,
        )

    def test_with_methods_leave_original_untouched(self):
        """with_* should return a new instance."""
        options = NumberRangeOptions()
        changed = options.with_range_sep("-")

        assert changed is not options
        assert options.range_sep == ":"
        assert changed.range_sep == "-"

    def test_same_separator_twice_allowed(self):
        """Separators are not validated against each other."""
        options = NumberRangeOptions().with_list_sep(":")
        assert options.list_sep == options.range_sep == ":"

    def test_dtype_name_resolved(self):
        """dtype names should resolve to numpy scalar types."""
        options = NumberRangeOptions(number_type="uint8")
        assert options.number_type is np.uint8

    def test_dtype_resolved(self):
        """numpy dtypes should resolve to numpy scalar types."""
        options = NumberRangeOptions().with_number_type(np.dtype("float32"))
        assert options.number_type is np.float32

    def test_parse(self):
        """parse() should build a NumberRange using these options."""
        options = NumberRangeOptions().with_range_sep("-")
        rng = options.parse("1,4,6-8")

        assert isinstance(rng, NumberRange)
        assert rng.options is options
        assert list(rng) == [1, 4, 6, 7, 8]


class TestNumberRangeOptionsPresets:
    """Tests for preset constructors."""

    def test_for_pages(self):
        """Page preset should use dashes and start at page 1."""
        options = NumberRangeOptions.for_pages(5)

        assert options.range_sep == "-"
        assert options.default_start == 1
        assert options.default_end == 5
        assert list(options.parse("-2,4-")) == [1, 2, 4, 5]

    def test_for_pages_without_total(self):
        """Without a page count the end must be given."""
        options = NumberRangeOptions.for_pages()
        assert options.default_end is None
        assert list(options.parse("2-3")) == [2, 3]

    def test_for_decimal_comma(self):
        """Decimal comma preset should read 1.234,5 as 1234.5."""
        options = NumberRangeOptions.for_decimal_comma()

        assert options.number_type is float
        assert list(options.parse("1.234,5; 2 000,25")) == [1234.5, 2000.25]
