"""Helpers for accepting number ranges as command-line arguments."""

from __future__ import annotations

import argparse
from typing import Any, Callable

from number_range.core.config import DEFAULT_OPTIONS, NumberRangeOptions
from number_range.core.exceptions import NumberRangeError
from number_range.core.number_range import NumberRange


def number_range_type(
    options: NumberRangeOptions | None = None,
) -> Callable[[str], NumberRange]:
    """
    Build an argparse ``type`` converter returning a parsed NumberRange.

    Example:
        >>> parser = argparse.ArgumentParser()
        >>> _ = parser.add_argument("--ids", type=number_range_type())
        >>> list(parser.parse_args(["--ids", "1,4:6"]).ids)
        [1, 4, 5, 6]
    """
    options = options or DEFAULT_OPTIONS

    def convert(text: str) -> NumberRange:
        try:
            return options.parse(text)
        except NumberRangeError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    convert.__name__ = "number range"
    return convert


class NumberRangeAction(argparse.Action):
    """
    Store the expanded values of a number range argument as a list.

    Typical usage:
        ``parser.add_argument("--pages", action=NumberRangeAction)``
        ``parser.add_argument("--ids", action=NumberRangeAction,
        options=NumberRangeOptions().with_range_sep("-"))``
    """

    def __init__(
        self,
        option_strings: list[str],
        dest: str,
        *,
        options: NumberRangeOptions | None = None,
        **kwargs: Any,
    ) -> None:
        # one range string per argument; use the list separator for more values
        if kwargs.get("nargs") is not None:
            raise ValueError(f"[{dest}]: `nargs` is not supported, got {kwargs['nargs']!r}")
        self.options = options or DEFAULT_OPTIONS
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        try:
            expanded = list(self.options.parse(values))
        except NumberRangeError as e:
            parser.error(f"argument {option_string or self.dest}: {e}")
        setattr(namespace, self.dest, expanded)
