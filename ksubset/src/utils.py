#!/usr/bin/env python

"""Utilities for ksubset.

Error classes shared by all modules and a helper for the CLI.
"""

# largest value of a 64-bit signed integer. Sizes and ranks must fit.
INT64_MAX = 2 ** 63 - 1


class KSubsetError(Exception):
    def __init__(self, *args, **kwargs):
        Exception.__init__(self, *args, **kwargs)


class InvalidArgumentError(KSubsetError, ValueError):
    """Raised on malformed n/k, subsets, ranks or comparison operands."""


class ArithmeticOverflowError(KSubsetError, OverflowError):
    """Raised when a value cannot be represented as a 64-bit signed int."""


def make_wide(formatter, w=120, h=36):
    """Return a wider HelpFormatter, if possible."""
    try:
        # https://stackoverflow.com/a/5464440
        # beware: "Only the name of this class is considered a public API."
        kwargs = {'width': w, 'max_help_position': h}
        formatter(None, **kwargs)
        return lambda prog: formatter(prog, **kwargs)
    except TypeError:
        return formatter


def parse_elements(text: str) -> tuple[int, ...]:
    """Return a tuple of ints from a comma separated string.

    An empty string is the empty subset.
    """
    text = text.strip()
    if not text:
        return ()
    try:
        return tuple(int(i) for i in text.split(","))
    except ValueError as exc:
        raise InvalidArgumentError(f"Not a list of integers: {text!r}") from exc
