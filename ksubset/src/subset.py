#!/usr/bin/env python

"""Immutable value holding one concrete k-subset of range(n).

"""

from functools import total_ordering
from operator import index
from typing import Iterator, Sequence
import numpy as np
from ksubset.src.utils import InvalidArgumentError


def as_values(values: Sequence[int]) -> tuple[int, ...]:
    """Return the elements as a tuple of Python ints."""
    try:
        return tuple(index(i) for i in values)
    except TypeError as exc:
        raise InvalidArgumentError(f"Subset elements must be integers: {values!r}") from exc


def check_subset(n: int, k: int, values: Sequence[int]) -> None:
    """Raise InvalidArgumentError unless values is an ascending k-subset of range(n)."""
    if len(values) != k:
        raise InvalidArgumentError(
            f"Subset length must be {k}, but was {len(values)}: {list(values)}")
    previous = -1
    for value in values:
        if not 0 <= value < n:
            raise InvalidArgumentError(
                f"Subset element {value} out of range [0, {n}): {list(values)}")
        if value <= previous:
            raise InvalidArgumentError(
                f"Subset elements must be strictly ascending: {list(values)}")
        previous = value


@total_ordering
class Subset:
    """A validated, ascending k-subset of range(n).

    Ordering is lexicographic over the element values. Equality and
    hashing only look at the element values, not at n or k, so that
    Subset(5, 2, (0, 1)) == Subset(9, 2, (0, 1)) == (0, 1) == [0, 1].
    """
    __slots__ = ("_n", "_k", "_value")

    def __init__(self, n: int, k: int, value: Sequence[int]):
        value = as_values(value)
        check_subset(n, k, value)
        self._n = n
        self._k = k
        self._value = value

    @property
    def n(self) -> int:
        return self._n

    @property
    def k(self) -> int:
        return self._k

    @property
    def value(self) -> tuple[int, ...]:
        return self._value

    def to_array(self) -> np.ndarray:
        """Return a new int64 array copy of the elements."""
        return np.array(self._value, dtype=np.int64)

    def __len__(self) -> int:
        return self._k

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __getitem__(self, idx):
        return self._value[idx]

    def _other_value(self, other):
        if isinstance(other, Subset):
            return other._value
        if isinstance(other, (tuple, list)):
            return tuple(other)
        return None

    def __eq__(self, other):
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other):
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return f"Subset(n={self._n}, k={self._k}, value={list(self._value)})"

    def __str__(self):
        return str(list(self._value))
