#!/usr/bin/env python

"""Forward-only, stateful producers of k-subsets.

A Cursor writes one subset per `next(out)` call into a caller owned
buffer of length k and returns False once it is exhausted. Cursors are
created by the KSubset factories, drained once by a single owner and
then discarded; they are never reset or shared.

- SequentialCursor: walks lexicographic successors from a start subset
  until there is none left.
- BoundedCursor: walks from a start subset for a fixed number of steps
  (rank(end) - rank(start) + 1), stopping at end.
- RandomCursor: never exhausted; every call draws a new uniform random
  subset. Subsets may repeat.
"""

from abc import ABC, abstractmethod
from typing import MutableSequence, Sequence
import numpy as np
from numpy.random import default_rng
from loguru import logger
from ksubset.jit.next_combination import jit_next_combination
from ksubset.src.random_subset import random_subset, check_subset_size
from ksubset.src.utils import InvalidArgumentError


def _write(out: MutableSequence[int], values: np.ndarray | Sequence[int]) -> None:
    """Copy values into the caller's buffer."""
    if len(out) != len(values):
        raise InvalidArgumentError(f"Output buffer length must be {len(values)}, but was {len(out)}")
    if isinstance(out, np.ndarray):
        out[:] = values
    else:
        out[:] = [int(i) for i in values]


class Cursor(ABC):
    """Capability interface of all subset cursors."""

    @abstractmethod
    def next(self, out: MutableSequence[int]) -> bool:
        """Write the next subset into out, or return False if exhausted."""

    @abstractmethod
    def size(self) -> int:
        """Return k, the length of every subset written by next()."""


class SequentialCursor(Cursor):
    """Enumerates start and every lexicographic successor of it."""

    def __init__(self, n: int, start: Sequence[int]):
        self._n = n
        self._current = np.array(start, dtype=np.int64)
        self._started = False
        self._exhausted = False

    def size(self) -> int:
        return self._current.shape[0]

    def next(self, out: MutableSequence[int]) -> bool:
        if self._exhausted:
            return False
        if self._started:
            if not jit_next_combination(self._current, self._n):
                self._exhausted = True
                return False
        else:
            self._started = True
        _write(out, self._current)
        return True


class BoundedCursor(Cursor):
    """Enumerates `count` subsets walking forward from start.

    The caller guarantees that the subset reached after count - 1
    successor steps is the end of the range.
    """

    def __init__(self, n: int, start: Sequence[int], count: int):
        self._n = n
        self._current = np.array(start, dtype=np.int64)
        self._remaining = count
        self._started = False

    def size(self) -> int:
        return self._current.shape[0]

    def next(self, out: MutableSequence[int]) -> bool:
        if self._remaining <= 0:
            return False
        if self._started:
            if not jit_next_combination(self._current, self._n):
                self._remaining = 0
                return False
        else:
            self._started = True
        self._remaining -= 1
        _write(out, self._current)
        return True


class RandomCursor(Cursor):
    """Infinite cursor of uniformly drawn k-subsets of range(n)."""

    def __init__(self, random: np.random.Generator | int | None, n: int, k: int):
        check_subset_size(n, k)
        if not isinstance(random, np.random.Generator):
            random = default_rng(random)
        self._random = random
        self._n = n
        self._k = k

    def size(self) -> int:
        return self._k

    def next(self, out: MutableSequence[int]) -> bool:
        _write(out, random_subset(self._n, self._k, self._random))
        return True


def random_cursor(random: np.random.Generator | int | None, n: int, k: int) -> RandomCursor:
    """Return an infinite cursor of random k-subsets of range(n)."""
    logger.debug(f"random cursor over C({n}, {k})")
    return RandomCursor(random, n, k)
