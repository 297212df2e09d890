#!/usr/bin/env python

"""Iterator and lazy sequence adapters on top of a Cursor.

"""

from enum import Enum
from itertools import islice
from typing import Iterator
import numpy as np
from ksubset.src.cursors import Cursor
from ksubset.src.subset import Subset


class IteratorState(Enum):
    READY = "ready"
    EXHAUSTED = "exhausted"


class SubsetIterator(Iterator[Subset]):
    """Forward iterator of Subsets pulled from a single Cursor.

    One subset is always pulled ahead into a private buffer. The state
    is READY while that buffer holds an unreturned subset and becomes
    EXHAUSTED, for good, the first time the cursor reports exhaustion,
    so the cursor is never advanced past its end.
    """

    def __init__(self, cursor: Cursor, n: int):
        self._cursor = cursor
        self._n = n
        self._buffer = np.zeros(cursor.size(), dtype=np.int64)
        self._state = IteratorState.EXHAUSTED
        self._advance()

    def _advance(self) -> None:
        if self._cursor.next(self._buffer):
            self._state = IteratorState.READY
        else:
            self._state = IteratorState.EXHAUSTED

    @property
    def state(self) -> IteratorState:
        return self._state

    def has_next(self) -> bool:
        """Return True if __next__ will return a subset."""
        return self._state is IteratorState.READY

    def __next__(self) -> Subset:
        if self._state is IteratorState.EXHAUSTED:
            raise StopIteration
        subset = Subset(self._n, self._buffer.shape[0], self._buffer)
        self._advance()
        return subset

    def __iter__(self):
        return self


class SubsetSequence:
    """Lazy, finite, single-pass view of the subsets of one cursor.

    Nothing is pulled from the cursor until the view is iterated. Like
    a generator, the view is consumed by iterating it; iterating again
    continues where the last pass stopped.
    """

    def __init__(self, cursor: Cursor, n: int, size: int):
        self._cursor = cursor
        self._n = n
        self._size = size
        self._iterator: SubsetIterator | None = None

    @property
    def size(self) -> int:
        """Number of subsets yielded when drained from the beginning."""
        return self._size

    def __iter__(self) -> SubsetIterator:
        if self._iterator is None:
            self._iterator = SubsetIterator(self._cursor, self._n)
        return self._iterator

    def limit(self, count: int) -> Iterator[Subset]:
        """Return an iterator over at most the next count subsets."""
        return islice(self, count)

    def to_list(self) -> list[Subset]:
        """Drain the view into a list."""
        return list(self)

    def count(self) -> int:
        """Drain the view and return the number of subsets seen."""
        return sum(1 for _ in self)

    def __repr__(self):
        return f"SubsetSequence(n={self._n}, k={self._cursor.size()}, size={self._size})"
