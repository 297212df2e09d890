#!/usr/bin/env python

"""The set of all k-subsets of range(n) as an addressable sequence.

A KSubset is built once per (n, k) and then used to rank and unrank
subsets through the combinatorial number system, to test membership
and ordering, and to spawn independent cursors, iterators and lazy
views that enumerate subsets one at a time in lexicographic order.

Examples
--------
>>> ksub = KSubset(5, 3)
>>> ksub.size()
10
>>> ksub.rank([2, 3, 4])
9
>>> ksub.unrank(5)
Subset(n=5, k=3, value=[0, 3, 4])
"""

from typing import Iterator, MutableSequence, Sequence
import numpy as np
from loguru import logger
from ksubset.src.binomial import binomial
from ksubset.src.cursors import Cursor, SequentialCursor, BoundedCursor, RandomCursor
from ksubset.src.sequence import SubsetIterator, SubsetSequence
from ksubset.src.subset import Subset, as_values, check_subset
from ksubset.src.utils import InvalidArgumentError, ArithmeticOverflowError


def _binomial_or_zero(n: int, k: int) -> int:
    """C(n, k) with C(n, k) = 0 outside 0 <= k <= n."""
    if n < 0 or k < 0 or n < k:
        return 0
    return binomial(n, k)


class KSubset:
    """All k-element subsets of an n-element set.

    Parameters
    ----------
    n: int
        The size of the superset range(n).
    k: int
        The size of the subsets, 0 <= k <= n.

    Raises
    ------
    InvalidArgumentError
        If n < 0, k < 0, n < k, or if C(n, k) does not fit into a 64-bit
        signed integer.
    """
    def __init__(self, n: int, k: int):
        if n < 0 or k < 0 or n < k:
            raise InvalidArgumentError(f"Invalid subset parameters: n={n}, k={k}")
        try:
            size = binomial(n, k)
        except ArithmeticOverflowError as exc:
            raise InvalidArgumentError(
                f"Number of subsets C({n}, {k}) is not representable") from exc

        self._n = n
        self._k = k
        self._size = size
        self._start = tuple(range(k))
        self._end = tuple(range(n - k, n))
        logger.debug(f"KSubset(n={n}, k={k}) with {size} subsets")

    @property
    def n(self) -> int:
        return self._n

    @property
    def k(self) -> int:
        return self._k

    @property
    def start_rank(self) -> int:
        return 0

    @property
    def end_rank(self) -> int:
        return self._size - 1

    def size(self) -> int:
        """Return the number of subsets, C(n, k)."""
        return self._size

    def start(self) -> Subset:
        """Return the lexicographically first subset, [0, ..., k-1]."""
        return Subset(self._n, self._k, self._start)

    def end(self) -> Subset:
        """Return the lexicographically last subset, [n-k, ..., n-1]."""
        return Subset(self._n, self._k, self._end)

    def __len__(self) -> int:
        return self._size

    def __repr__(self):
        return f"KSubset(n={self._n}, k={self._k})"

    def __eq__(self, other):
        if not isinstance(other, KSubset):
            return NotImplemented
        return (self._n, self._k) == (other._n, other._k)

    def __hash__(self):
        return hash((self._n, self._k))

    ##################################################################
    # membership and ordering
    ##################################################################

    def contains(self, subset: Sequence[int]) -> bool:
        """Return True if subset is an ascending k-subset of range(n)."""
        try:
            values = as_values(subset)
            check_subset(self._n, self._k, values)
        except InvalidArgumentError:
            return False
        return self._start <= values <= self._end

    def __contains__(self, subset) -> bool:
        return self.contains(subset)

    def _check_operand(self, values: tuple[int, ...]) -> None:
        if len(values) != self._k:
            raise InvalidArgumentError(
                f"Length must be {self._k}, but was {len(values)}: {list(values)}")
        for value in values:
            if not 0 <= value < self._n:
                raise InvalidArgumentError(
                    f"Element {value} out of range [0, {self._n}): {list(values)}")

    def compare(self, a: Sequence[int], b: Sequence[int]) -> int:
        """Return -1, 0 or 1 as a sorts before, equal to, or after b.

        Lexicographic over the elements; both operands must have length
        k and elements in range(n).
        """
        avals = as_values(a)
        bvals = as_values(b)
        self._check_operand(avals)
        self._check_operand(bvals)
        for x, y in zip(avals, bvals):
            if x != y:
                return -1 if x < y else 1
        return 0

    ##################################################################
    # combinatorial number system
    ##################################################################

    def rank(self, subset: Sequence[int]) -> int:
        """Return the lexicographic index of subset.

        The subset is not validated; a non-member gives a meaningless
        number. Call contains() first when that matters.
        """
        rank = 0
        j = 0
        for i, value in enumerate(as_values(subset)):
            # terms past n are all zero
            while j < min(value, self._n):
                rank += _binomial_or_zero(self._n - j - 1, self._k - i - 1)
                j += 1
            j = value + 1
        return rank

    def unrank(self, rank: int, out: MutableSequence[int] | None = None) -> Subset:
        """Return the subset at lexicographic index rank.

        Parameters
        ----------
        rank: int
            An index in [0, size).
        out: list or ndarray, optional
            A buffer of length k that is also filled with the elements.
        """
        if out is not None and len(out) != self._k:
            raise InvalidArgumentError(
                f"Output buffer length must be {self._k}, but was {len(out)}")
        if not 0 <= rank < self._size:
            raise InvalidArgumentError(f"Invalid rank: {rank} not in [0, {self._size})")

        values = []
        remaining = rank
        x = 0
        try:
            for i in range(self._k):
                while True:
                    coeff = binomial(self._n - x - 1, self._k - i - 1)
                    if coeff > remaining:
                        break
                    remaining -= coeff
                    x += 1
                values.append(x)
                x += 1
        except (InvalidArgumentError, ArithmeticOverflowError) as exc:
            raise InvalidArgumentError(f"Invalid rank: {rank}") from exc

        if out is not None:
            for i, value in enumerate(values):
                out[i] = value
        return Subset(self._n, self._k, values)

    ##################################################################
    # cursors and views
    ##################################################################

    def cursor(self, start: Sequence[int] | None = None, end: Sequence[int] | None = None) -> Cursor:
        """Return a new cursor enumerating subsets in lexicographic order.

        Without arguments every subset is enumerated. With start the
        enumeration begins at start and runs to the last subset. With
        start and end it stops after end (inclusive).
        """
        if start is None:
            start = self._start
        if not self.contains(start):
            raise InvalidArgumentError(f"Not a member of {self}: {start!r}")

        if end is None:
            logger.debug(f"sequential cursor over {self} from {list(start)}")
            return SequentialCursor(self._n, as_values(start))

        if not self.contains(end):
            raise InvalidArgumentError(f"Not a member of {self}: {end!r}")
        if self.compare(start, end) > 0:
            raise InvalidArgumentError(f"start {list(start)} sorts after end {list(end)}")
        count = self.rank(end) - self.rank(start) + 1
        logger.debug(f"bounded cursor over {self}: {count} subsets")
        return BoundedCursor(self._n, as_values(start), count)

    def random_cursor(self, random: np.random.Generator | int | None = None) -> RandomCursor:
        """Return an infinite cursor of uniformly drawn subsets."""
        return RandomCursor(random, self._n, self._k)

    def iterator(self) -> SubsetIterator:
        """Return a new iterator over all subsets."""
        return SubsetIterator(self.cursor(), self._n)

    def __iter__(self) -> Iterator[Subset]:
        return self.iterator()

    def sequence(self) -> SubsetSequence:
        """Return a new lazy single-pass view over all subsets."""
        return SubsetSequence(self.cursor(), self._n, self._size)

    def range(self, start: Sequence[int], end: Sequence[int]) -> SubsetSequence:
        """Return a new lazy view over the subsets from start to end inclusive."""
        cursor = self.cursor(start, end)
        return SubsetSequence(cursor, self._n, self.rank(end) - self.rank(start) + 1)


if __name__ == "__main__":

    KSUB = KSubset(5, 3)
    for SUB in KSUB:
        print(KSUB.rank(SUB), SUB)
