#!/usr/bin/env python

"""Uniform random k-subsets of range(n).

Implementation of the RANKSB algorithm of Albert Nijenhuis and Herbert
Wilf, Combinatorial Algorithms for Computers and Calculators, 2nd ed.,
Academic Press, 1978, p. 42. The k draws are first distributed over k
bins of width n/k by accept/reject, then the bins are compacted and the
elements of each bin are drawn and insertion-sorted in place. The
result is ascending without a final sort.
"""

from typing import Sequence
import numpy as np
from numpy.random import default_rng
from ksubset.src.utils import InvalidArgumentError


def check_subset_size(n: int, k: int) -> None:
    """Raise InvalidArgumentError unless 0 <= k <= n."""
    if k < 0:
        raise InvalidArgumentError(f"Subset size smaller than zero: {k}")
    if n < k:
        raise InvalidArgumentError(f"n smaller than k: {n} < {k}.")


def _next_x(rng: np.random.Generator, m: int) -> int:
    """Uniform int in [0, m]."""
    return int(rng.integers(0, m + 1))


def random_subset(n: int, k: int, rng: np.random.Generator | int | None = None) -> tuple[int, ...]:
    """Return a uniformly drawn ascending k-subset of range(n).

    Parameters
    ----------
    n: int
        The size of the superset.
    k: int
        The size of the subset.
    rng: Generator, int or None
        A numpy Generator, or a seed used to create one.
    """
    check_subset_size(n, k)
    if not isinstance(rng, np.random.Generator):
        rng = default_rng(rng)

    # early returns
    if k == n:
        return tuple(range(n))
    if k == 0:
        return ()

    # (A) init a[i] to the "zero" point of bin Ri.
    a = [(i * n) // k for i in range(k)]

    # (B) draw x, find its bin l, accept if the bin still has room.
    for _ in range(k):
        while True:
            x = 1 + _next_x(rng, n - 1)
            lidx = (x * k - 1) // n
            if a[lidx] < x:
                break
        a[lidx] += 1
    s = k

    # (C) move counts of the nonempty bins to the left.
    p = 0
    for i in range(k):
        if a[i] == (i * n) // k:
            a[i] = 0
        else:
            p += 1
            m = a[i]
            a[i] = 0
            a[p - 1] = m

    # (D) find the bin of each count and set up space for it from the right.
    while p > 0:
        lidx = 1 + (a[p - 1] * k - 1) // n
        ds = a[p - 1] - ((lidx - 1) * n) // k
        a[p - 1] = 0
        a[s - 1] = lidx
        s -= ds
        p -= 1

    # (E) a nonzero a[l] starts a new bin.
    r = m0 = m = 0
    for ll in range(1, k + 1):
        lidx = k + 1 - ll
        if a[lidx - 1] != 0:
            r = lidx
            m0 = 1 + ((a[lidx - 1] - 1) * n) // k
            m = (a[lidx - 1] * n) // k - m0 + 1

        # (F) draw x within the bin.
        x = m0 + _next_x(rng, m - 1)
        i = lidx + 1

        # (G) bump x past smaller elements already placed in the bin.
        while i <= r and x >= a[i - 1]:
            x += 1
            a[i - 2] = a[i - 1]
            i += 1

        a[i - 2] = x
        m -= 1

    # one-based to zero-based
    return tuple(i - 1 for i in a)


def random_subset_from(values: Sequence, k: int, rng: np.random.Generator | int | None = None) -> list:
    """Return k items drawn without replacement from values, in input order."""
    return [values[i] for i in random_subset(len(values), k, rng)]


if __name__ == "__main__":

    RNG = default_rng(123)
    for _ in range(5):
        print(random_subset(20, 4, RNG))
