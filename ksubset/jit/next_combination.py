#!/usr/bin/env python

"""Jitted successor step for lexicographic k-subset enumeration.

"""

import numpy as np
from numba import njit


@njit
def jit_next_combination(arr: np.ndarray, n: int) -> bool:
    """Advance an ascending int64 k-subset of range(n) to its successor.

    Scans from the right over positions already holding their maximum
    value (arr[i] == n - k + i), increments the first one that does not
    and resets everything to its right to consecutive values above it.
    Returns False, leaving arr unchanged, if arr is the last subset.
    """
    k = arr.shape[0]
    i = k - 1
    while i >= 0 and arr[i] == n - k + i:
        i -= 1
    if i < 0:
        return False

    arr[i] += 1
    for j in range(i + 1, k):
        arr[j] = arr[j - 1] + 1
    return True
