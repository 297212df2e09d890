#!/usr/bin/env python

"""Binomial coefficients that never silently overflow 64-bit ints.

C(n, k) is accumulated as result * (n - k + j) / j for j = 1..k, which
is exact at every step. The magnitude of n selects one of three ways of
doing this so that results are exact up to the largest value that fits
in a 64-bit signed integer:

- n <= 61: no intermediate product can exceed INT64_MAX.
- 61 < n <= 66: each factor is first reduced by gcd(numerator,
  denominator), which keeps intermediates in range. Every C(66, k) fits.
- n > 66: the same reduction, but each product is checked and an
  ArithmeticOverflowError is raised when it would leave the int64 range.
"""

from loguru import logger
from ksubset.src.utils import INT64_MAX, InvalidArgumentError, ArithmeticOverflowError


# thresholds from the overflow analysis of the accumulation formula.
EXACT_LIMIT = 61
REDUCED_LIMIT = 66


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative ints.

    Binary (Stein's) algorithm: shifts by trailing zero bits instead of
    dividing.
    """
    if a < 0 or b < 0:
        raise InvalidArgumentError(f"gcd of negative values: ({a}, {b})")
    if a == 0:
        return b
    if b == 0:
        return a

    # common power of two
    shift = _trailing_zeros(a | b)
    a >>= _trailing_zeros(a)

    # a is odd from here on
    while b:
        b >>= _trailing_zeros(b)
        if a > b:
            a, b = b, a
        b -= a
    return a << shift


def _trailing_zeros(x: int) -> int:
    return (x & -x).bit_length() - 1


def multiply_checked(a: int, b: int) -> int:
    """Return a * b or raise if it does not fit in a 64-bit signed int."""
    product = a * b
    if product > INT64_MAX or product < -INT64_MAX - 1:
        raise ArithmeticOverflowError(f"Overflow: {a} * {b} > {INT64_MAX}")
    return product


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k).

    Parameters
    ----------
    n: int
        The size of the superset.
    k: int
        The size of the subsets.

    Raises
    ------
    InvalidArgumentError
        If n < 0, k < 0 or n < k.
    ArithmeticOverflowError
        If C(n, k) cannot be represented as a 64-bit signed integer.
    """
    if n < 0 or k < 0 or n < k:
        raise InvalidArgumentError(f"Invalid binomial arguments: n={n}, k={k}")
    if k == n or k == 0:
        return 1
    if k == 1 or k == n - 1:
        return n
    # symmetry, keeps the loop short
    if k > n // 2:
        return binomial(n, n - k)

    result = 1
    i = n - k + 1
    if n <= EXACT_LIMIT:
        for j in range(1, k + 1):
            result = result * i // j
            i += 1

    elif n <= REDUCED_LIMIT:
        for j in range(1, k + 1):
            d = gcd(i, j)
            result = (result // (j // d)) * (i // d)
            i += 1

    else:
        for j in range(1, k + 1):
            d = gcd(i, j)
            try:
                result = multiply_checked(result // (j // d), i // d)
            except ArithmeticOverflowError:
                logger.debug(f"C({n}, {k}) overflows at step {j}")
                raise
            i += 1
    return result


if __name__ == "__main__":

    print(binomial(20, 8))
    print(binomial(66, 33))
