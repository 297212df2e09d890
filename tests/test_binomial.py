"""Tests for ksubset.src.binomial."""

from math import gcd as math_gcd

import pytest
from scipy.special import comb

from ksubset.src.binomial import binomial, gcd, multiply_checked, EXACT_LIMIT, REDUCED_LIMIT
from ksubset.src.utils import INT64_MAX, InvalidArgumentError, ArithmeticOverflowError


class TestBinomial:
    """Tests for the tiered binomial coefficient."""

    def test_known_values(self):
        assert binomial(20, 8) == 125970
        assert binomial(5, 3) == 10
        assert binomial(0, 0) == 1
        assert binomial(52, 5) == 2598960

    def test_shortcuts(self):
        """k == 0, k == n, k == 1 and k == n - 1 need no loop."""
        for n in range(1, 200):
            assert binomial(n, 0) == 1
            assert binomial(n, n) == 1
            assert binomial(n, 1) == n
            assert binomial(n, n - 1) == n

    def test_symmetry(self):
        for n in range(0, 70):
            for k in range(0, n + 1):
                if comb(n, k, exact=True) <= INT64_MAX:
                    assert binomial(n, k) == binomial(n, n - k)

    def test_matches_exact_in_all_regimes(self):
        """Every representable C(n, k) up to n=100 is exact."""
        for n in range(0, 101):
            for k in range(0, n + 1):
                expected = comb(n, k, exact=True)
                if expected <= INT64_MAX:
                    assert binomial(n, k) == expected, (n, k)

    def test_regime_thresholds(self):
        assert EXACT_LIMIT == 61
        assert REDUCED_LIMIT == 66

    def test_largest_reduced_regime_value(self):
        """Every C(66, k) fits, including the central one."""
        assert binomial(66, 33) == 7219428434016265740
        assert binomial(62, 31) == comb(62, 31, exact=True)

    def test_overflow_is_raised_not_wrapped(self):
        with pytest.raises(ArithmeticOverflowError):
            binomial(67, 33)
        with pytest.raises(ArithmeticOverflowError):
            binomial(1000, 500)

    def test_overflow_is_an_overflow_error(self):
        with pytest.raises(OverflowError):
            binomial(100, 50)

    def test_all_unrepresentable_values_raise(self):
        for n in range(REDUCED_LIMIT + 1, 80):
            for k in range(0, n + 1):
                if comb(n, k, exact=True) > INT64_MAX:
                    with pytest.raises(ArithmeticOverflowError):
                        binomial(n, k)

    def test_large_n_small_k(self):
        assert binomial(10 ** 6, 2) == 10 ** 6 * (10 ** 6 - 1) // 2
        assert binomial(3037000500, 2) == comb(3037000500, 2, exact=True)

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgumentError):
            binomial(-1, 0)
        with pytest.raises(InvalidArgumentError):
            binomial(3, 4)
        with pytest.raises(InvalidArgumentError):
            binomial(3, -1)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            binomial(2, 5)


class TestGcd:
    """Tests for the binary gcd."""

    def test_matches_math_gcd(self):
        for a in range(0, 60):
            for b in range(0, 60):
                assert gcd(a, b) == math_gcd(a, b), (a, b)

    def test_zero_arguments(self):
        assert gcd(0, 0) == 0
        assert gcd(0, 12) == 12
        assert gcd(12, 0) == 12

    def test_powers_of_two(self):
        assert gcd(2 ** 40, 2 ** 20 * 3) == 2 ** 20
        assert gcd(96, 64) == 32

    def test_large_values(self):
        assert gcd(2 ** 61 - 1, 2 ** 31 - 1) == 1
        assert gcd(123456789 * 97, 987654321 * 97) == math_gcd(123456789, 987654321) * 97

    def test_negative_raises(self):
        with pytest.raises(InvalidArgumentError):
            gcd(-4, 2)


class TestMultiplyChecked:

    def test_in_range(self):
        assert multiply_checked(2 ** 31, 2 ** 31) == 2 ** 62

    def test_out_of_range(self):
        with pytest.raises(ArithmeticOverflowError):
            multiply_checked(2 ** 32, 2 ** 31)
