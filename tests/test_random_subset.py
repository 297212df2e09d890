"""Tests for the RANKSB random subset primitive."""

from itertools import combinations

import numpy as np
import pytest

from ksubset.src.random_subset import random_subset, random_subset_from, check_subset_size
from ksubset.src.utils import InvalidArgumentError


class TestRandomSubset:

    def test_valid_subsets(self):
        rng = np.random.default_rng(0)
        for n in range(1, 30):
            for k in range(0, n + 1):
                sub = random_subset(n, k, rng)
                assert len(sub) == k
                assert all(0 <= i < n for i in sub)
                assert list(sub) == sorted(set(sub))

    def test_all_subsets_reachable(self):
        rng = np.random.default_rng(1)
        seen = {random_subset(6, 3, rng) for _ in range(2000)}
        assert seen == set(combinations(range(6), 3))

    def test_roughly_uniform(self):
        rng = np.random.default_rng(2)
        counts = {sub: 0 for sub in combinations(range(6), 2)}
        for _ in range(15000):
            counts[random_subset(6, 2, rng)] += 1
        assert all(800 < c < 1200 for c in counts.values())

    def test_element_frequencies(self):
        """Each element appears in about k/n of the draws."""
        rng = np.random.default_rng(3)
        freq = np.zeros(50)
        for _ in range(4000):
            freq[list(random_subset(50, 10, rng))] += 1
        assert np.all(np.abs(freq / 4000 - 0.2) < 0.04)

    def test_seed_reproducible(self):
        assert random_subset(100, 7, 99) == random_subset(100, 7, 99)

    def test_edge_cases(self):
        assert random_subset(5, 5) == (0, 1, 2, 3, 4)
        assert random_subset(5, 0) == ()
        assert random_subset(0, 0) == ()
        assert random_subset(1, 1) == (0,)

    def test_invalid(self):
        with pytest.raises(InvalidArgumentError):
            random_subset(3, 4)
        with pytest.raises(InvalidArgumentError):
            random_subset(3, -1)
        with pytest.raises(InvalidArgumentError):
            check_subset_size(-1, 0)


class TestRandomSubsetFrom:

    def test_items_from_values(self):
        values = ["a", "b", "c", "d", "e"]
        sub = random_subset_from(values, 3, 5)
        assert len(sub) == 3
        assert len(set(sub)) == 3
        assert sub == sorted(sub, key=values.index)
