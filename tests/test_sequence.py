"""Tests for SubsetIterator and SubsetSequence."""

from itertools import combinations

import pytest

from ksubset import KSubset, Subset
from ksubset.src.cursors import Cursor
from ksubset.src.sequence import IteratorState, SubsetIterator, SubsetSequence
from ksubset.src.utils import InvalidArgumentError


class CountingCursor(Cursor):
    """Cursor yielding [0] .. [count-1] of range(count), counting next() calls."""

    def __init__(self, count: int):
        self.count = count
        self.calls = 0

    def size(self) -> int:
        return 1

    def next(self, out) -> bool:
        self.calls += 1
        if self.calls > self.count:
            return False
        out[0] = self.calls - 1
        return True


class TestSubsetIterator:

    def test_yields_all_subsets(self):
        ksub = KSubset(6, 3)
        subs = list(ksub.iterator())
        assert [s.value for s in subs] == list(combinations(range(6), 3))
        assert all(isinstance(s, Subset) for s in subs)

    def test_has_next_latch(self):
        it = KSubset(3, 2).iterator()
        seen = []
        while it.has_next():
            assert it.has_next()
            seen.append(next(it))
        assert len(seen) == 3
        assert not it.has_next()
        assert it.state is IteratorState.EXHAUSTED

    def test_never_advances_past_the_end(self):
        cursor = CountingCursor(2)
        it = SubsetIterator(cursor, 2)
        assert list(it) == [[0], [1]]
        calls = cursor.calls
        for _ in range(5):
            assert not it.has_next()
            with pytest.raises(StopIteration):
                next(it)
        assert cursor.calls == calls

    def test_states(self):
        it = SubsetIterator(CountingCursor(1), 1)
        assert it.state is IteratorState.READY
        next(it)
        assert it.state is IteratorState.EXHAUSTED

    def test_empty_cursor(self):
        it = SubsetIterator(CountingCursor(0), 1)
        assert not it.has_next()
        assert list(it) == []

    def test_empty_universe(self):
        assert [s.value for s in KSubset(0, 0).iterator()] == [()]

    def test_yielded_subsets_are_independent(self):
        subs = list(KSubset(4, 2))
        assert len(set(subs)) == 6

    def test_independent_iterators(self):
        ksub = KSubset(5, 2)
        a = iter(ksub)
        b = iter(ksub)
        next(a)
        next(a)
        assert next(b) == [0, 1]
        assert next(a) == [0, 3]


class TestSubsetSequence:

    def test_complete_without_duplicates(self):
        ksub = KSubset(8, 3)
        subs = ksub.sequence().to_list()
        assert len(subs) == ksub.size()
        assert len(set(subs)) == ksub.size()

    def test_lazy(self):
        cursor = CountingCursor(10)
        seq = SubsetSequence(cursor, 10, 10)
        assert cursor.calls == 0
        assert [s.value for s in seq.limit(3)] == [(0,), (1,), (2,)]
        assert cursor.calls <= 4

    def test_single_pass(self):
        seq = KSubset(4, 2).sequence()
        assert seq.count() == 6
        assert seq.to_list() == []

    def test_continues_after_partial_pass(self):
        seq = KSubset(4, 2).sequence()
        first = list(seq.limit(2))
        rest = list(seq)
        assert first + rest == list(KSubset(4, 2))

    def test_size(self):
        assert KSubset(7, 3).sequence().size == 35

    def test_fresh_sequences_are_independent(self):
        ksub = KSubset(5, 3)
        a = ksub.sequence()
        b = ksub.sequence()
        assert a.count() == 10
        assert b.count() == 10

    def test_repr(self):
        assert repr(KSubset(5, 3).sequence()) == "SubsetSequence(n=5, k=3, size=10)"


class TestRange:

    def test_range_matches_bounded_cursor(self):
        ksub = KSubset(5, 3)
        seq = ksub.range([0, 3, 4], [1, 3, 4])
        assert seq.size == 4
        assert [s.value for s in seq] == [(0, 3, 4), (1, 2, 3), (1, 2, 4), (1, 3, 4)]

    def test_single_element_range(self):
        ksub = KSubset(5, 3)
        assert ksub.range([1, 2, 3], [1, 2, 3]).to_list() == [[1, 2, 3]]

    def test_full_range(self):
        ksub = KSubset(6, 2)
        assert ksub.range(ksub.start(), ksub.end()).to_list() == list(ksub)

    def test_invalid_range(self):
        ksub = KSubset(5, 3)
        with pytest.raises(InvalidArgumentError):
            ksub.range([1, 2, 3], [0, 1, 2])
