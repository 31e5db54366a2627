"""
Tests for comparison sorts, distribution sorts and sorted-sequence search.

Every sort must return an ascending permutation of its input: same length,
same multiset, pairwise non-decreasing.
"""
from collections import Counter

import pytest

from algokit.sorting import distribution
from algokit.sorting import (
    ALL_SORTS,
    binary_search,
    bucket_sort,
    counting_sort,
    exponential_search,
    interpolation_search,
    jump_search,
    lower_bound,
    merge_sort,
    quick_sort,
    quickselect,
    radix_sort,
    upper_bound,
)
from algokit.utils import is_sorted, pairwise_non_decreasing


def _assert_ascending_permutation(original, result):
    assert len(result) == len(original)
    assert Counter(result) == Counter(original)
    assert pairwise_non_decreasing(result)


class TestComparisonSorts:
    """Every comparison sort on shared inputs"""

    @pytest.mark.parametrize("name", sorted(ALL_SORTS))
    @pytest.mark.parametrize("values", [
        [],
        [1],
        [2, 1],
        [5, 2, 9, 1, 5, 6],
        [3, 3, 3, 3],
        [-4, 10, 0, -4, 7, 2, 2, -1],
        list(range(30, 0, -1)),
    ])
    def test_sorts_fixed_inputs(self, name, values):
        """Fixed edge-case inputs come back sorted"""
        _assert_ascending_permutation(values, ALL_SORTS[name](values))

    @pytest.mark.parametrize("name", sorted(ALL_SORTS))
    def test_sorts_random_input(self, name, rng):
        """Random input with many duplicates"""
        values = rng.integers(-50, 50, size=200).tolist()
        assert ALL_SORTS[name](values) == sorted(values)

    @pytest.mark.parametrize("name", sorted(ALL_SORTS))
    def test_input_not_mutated(self, name):
        """The input sequence is left untouched"""
        values = [4, 1, 3, 2]
        ALL_SORTS[name](values)
        assert values == [4, 1, 3, 2]

    @pytest.mark.parametrize("name", sorted(ALL_SORTS))
    def test_key_function(self, name):
        """A key orders items by derived value"""
        words = ["pear", "fig", "banana", "kiwi"]
        result = ALL_SORTS[name](words, key=len)
        assert [len(w) for w in result] == [3, 4, 4, 6]

    def test_merge_sort_is_stable(self):
        """Equal keys keep their input order"""
        pairs = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]
        assert merge_sort(pairs, key=lambda p: p[0]) == [(0, "b"), (0, "d"), (1, "a"), (1, "c")]

    def test_quick_sort_large_sorted_input(self):
        """Median-of-three keeps sorted input fast and correct"""
        values = list(range(5000))
        assert quick_sort(values) == values


class TestDistributionSorts:
    """Counting, radix and bucket sort"""

    def test_counting_sort_with_negatives(self, rng):
        values = rng.integers(-20, 20, size=100).tolist()
        assert counting_sort(values) == sorted(values)

    def test_counting_sort_empty(self):
        assert counting_sort([]) == []

    def test_counting_sort_wide_span_uses_radix(self, monkeypatch):
        """A sparse range is sorted without allocating a histogram over it"""
        calls = []
        original = distribution.radix_sort

        def spy(values, base=10):
            calls.append(len(values))
            return original(values, base)

        monkeypatch.setattr(distribution, "radix_sort", spy)
        values = [10**12, 0, -(10**12), 5, 5]
        assert counting_sort(values) == sorted(values)
        assert calls == [5]

    def test_counting_sort_dense_span_uses_histogram(self, monkeypatch):
        calls = []
        monkeypatch.setattr(distribution, "radix_sort", lambda values, base=10: calls.append(values))
        values = [300, 1, 7, 7, 42]
        assert counting_sort(values) == sorted(values)
        assert calls == []

    @pytest.mark.parametrize("base", [2, 10, 16])
    def test_radix_sort_bases(self, base, rng):
        values = rng.integers(-1000, 1000, size=150).tolist()
        assert radix_sort(values, base=base) == sorted(values)

    def test_radix_sort_bad_base(self):
        with pytest.raises(ValueError):
            radix_sort([3, 1], base=1)

    def test_bucket_sort_floats(self, rng):
        values = rng.uniform(-5.0, 5.0, size=100).tolist()
        assert bucket_sort(values) == sorted(values)

    def test_bucket_sort_all_equal(self):
        assert bucket_sort([2.5, 2.5, 2.5]) == [2.5, 2.5, 2.5]


class TestSearch:
    """Binary search family on sorted sequences"""

    SEQ = [1, 3, 3, 3, 7, 9, 11, 15]

    def test_bounds(self):
        assert lower_bound(self.SEQ, 3) == 1
        assert upper_bound(self.SEQ, 3) == 4
        assert lower_bound(self.SEQ, 0) == 0
        assert upper_bound(self.SEQ, 99) == len(self.SEQ)

    @pytest.mark.parametrize("search", [binary_search, exponential_search, jump_search, interpolation_search])
    def test_finds_first_occurrence(self, search):
        assert search(self.SEQ, 3) == 1
        assert search(self.SEQ, 15) == 7
        assert search(self.SEQ, 1) == 0

    @pytest.mark.parametrize("search", [binary_search, exponential_search, jump_search, interpolation_search])
    @pytest.mark.parametrize("target", [0, 4, 16])
    def test_missing_returns_minus_one(self, search, target):
        assert search(self.SEQ, target) == -1

    @pytest.mark.parametrize("search", [binary_search, exponential_search, jump_search, interpolation_search])
    def test_empty(self, search):
        assert search([], 1) == -1

    def test_quickselect_matches_sorted(self, rng):
        values = rng.integers(0, 30, size=60).tolist()
        ordered = sorted(values)
        for k in (0, 10, 30, 59):
            assert quickselect(values, k, seed=7) == ordered[k]

    def test_quickselect_out_of_range(self):
        with pytest.raises(IndexError):
            quickselect([1, 2, 3], 3)

    def test_is_sorted_helper(self):
        assert is_sorted([])
        assert is_sorted([1, 1, 2])
        assert not is_sorted([2, 1])
        assert is_sorted(["ccc", "a", "bb"], key=len) is False
        assert is_sorted(["a", "bb", "ccc"], key=len)
