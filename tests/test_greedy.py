"""
Tests for greedy algorithms.
"""
import pytest

from algokit.greedy import (
    can_complete_circuit,
    can_jump,
    fractional_knapsack,
    max_non_overlapping,
    merge_intervals,
    min_jumps,
)


class TestCircuit:
    """Gas station problem"""

    def test_scenario(self):
        assert can_complete_circuit([1, 2, 3, 4, 5], [3, 4, 5, 1, 2]) == 3

    def test_impossible(self):
        assert can_complete_circuit([2, 3, 4], [3, 4, 3]) == -1

    def test_empty(self):
        assert can_complete_circuit([], []) == -1

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            can_complete_circuit([1, 2], [1])


class TestJumps:
    """Jump game variants"""

    @pytest.mark.parametrize("nums, expected", [
        ([2, 3, 1, 1, 4], True),
        ([3, 2, 1, 0, 4], False),
        ([0], True),
    ])
    def test_can_jump(self, nums, expected):
        assert can_jump(nums) is expected

    @pytest.mark.parametrize("nums, expected", [
        ([2, 3, 1, 1, 4], 2),
        ([2, 3, 0, 1, 4], 2),
        ([0], 0),
        ([1, 0, 1], -1),
        ([1, 1, 1, 1], 3),
    ])
    def test_min_jumps(self, nums, expected):
        assert min_jumps(nums) == expected


class TestIntervals:
    """Merging and scheduling"""

    def test_merge_intervals(self):
        assert merge_intervals([(1, 3), (2, 6), (8, 10), (15, 18)]) == [(1, 6), (8, 10), (15, 18)]
        assert merge_intervals([(1, 4), (4, 5)]) == [(1, 5)]
        assert merge_intervals([]) == []

    def test_max_non_overlapping(self):
        chosen = max_non_overlapping([(1, 2), (2, 3), (3, 4), (1, 3)])
        assert chosen == [(1, 2), (2, 3), (3, 4)]

    def test_fractional_knapsack(self):
        items = [(60, 10), (100, 20), (120, 30)]
        assert fractional_knapsack(items, 50) == pytest.approx(240.0)
        assert fractional_knapsack(items, 0) == 0.0
