"""
Tests for dynamic programming routines: sequences, coin change and
knapsack, and pattern matching.
"""
import pytest

from algokit.dynamic import (
    climb_stairs,
    coin_change_ways,
    edit_distance,
    knapsack_01,
    length_of_lis,
    longest_common_subsequence,
    longest_increasing_subsequence,
    longest_palindromic_subsequence,
    max_subarray,
    min_coins,
    regex_match,
    wildcard_match,
    word_break,
    word_break_all,
)


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


class TestSequences:
    """LIS, LCS, edit distance, Kadane and palindromic subsequence"""

    def test_length_of_lis_scenario(self):
        """Classic example has LIS length 4 (e.g. 2, 3, 7, 101)"""
        assert length_of_lis([10, 9, 2, 5, 3, 7, 101, 18]) == 4

    @pytest.mark.parametrize("nums, expected", [
        ([], 0),
        ([7], 1),
        ([7, 7, 7], 1),
        ([1, 2, 3, 4], 4),
        ([4, 3, 2, 1], 1),
        ([0, 1, 0, 3, 2, 3], 4),
    ])
    def test_length_of_lis_table(self, nums, expected):
        assert length_of_lis(nums) == expected

    def test_lis_witness_is_strictly_increasing(self):
        nums = [10, 9, 2, 5, 3, 7, 101, 18]
        lis = longest_increasing_subsequence(nums)
        assert len(lis) == 4
        assert all(a < b for a, b in zip(lis, lis[1:]))
        assert _is_subsequence(lis, nums)

    def test_lis_empty(self):
        assert longest_increasing_subsequence([]) == []

    def test_lcs_strings(self):
        lcs = longest_common_subsequence("ABCBDAB", "BDCABA")
        assert isinstance(lcs, str)
        assert len(lcs) == 4
        assert _is_subsequence(lcs, "ABCBDAB")
        assert _is_subsequence(lcs, "BDCABA")

    def test_lcs_lists(self):
        assert longest_common_subsequence([1, 2, 3, 4], [2, 4, 5]) == [2, 4]
        assert longest_common_subsequence([], [1, 2]) == []

    @pytest.mark.parametrize("a, b, expected", [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("", "abc", 3),
        ("abc", "", 3),
        ("same", "same", 0),
        (["a", "b"], ["b"], 1),
    ])
    def test_edit_distance(self, a, b, expected):
        assert edit_distance(a, b) == expected

    def test_max_subarray(self):
        assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == (6, 3, 6)
        assert max_subarray([-3, -1, -2]) == (-1, 1, 1)

    def test_max_subarray_empty(self):
        with pytest.raises(ValueError):
            max_subarray([])

    @pytest.mark.parametrize("s, expected", [("bbbab", 4), ("cbbd", 2), ("", 0), ("a", 1)])
    def test_longest_palindromic_subsequence(self, s, expected):
        assert longest_palindromic_subsequence(s) == expected


class TestKnapsack:
    """Coin change, 0/1 knapsack and stair climbing"""

    def test_min_coins_scenario(self):
        """11 = 5 + 5 + 1"""
        assert min_coins([1, 2, 5], 11) == 3

    @pytest.mark.parametrize("coins, amount, expected", [
        ([2], 3, -1),
        ([1], 0, 0),
        ([3, 7], 0, 0),
        ([186, 419, 83, 408], 6249, 20),
        ([], 5, -1),
    ])
    def test_min_coins_table(self, coins, amount, expected):
        assert min_coins(coins, amount) == expected

    def test_coin_change_ways(self):
        assert coin_change_ways([1, 2, 5], 5) == 4
        assert coin_change_ways([2], 3) == 0
        assert coin_change_ways([10], 0) == 1

    def test_knapsack_01(self):
        value, chosen = knapsack_01([1, 3, 4, 5], [1, 4, 5, 7], 7)
        assert value == 9
        assert isinstance(value, int)
        assert chosen == [1, 2]

    def test_knapsack_float_values(self):
        value, chosen = knapsack_01([2, 2], [1.5, 2.5], 2)
        assert value == pytest.approx(2.5)
        assert chosen == [1]

    def test_knapsack_length_mismatch(self):
        with pytest.raises(ValueError):
            knapsack_01([1, 2], [1], 3)

    def test_climb_stairs(self):
        assert climb_stairs(5) == 8
        assert climb_stairs(0) == 1
        assert climb_stairs(4, steps=(1, 3)) == 3


class TestMatching:
    """Regex, wildcard and word-break DP"""

    @pytest.mark.parametrize("text, pattern, expected", [
        ("aa", "a", False),
        ("aa", "a*", True),
        ("ab", ".*", True),
        ("aab", "c*a*b", True),
        ("mississippi", "mis*is*p*.", False),
        ("", "a*b*", True),
    ])
    def test_regex_match(self, text, pattern, expected):
        assert regex_match(text, pattern) is expected

    @pytest.mark.parametrize("text, pattern, expected", [
        ("aa", "*", True),
        ("cb", "?a", False),
        ("adceb", "*a*b", True),
        ("acdcb", "a*c?b", False),
        ("", "", True),
    ])
    def test_wildcard_match(self, text, pattern, expected):
        assert wildcard_match(text, pattern) is expected

    def test_word_break(self):
        assert word_break("leetcode", ["leet", "code"])
        assert not word_break("catsandog", ["cats", "dog", "sand", "and", "cat"])

    def test_word_break_all(self):
        sentences = word_break_all("catsanddog", ["cat", "cats", "and", "sand", "dog"])
        assert sentences == ["cat sand dog", "cats and dog"]
        assert word_break_all("xyz", ["a"]) == []
        assert word_break_all("", ["a"]) == [""]
