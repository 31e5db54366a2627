from algokit.dynamic.knapsack import climb_stairs, coin_change_ways, knapsack_01, min_coins
from algokit.dynamic.matching import regex_match, wildcard_match, word_break, word_break_all
from algokit.dynamic.sequences import (
    edit_distance,
    length_of_lis,
    longest_common_subsequence,
    longest_increasing_subsequence,
    longest_palindromic_subsequence,
    max_subarray,
)
