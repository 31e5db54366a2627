from algokit.strings.bwt import (
    bwt_transform,
    inverse_bwt,
    move_to_front_decode,
    move_to_front_encode,
    run_length_decode,
    run_length_encode,
)
from algokit.strings.chunking import chunk_text
from algokit.strings.roman import from_roman, is_roman, to_roman
from algokit.strings.search import (
    is_valid_parentheses,
    kmp_search,
    longest_palindromic_substring,
    rabin_karp,
    z_function,
)
