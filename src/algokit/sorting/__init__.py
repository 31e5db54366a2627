from algokit.sorting.comparison import (
    ALL_SORTS,
    bubble_sort,
    cocktail_sort,
    comb_sort,
    gnome_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)
from algokit.sorting.distribution import bucket_sort, counting_sort, radix_sort
from algokit.sorting.search import (
    binary_search,
    exponential_search,
    interpolation_search,
    jump_search,
    lower_bound,
    quickselect,
    upper_bound,
)
