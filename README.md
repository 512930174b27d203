# algodrills

A library of compact solutions to classic algorithm problems, grouped by
technique. Functions take plain Python values (lists, strings, integers)
and return plain Python values; a few small classes model stateful
problems such as a trie, a stock spanner or a request counter.

## Installation

```
pip install algodrills
```

To run the test suite, install the test extra:

```
pip install "algodrills[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algodrills.backtracking` | `letter_combinations`, `combination_sum3` |
| `algodrills.binary_search` | `guess`, `guess_number`, `search_rotate_array`, `successful_pairs`, `find_peak_element`, `min_eating_speed` |
| `algodrills.binary_tree` | `TreeNode`, `BSTIterator`, `max_depth`, `leaf_similar`, `search_bst`, `delete_node`, `good_nodes`, `path_sum`, `longest_zig_zag`, `lowest_common_ancestor`, `right_side_view`, `max_level_sum` |
| `algodrills.bit_ops` | `count_bits`, `single_number`, `min_flips`, `count_arrangement` |
| `algodrills.divide_conquer` | `find_kth_largest`, `quick_select` |
| `algodrills.dynamic_programming` | `tribonacci`, `min_cost_climbing_stairs`, `fib`, `climb_stairs`, `rob`, `num_tilings`, `unique_paths`, `longest_common_subsequence`, `max_profit`, `min_distance` |
| `algodrills.game_theory` | `divisor_game` |
| `algodrills.graphs` | `can_visit_all_rooms`, `find_circle_num`, `min_reorder`, `calc_equation`, `nearest_exit`, `oranges_rotting`, `sequence_reconstruction`, `crack_safe` |
| `algodrills.hashing` | `find_difference`, `unique_occurrences`, `close_strings`, `equal_pairs`, `max_points` |
| `algodrills.heaps` | `SmallestInfiniteSet`, `max_score`, `total_cost` |
| `algodrills.linked_list` | `ListNode`, `from_values`, `to_values`, `reverse_list`, `delete_middle`, `odd_even_list`, `pair_sum` |
| `algodrills.matrix` | `flood_fill` |
| `algodrills.monotone_stack` | `monotone_stack_ex`, `daily_temperatures`, `StockSpanner` |
| `algodrills.prefix_sum` | `prefix_sum_ex`, `largest_altitude`, `pivot_index` |
| `algodrills.recent_counter` | `RecentCounter` |
| `algodrills.sliding_window` | `sliding_window_ex`, `find_max_average`, `max_vowels`, `longest_ones`, `longest_subarray`, `contains_nearby_almost_duplicate` |
| `algodrills.spanning_tree` | `min_cost_connect_points` |
| `algodrills.string_ops` | `str_str`, `merge_alternately`, `gcd_of_strings`, `reverse_vowels`, `reverse_words`, `compress`, `count_prefix_suffix_pairs` |
| `algodrills.trie` | `Trie`, `suggested_products` |
| `algodrills.two_pointers` | `two_pointer_ex`, `move_zeroes`, `is_subsequence`, `max_area`, `max_operations` |

## Examples

```python
from algodrills.dynamic_programming import tribonacci, min_distance
from algodrills.graphs import crack_safe
from algodrills.linked_list import from_values, reverse_list, to_values
from algodrills.monotone_stack import StockSpanner
from algodrills.sliding_window import sliding_window_ex
from algodrills.trie import Trie

tribonacci(25)                             # 1389537
min_distance("intention", "execution")     # 5
crack_safe(2, 2)                           # "01100"
sliding_window_ex([2, 1, 5, 1, 3, 2], 3)   # 9

to_values(reverse_list(from_values([1, 2, 3, 4, 5])))  # [5, 4, 3, 2, 1]

spanner = StockSpanner()
[spanner.next(p) for p in [100, 80, 60, 70, 60, 75, 85]]  # [1, 1, 1, 2, 1, 4, 6]

trie = Trie()
trie.insert("apple")
trie.search("apple")       # True
trie.search("app")         # False
trie.starts_with("app")    # True
```

`move_zeroes`, `compress`, `flood_fill`, and the linked-list functions
`reverse_list`, `delete_middle` and `odd_even_list` modify what they are
given; `delete_node` and `lowest_common_ancestor`-style tree helpers work on
the nodes passed in. The other functions leave their arguments unchanged.

Invalid inputs raise `ValueError` where a function checks them, for example
`find_kth_largest` with `k` out of range, `sliding_window_ex` when the list is
shorter than `k`, or `longest_subarray` when a value is neither 0 nor 1.

## What is not included

- No sorting routines of its own; use Python's `sorted` and `list.sort`.
- No randomised algorithms (random sampling, random index picking).
- No sweep-line geometry such as rectangle-cover checks or skylines.
- No command-line interface: it is a library to import.