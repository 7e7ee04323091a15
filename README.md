# algosuite

A plain-Python library of well-known algorithms and small data structures,
grouped by the kind of data they work on. It has no runtime dependencies and
needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algosuite.arrays` | `two_sum`, `max_area`, `three_sum`, `remove_duplicates`, `next_permutation`, `max_subarray`, `merge_intervals`, `sort_colors`, `merge_sorted`, `max_profit`, `can_complete_circuit`, `single_number`, `max_product`, `min_subarray_len`, `find_duplicate`, `third_max`, `can_place_flowers`, `num_rescue_boats`, `validate_stack_sequences`, `last_stone_weight`, `distance_between_bus_stops`, `largest_altitude`, `successful_pairs`, `zero_filled_subarray`, `minimize_array_value` |
| `algosuite.integers` | `reverse_integer`, `roman_to_int`, `divide`, `is_power_of_two`, `add_digits`, `bulb_switch`, `kth_grammar` |
| `algosuite.strings` | `is_valid_parentheses`, `simplify_path`, `is_scramble`, `longest_palindrome_subseq`, `min_insertions`, `max_vowels`, `merge_alternately`, `remove_stars`, `partition_string` |
| `algosuite.combinatorics` | `generate_parentheses`, `permutations`, `subsets` |
| `algosuite.dynamic` | `min_path_sum`, `climb_stairs`, `rob`, `maximal_square`, `profitable_schemes`, `mincost_tickets`, `max_satisfaction`, `number_of_arrays`, `pizza_cut_ways`, `num_ways_to_form`, `max_value_of_coins` |
| `algosuite.grids` | `set_zeroes`, `num_enclaves`, `closed_island` |
| `algosuite.graphs` | `GraphNode`, `clone_graph`, `num_similar_groups`, `make_connected`, `min_reorder`, `largest_path_value`, `count_unreachable_pairs`, `longest_cycle`, `min_score` |
| `algosuite.trees` | `TreeNode`, `width_of_binary_tree`, `longest_zigzag` |
| `algosuite.structures` | `WordDictionary`, `BrowserHistory`, `SmallestInfiniteSet` |

## Examples

```python
from algosuite.arrays import two_sum, merge_intervals
from algosuite.integers import roman_to_int
from algosuite.strings import simplify_path
from algosuite.structures import WordDictionary, BrowserHistory, SmallestInfiniteSet

two_sum([2, 7, 11, 15], 9)                 # (0, 1)
two_sum([1, 2], 10)                        # None
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [[1, 6], [8, 10]]
roman_to_int("MCMXCIV")                     # 1994
simplify_path("/a/./b/../../c/")            # "/c"

words = WordDictionary()
words.add_word("bad")
words.search(".ad")                         # True

history = BrowserHistory("home.example.com")
history.visit("a.example.com")
history.back(1)                             # "home.example.com"

numbers = SmallestInfiniteSet()
numbers.pop_smallest()                      # 1
numbers.add_back(1)
numbers.pop_smallest()                      # 1
```

## Behaviour notes

- `two_sum` returns a tuple of indices, or `None` when no pair exists;
  `find_duplicate` returns `None` when no value repeats.
- `next_permutation`, `sort_colors`, `merge_sorted`, `remove_duplicates`
  and `set_zeroes` change the list they are given. The other functions leave
  their input as it was.
- Invalid input raises an exception rather than returning a sentinel: for
  example `max_subarray([])` and `roman_to_int("ABC")` raise `ValueError`,
  and `divide(1, 0)` raises `ZeroDivisionError`.
- The counting functions in `algosuite.dynamic` (`profitable_schemes`,
  `number_of_arrays`, `pizza_cut_ways`, `num_ways_to_form`) return their
  results modulo `algosuite.dynamic.MOD` (10^9 + 7).
- `reverse_integer` and `divide` keep to the 32-bit signed range
  (`algosuite.integers.INT_MIN` to `INT_MAX`): `reverse_integer` returns 0
  on overflow and `divide` clamps to `INT_MAX`.

## What it does not do

This is a library only: it has no command-line program and keeps no state
beyond the objects you create.