# algokit

A collection of classic algorithms and small data structures over integers and
strings. The package has no runtime dependencies.

Functions never modify their inputs; they return new lists or strings. Where a
search finds nothing, the function returns `None` rather than a sentinel
value, and malformed input raises `ValueError` (or `IndexError` for an empty
container).

## Modules

- `algokit.sorting`: `bubble_sort`, `counting_sort`, `insertion_sort`,
  `selection_sort`, `merge_sorted`, `sort_binary` (zeros before ones) and
  `move_zeroes` (zeros to the end, the rest in order).
- `algokit.searching`: `first_occurrence` and `last_occurrence` in a sorted
  sequence, `peak_index` of a mountain sequence, `pivot_index`,
  `equilibrium_index`, `search_adjacent_differ`, `search_rotated`,
  `integer_sqrt` and `has_pair_with_difference`.
- `algokit.arrays`: list puzzles such as `two_sum`, `rotate` (to the right),
  `reverse_after`, `majority_element`, `product_except_self`,
  `add_digit_arrays`, `repeated_and_missing`, `first_missing_positive`,
  `intersection`, `in_sequence`, `middle_of_three`, `can_be_non_decreasing`,
  `is_sorted_and_rotated` and `separate_negative_positive`.
- `algokit.tree`: the `Node` dataclass and `build_tree`, which builds a tree
  from a pre-order listing where `-1` marks an absent child. Queries:
  `level_order`, `preorder`, `postorder`, `height`, `count_leaves`,
  `is_balanced` and `is_identical`.
- `algokit.queues`: a fixed-capacity `CircularQueue` (default capacity 10;
  `enqueue` raises `OverflowError` when full) and an unbounded `LinkedQueue`,
  plus `first_non_repeating_stream`, `interleave_halves`, `reverse_queue` and
  `reverse_first_k`.
- `algokit.stacks`: a `Stack` class with `push`, `pop`, `peek` and
  `is_empty`, plus functions that take a stack as a list with the bottom
  element first: `insert_at_bottom`, `reverse_stack`, `sort_stack`,
  `remove_middle`. Also `next_smaller`, `largest_rectangle_area`,
  `is_valid_parenthesis`, `has_redundant_brackets`, `minimum_reversal_cost`
  and `reverse_with_stack`.
- `algokit.recursion`: `array_sum`, `binary_search`, `linear_search`,
  `fibonacci`, `permutations`, `power_set`, `letter_combinations` (phone
  keypad), `say_digits`, `is_sorted`, `is_palindrome`, `reverse_list` and
  `reverse_string`.
- `algokit.strings`: `compress` (run-length encoding), `roman_to_decimal`,
  `parse_int` (clamped to the 32-bit range), `reverse_words`,
  `longest_common_prefix`, `keypad_sequences`, `keypad_sequence`,
  `decode_encrypted`, `is_subsequence`, `is_valid_shuffle`,
  `count_balanced_splits`, `customer_walkaways`, `duplicate_counts`,
  `is_palindrome` and `first_unique_character`.

## Example

```python
from algokit.sorting import counting_sort
from algokit.searching import search_rotated
from algokit.tree import build_tree, level_order

counting_sort([3, -1, 2, -1])             # [-1, -1, 2, 3]
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)  # 4

root = build_tree([1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1])
level_order(root)                         # [[1], [3, 5], [7, 11, 17]]
```

## What it does not do

algokit is a library only. It has no command-line program and does not read
input from the terminal; trees, stacks and queues are built from Python values
passed to its functions and classes.

## Tests

The test suite lives in `tests/` and runs under pytest, which is declared in
the `test` extra.