# algodrills

Small, dependency-free implementations of classic algorithm exercises,
grouped by the kind of data they work on. Everything is plain Python
functions over built-in types, plus two small list classes.

## Install

    pip install .

## Modules

### `algodrills.linked`

Singly linked lists of integers built from `ListNode` (fields `val` and
`next`, compared by identity, iterable over the values from that node on).
`from_values` builds a list from an iterable (empty gives `None`) and
`to_values` turns one back into a Python list.

Operations: `reverse_list`, `reverse_between`, `reverse_k_group`,
`swap_pairs`, `merge_two_lists`, `partition`, `odd_even_list`,
`reorder_list`, `remove_nth_from_end`, `remove_elements`,
`delete_duplicates`, `delete_all_duplicates`, `has_cycle`,
`get_intersection_node` and `is_palindrome_list` (which compares the
decimal text of the joined values with its reverse).

These functions relink the nodes they are given and return the new head;
`reorder_list` works in place and returns `None`. `remove_nth_from_end`,
`reverse_k_group` and `reverse_between` raise `ValueError` for positions
or group sizes that do not fit the list.

### `algodrills.dlist`

`LinkedList`, a list addressed by position, with `len()`, `get`,
`add_at_head`, `add_at_tail`, `add_at_index` and `delete_at_index`.
`get` raises `IndexError` for an index out of range; inserting or deleting
at an out-of-range index leaves the list unchanged.

### `algodrills.matrix`

`rotate` (90 degrees clockwise, in place), `spiral_order` and
`flip_and_invert_image` (mirrors and inverts each row in place and returns
the image).

### `algodrills.integers`

Bit tricks and integer puzzles: `bitwise_complement`, `find_complement`,
`prefixes_div_by_5`, `add_negabinary`, `single_number`,
`single_number_thrice`, `number_of_steps`, `sort_by_bits`,
`xor_operation`, `decode`, `reverse_bits`, `hamming_weight`,
`subset_xor_sum`, `range_bitwise_and`, `is_happy`, `is_power_of_two`,
`is_power_of_four`, `min_bit_flips`, `hamming_distance`, `similar_pairs`,
`even_odd_bit`, `missing_number`, `sum_indices_with_k_set_bits`,
`find_k_or`, `maximum_strong_pair_xor`, `has_trailing_zeros`,
`count_bits`, `duplicate_numbers_xor`, `get_sum`, `to_hex`,
`find_error_nums`, `has_alternating_bits`, `count_prime_set_bits` and
`binary_gap`.

`reverse_bits`, `to_hex`, `get_sum` and `find_k_or` work on 32-bit values;
`get_sum` wraps on overflow like a signed 32-bit addition.

### `algodrills.combinations`

`combination_sum` (candidates may be reused; they must be positive) and
`permute`.

### `algodrills.arrays`

`two_sum`, `three_sum`, `four_sum`, `two_out_of_three`, `max_area`,
`divide_array`, `product_except_self`, `max_sliding_window`,
`remove_duplicates`, `remove_element`, `move_zeroes`, `min_operations`,
`search_insert`, `intersect`, `find_median_sorted_arrays`,
`max_sub_array`, `check_subarray_sum`, `plus_one`, `merge` and
`min_sub_array_len`.

`remove_duplicates`, `remove_element`, `move_zeroes` and `merge` change
the list they are given. Invalid arguments, such as an empty input to
`max_sub_array` or `find_median_sorted_arrays`, or `k == 0` for
`check_subarray_sum`, raise `ValueError`.

### `algodrills.text`

`is_palindrome`, `valid_palindrome`, `roman_to_int`,
`longest_common_prefix`, `repeated_character`, `str_str`,
`length_of_longest_substring`, `reverse_string` (in place on a list of
characters), `find_the_difference`, `reverse_str`, `reverse_words`,
`add_binary` and `count_consistent_strings`. Malformed input, such as a
non-Roman digit or a non-binary digit, raises `ValueError`.

## Example

```python
from algodrills.linked import from_values, reverse_k_group, to_values
from algodrills.integers import to_hex
from algodrills.text import roman_to_int

head = from_values([1, 2, 3, 4, 5])
print(to_values(reverse_k_group(head, 2)))  # [2, 1, 4, 3, 5]

print(to_hex(-1))               # 'ffffffff'
print(roman_to_int("MCMXCIV"))  # 1994
```

## What it does not do

This is a library only: it has no command-line tool, reads no input files
and keeps no state beyond the objects you pass to it.

## Running the tests

    pip install ".[test]"
    pytest