# algosuite

A collection of classic algorithm solutions. They are plain Python functions
over Python's built-in types, with small node classes for linked lists and
binary trees.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algosuite.linked_list`: the node classes `ListNode` and `RandomNode`
  (a node with an extra `random` pointer), the helpers `build_list` and
  `list_values`, and `add_two_numbers`, `remove_nth_from_end`,
  `merge_two_lists`, `swap_pairs`, `copy_random_list`, `has_cycle`,
  `has_cycle_hashed`, `detect_cycle`, `detect_cycle_hashed`, `sort_list`,
  `get_intersection_node`, `get_intersection_node_naive`, `reverse_list`,
  `is_palindrome` and `is_palindrome_stack`.
- `algosuite.tree`: the node class `TreeNode`, the builder
  `from_level_order` (where `None` marks a missing child), the traversals
  `inorder_traversal`, `inorder_traversal_recursive`, `preorder_traversal`,
  `preorder_traversal_recursive`, `level_order` and `right_side_view`, and
  `is_valid_bst`, `is_symmetric`, `max_depth`, `build_tree`,
  `sorted_array_to_bst`, `flatten`, `invert_tree`, `kth_smallest` and
  `diameter_of_binary_tree`.
- `algosuite.arrays`: `three_sum`, `three_sum_with_set`, `max_sub_array`,
  `max_sub_array_quadratic`, `merge_intervals`, `sort_colors`,
  `single_number`, `majority_element`, `rotate`, `rotate_in_place`,
  `search_insert`, `two_sum`, `group_anagrams`, `find_kth_largest`,
  `can_jump`, `max_area`, `move_zeroes` and `move_zeroes_bubble`.
- `algosuite.dynamic`: `climb_stairs`, `generate` (Pascal's triangle),
  `max_profit`, `rob`, `num_squares` and `coin_change`.
- `algosuite.backtracking`: `letter_combinations`, `combination_sum`,
  `permute` and `subsets`.
- `algosuite.grid`: `num_islands`, `can_finish`, `oranges_rotting` and
  `word_puzzle`.
- `algosuite.stack`: the class `MinStack` (`push`, `pop`, `top`, `get_min`,
  and `len()`), and `is_valid`, `decode_string` and `daily_temperatures`.
- `algosuite.window`: `length_of_longest_substring`,
  `contains_nearby_almost_duplicate` and `find_anagrams`.

## Examples

```python
from algosuite.linked_list import build_list, list_values, add_two_numbers
from algosuite.tree import from_level_order, level_order
from algosuite.stack import MinStack, decode_string

list_values(add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4])))
# [7, 0, 8]

level_order(from_level_order([3, 9, 20, None, None, 15, 7]))
# [[3], [9, 20], [15, 7]]

decode_string("3[a2[c]]")
# 'accaccacc'

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
stack.get_min()  # -3
stack.pop()
stack.top()      # 0
```

## Behaviour worth knowing

- Functions that rearrange a list in place (`sort_colors`, `rotate`,
  `rotate_in_place`, `move_zeroes`, `move_zeroes_bubble`) change the list
  they are given and return `None`.
- Linked-list and tree functions such as `reverse_list`, `sort_list`,
  `swap_pairs`, `flatten` and `invert_tree` relink the nodes they are given.
  `is_palindrome` leaves the second half of its list reversed;
  `is_palindrome_stack` leaves the list untouched.
- Node classes compare by identity, not by value.
- Invalid input raises `ValueError`: for example an out-of-range `n` in
  `remove_nth_from_end`, an out-of-range `k` in `kth_smallest` or
  `find_kth_largest`, an empty list in `max_sub_array` or `rob`, a malformed
  string in `decode_string`, or a digit outside 2-9 in
  `letter_combinations`. `MinStack` raises `IndexError` when `pop`, `top` or
  `get_min` is called on an empty stack.

## What this package does not do

It is a library only. There is no command-line program, no input or output
of files, and no visualisation of the structures it works on.