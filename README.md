# algopractice

Classic algorithm exercises written as plain Python functions, together with
the small data structures they work on: linked-list and tree nodes, an
index-addressed linked list and an LRU cache.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## Modules

- `algopractice.nodes`: `ListNode` and `TreeNode` (compared by identity), plus
  `build_list`, `list_values`, `format_list` (`1 -> 2 -> nil`), `print_list`,
  `build_tree` (height-balanced tree from a sorted list), `tree_height`,
  `level_order`, `print_tree_leveled`, `render_tree` (grid drawing, one line
  per level) and `print_tree_structured`.
- `algopractice.arrays`: `generate_matrix` (clockwise spiral matrix),
  `min_sub_array_len` (shortest run reaching a target sum, or 0),
  `remove_element` (compacts kept values to the front, returns their count),
  `search` (binary search, -1 if absent), `sorted_squares`,
  `reverse_string` (reverses a mutable sequence in place).
- `algopractice.hashing`: `can_construct`, `four_sum`, `four_sum_count`,
  `intersection`, `is_anagram`, `digit_square_sum`, `is_happy`, `three_sum`,
  `two_sum` (returns the two indices, or `None`).
- `algopractice.linked`: `detect_cycle`, `get_intersection_node`,
  `remove_elements`, `remove_nth_from_end` (raises `ValueError` when `n` is
  out of range), `reverse_list`, `swap_pairs`. These work on `ListNode`
  chains and modify them in place.
- `algopractice.mylinkedlist`: `MyLinkedList` with `get` (-1 when out of
  range), `add_at_head`, `add_at_tail`, `add_at_index`, `delete_at_index`
  (out-of-range positions are ignored), plus `len()`, iteration and `str()`.
- `algopractice.lru`: `LRUCache(capacity)` with `get` (-1 when absent), `put`
  and `len()`. Lookups, insertions, updates and evictions are reported through
  the `algopractice.lru` logger at DEBUG level.
- `algopractice.cli`: the `algopractice-tree` command.

## Examples

```python
from algopractice.nodes import build_list, format_list, build_tree, render_tree
from algopractice.linked import reverse_list
from algopractice.arrays import generate_matrix
from algopractice.lru import LRUCache

print(format_list(reverse_list(build_list([1, 2, 3]))))  # 3 -> 2 -> 1 -> nil
print(generate_matrix(3))   # [[1, 2, 3], [8, 9, 4], [7, 6, 5]]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)       # 1
cache.put(3, 3)    # evicts key 2
cache.get(2)       # -1

print(render_tree(build_tree([1, 2, 3, 4, 5, 6, 7])))
```

## Command line

```
algopractice-tree
algopractice-tree 1 2 3 4 5
```

Builds a height-balanced binary tree from the given sorted integers (1 to 7
when none are given) and prints its values in level order, then as a
structured drawing.