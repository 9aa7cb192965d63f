# dsakit

Classic data structures and algorithms in plain Python, using only the
standard library. Functions take ordinary sequences and return new values;
they do not modify their arguments.

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

- `dsakit.arrays`: `find_in_grid`, `row_sums`, `find_mode`, `missing_number`,
  `rotate_right`, `rotate_left`, `is_sorted_rotated`, `find_triplets`,
  `find_duplicate`, `pivot_index`, `array_max`, `array_min`, `array_sum`,
  `remove_duplicates`, `reverse_array`, `subarray_with_sum`, `swap_alternate`,
  `merge_sorted` and `zero_filled_subarrays`.
- `dsakit.searching`: `linear_search`, `binary_search`, `binary_search_recursive`,
  `last_occurrence`, `rotation_pivot`, `peak_index_in_mountain`, `integer_sqrt`,
  `sqrt_with_precision`, `matrix_median`, `aggressive_cows`, `allocate_books` and
  `min_test_time`.
- `dsakit.sorting`: `sort_012`, `bubble_sort`, `selection_sort`, `merge_sort`,
  `quick_sort` and `count_inversions`. Each sort returns a new list.
- `dsakit.recursion`: `factorial`, `count_down`, `fibonacci`, `climb_stairs`,
  `is_sorted`, `say_digits`, `walk`, `contains`, `recursive_sum`, `is_palindrome`,
  `power`, `reverse_string`, `subsets`, `subsequences`, `letter_combinations`,
  `permutations`, `find_paths` (rat in a maze), `gcd`, `segmented_sieve` and
  `to_lower`.
- `dsakit.patterns`: `number_triangle`, `binary_triangle`, `pyramid`,
  `inverted_pyramid` and `parallelogram` each return a list of rows;
  `render_all` joins all of them into one text.
- `dsakit.linked_list`: `SinglyLinkedList` and `DoublyLinkedList` (with
  `insert_first`, `insert_last`, `insert_at` and `delete_at`), and
  `CircularLinkedList` (with `insert_after` and `delete`). All support
  `len()` and iteration; `DoublyLinkedList` also supports `reversed()`.
- `dsakit.stack`: a fixed-capacity `Stack` with `push`, `pop`, `peek` and
  `is_empty`, raising `StackOverflowError` when full and `StackUnderflowError`
  when empty.
- `dsakit.heap`: a `MaxHeap` with `insert` and `to_list`.
- `dsakit.tree`: the binary tree `Node`; `build_tree_preorder` and
  `build_tree_level_order` (with `-1` marking an absent child); `level_order`,
  `in_order`, `pre_order`, `post_order`; `height`, `diameter`, `is_balanced`,
  `is_identical`, `is_sum_tree`, `count_leaves`, `lowest_common_ancestor`,
  `max_non_adjacent_sum` and `kth_ancestor`.
- `dsakit.tree_views`: `boundary`, `top_view`, `bottom_view`, `left_view`,
  `right_view`, `vertical_order` and `zigzag`.

Searches that find nothing return `None` rather than a sentinel index.
Invalid input, such as an empty sequence where a value is required or a
negative number where none is allowed, raises `ValueError`; linked lists
raise `IndexError` for positions out of range.

## Examples

```python
from dsakit.searching import binary_search
from dsakit.sorting import merge_sort
from dsakit.recursion import find_paths

binary_search([2, 10, 15, 17, 19], 17)     # 3
binary_search([2, 10, 15, 17, 19], 4)      # None
merge_sort([23, 34, 2, 5, 0])              # [0, 2, 5, 23, 34]
find_paths([[1, 0], [1, 1]])               # ['DR']
```

```python
from dsakit.tree import build_tree_preorder, level_order
from dsakit.tree_views import zigzag

root = build_tree_preorder([10, 5, 1, -1, -1, 2, -1, -1, 7, 2, -1, -1, 1, -1, -1])
level_order(root)   # [[10], [5, 7], [1, 2, 2, 1]]
zigzag(root)        # [10, 7, 5, 1, 2, 2, 1]
```

```python
from dsakit.stack import Stack, StackOverflowError

stack = Stack(2)
stack.push(5)
stack.push(1)
stack.peek()      # 1
try:
    stack.push(10)
except StackOverflowError:
    pass
```

## Command line

Print all text patterns for a given size:

```
dsakit-patterns 4
```

When no size is given on the command line, it is read from standard input.
This is the only command; everything else is used as a library.