# nodeworks

Hand-built node structures and the algorithms that work on them: singly,
doubly and circular linked lists, fixed-size and chunked stacks and queues,
a growable array, a block-mapped deque, and a binary search tree with a set
of traversal, path and editing algorithms. Everything is pure Python with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `nodeworks.linked` | `ListNode`, `LinkedList`: `push` adds at the front; iteration, `len()` and in-place `reverse()` |
| `nodeworks.sorted_lists` | `Order` (`ASCENDING`, `DESCENDING`) and four duplicate-free sorted lists: `SortedLinkedList`, `SortedDoublyLinkedList`, `SortedCircularList`, `SortedCircularDoublyLinkedList`, each with `add` and `remove`; the doubly linked ones also support `reversed()` |
| `nodeworks.containers` | `BoundedStack` and `RingQueue` (fixed capacity, pushes when full are dropped), `ChunkedStack` and `ChunkedQueue` (unbounded, stored in fixed-size chunks), `DynamicArray` (doubles when full, halves when half empty; `capacity()`), `DoublyLinkedList` (push/pop at both ends, indexing) |
| `nodeworks.chunked_deque` | `ChunkedDeque(map_size, block_size)`: push/pop at both ends, indexing (negative indexes too), `blocks()` to see the occupied part of each block, `block_size` and `map_capacity` properties |
| `nodeworks.list_edits` | `delete_n_after_m`, `delete_values`, `josephus_rounds`, `jump_targets`, `merge_between_zeros`, `is_palindrome`, `reorder`, `reverse_between`, `reverse_in_groups`, `rotate_blockwise` |
| `nodeworks.list_transforms` | `rotate_right`, `segregate_even_odd`, `sort_list`, `split_into_parts`, `add_numbers`, `swap_pairs`, `union_and_intersection`, `max_twin_sum`, `remove_nodes_with_greater_right`, `remove_all_duplicated`, `remove_duplicates` |
| `nodeworks.sorting` | `bubble_sort` with a pluggable swap predicate, `greater`, `less`, `timed_sort`, `countdown`, and the `main` behind the `nodeworks-bench` command |
| `nodeworks.bst` | `TreeNode`, `BinarySearchTree` with `insert`, `remove` (both return a bool), `in`, `inorder()`, `level_order()` |
| `nodeworks.tree_views` | `boundary`, `right_side_view`, `spiral_order`, `largest_per_level`, `populate_next_complete`, `populate_next`, `next_links` |
| `nodeworks.tree_paths` | `diameter`, `root_to_leaf_paths`, `path_sums`, `shortest_leaf_path`, `lowest_common_ancestor`, `kth_largest`, `burn_time`, `closest_nodes` |
| `nodeworks.tree_edits` | `invert`, `merge`, `remove_leaves_with_value`, `trim`, `add_row`, `to_greater_sum`, `is_sum_tree`, `are_cousins` |

The list and tree algorithms take a `LinkedList` or a `BinarySearchTree` and
either change it in place or return a result; the docstring of each function
says which.

Popping from an empty stack, queue, array, list or deque raises
`IndexError`, as does indexing out of range.

## Examples

Linked lists:

```python
from nodeworks.linked import LinkedList
from nodeworks.list_edits import is_palindrome

lst = LinkedList([1, 2, 3])
lst.push(0)
lst.reverse()
print(list(lst), len(lst))                             # [3, 2, 1, 0] 4
print(is_palindrome(LinkedList([3, 1, 2, 2, 1, 3])))   # True
```

Sorted lists keep their values ordered and ignore duplicates:

```python
from nodeworks.sorted_lists import Order, SortedLinkedList

ordered = SortedLinkedList(Order.DESCENDING)
for value in (5, 4, 3, 1, 2, 4):
    ordered.add(value)
ordered.remove(3)
print(list(ordered))   # [5, 4, 2, 1]
```

A deque stored in blocks:

```python
from nodeworks.chunked_deque import ChunkedDeque

d = ChunkedDeque(map_size=3, block_size=5)
for value in range(6, 11):
    d.push_back(value)
d.push_front(5)
print(list(d), d[0], d[-1])
print(d.blocks())
```

Binary search trees and their algorithms:

```python
from nodeworks.bst import BinarySearchTree
from nodeworks.tree_paths import kth_largest, lowest_common_ancestor
from nodeworks.tree_views import right_side_view

tree = BinarySearchTree([20, 8, 22, 4, 12, 10, 14])
print(list(tree.inorder()))                  # [4, 8, 10, 12, 14, 20, 22]
print(kth_largest(tree, 3))                  # 14
print(lowest_common_ancestor(tree, 10, 14))  # 12
print(right_side_view(tree))                 # [20, 22, 12, 14]
```

Sorting with a comparison predicate; `bubble_sort` returns a new list:

```python
from nodeworks.sorting import bubble_sort, less

print(bubble_sort([3, 1, 2]))         # [1, 2, 3]
print(bubble_sort([3, 1, 2], less))   # [3, 2, 1]
```

## Command line

`nodeworks-bench` bubble-sorts reversed arrays of several sizes, once with
the default comparison and once each with a plain function, a callable
object and a lambda as the swap predicate, and prints the elapsed
milliseconds. The sizes default to 1000 through 5000 and can be chosen with
`--sizes`:

```
nodeworks-bench
nodeworks-bench --sizes 100 200 400
```

## What it does not do

The structures live in memory only: nothing is saved to or loaded from
disk, and none of them is safe to share between threads without your own
locking. Besides the benchmark, the package has no command-line interface.