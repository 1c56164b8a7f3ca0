# dsakit

A small, dependency-free library of classic data structures and algorithms,
written in plain Python.

## Installation

```
pip install dsakit
```

Install the test extra to run the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `has_pair_with_sum`, `inc_dec_permutation`, `first_missing_positive`, `spiral_order`, `next_permutation` and `previous_permutation` (both wrap around), `product_except_self`, `product_except_self_no_division`, `push_zeroes_to_end` (in place), `rotate_clockwise` |
| `dsakit.misc` | `power_mod` and `power_mod_recursive` (modulus defaults to 10^9 + 7), `longest_increasing_subsequence`, `next_lexicographic_permutation` (returns `None` for the greatest one), `hanoi_moves`, `sort_by_length` |
| `dsakit.heap` | `BinaryHeap`, a bounded min-heap (or max-heap with `reverse=True`) with an optional key; `Passenger` and `boarding_order` |
| `dsakit.expressions` | `evaluate_infix`, `evaluate_postfix`, `infix_to_postfix`, `precedence`, for single-digit operands and `+ - * /` |
| `dsakit.linked_list` | `LinkedList`, plus `ListNode` chain helpers: `build_list`, `list_values`, `has_cycle`, `find_merge_node`, `remove_sorted_duplicates`, `nth_from_last`, `merge_sorted` |
| `dsakit.doubly_linked` | `DoublyNode`, `build_doubly`, `doubly_values`, `sorted_insert`, `reverse_doubly`, and `XORList` |
| `dsakit.bounded_deque` | `BoundedDeque`, a fixed-capacity ring-buffer deque |
| `dsakit.binary_tree` | `Node`; recursive and iterative traversals, `level`, `reverse_level_order`, left and right views, building trees from traversal pairs, level-order insert and delete, `mirror`, `root_to_leaf_paths` |
| `dsakit.tree_metrics` | `height`, `diameter`, `width`, `minimum_depth`, `is_balanced`, `is_unival`, `count_unival_subtrees`, `count_leaves`, `count_internal_nodes`, `diagonal_sums`, `max_level_sum`, `tree_sum` |
| `dsakit.bst` | `BinarySearchTree`, `is_bst`, `predecessor_successor`, `insert_iterative` |
| `dsakit.queues` | `CircularQueue` (FIFO) and `SortedQueue` (smallest first), both bounded |
| `dsakit.shortest_paths` | `bellman_ford`, `dijkstra_quadratic`, `dijkstra`, `floyd_warshall`, with `ShortestPaths`, `AllPairs` and `NegativeCycleError` |
| `dsakit.graphs` | `bfs`, `dfs`, `is_bipartite`, `has_cycle_directed`, `has_cycle_undirected`, `connected_components`, `all_paths`, `kruskal`, `prim`, `topological_sort_dfs`, `topological_sort_kahn`, and `CycleError` |

## Examples

```python
from dsakit.arrays import next_permutation, rotate_clockwise
from dsakit.misc import power_mod, hanoi_moves

next_permutation([1, 2, 3])           # [1, 3, 2]
rotate_clockwise([[1, 2], [3, 4]])    # [[3, 1], [4, 2]]
power_mod(2, 10)                      # 1024
list(hanoi_moves(2))                  # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

```python
from dsakit.expressions import evaluate_infix, infix_to_postfix

evaluate_infix("2 * (3 + 4)")         # 14
infix_to_postfix("2 * (3 + 4)")       # '2 3 4 + *'
```

```python
from dsakit.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.insert_at(1, 9)
list(items)                           # [1, 9, 2, 3]
```

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
40 in tree                            # True
tree.remove(30)
tree.inorder()                        # [20, 40, 50, 70]
```

```python
from dsakit.shortest_paths import dijkstra
from dsakit.graphs import topological_sort_kahn

adjacency = [[(1, 4), (2, 1)], [], [(1, 2)]]
dijkstra(adjacency, 0).path_to(1)     # [0, 2, 1]
topological_sort_kahn([[1], [2], []]) # [0, 1, 2]
```

Operations that cannot complete, such as popping from an empty structure or
pushing past a capacity limit, raise exceptions (`IndexError`,
`OverflowError`, `ValueError` and the like) instead of returning sentinel
values.

## What it does not do

dsakit has no binary-search or bound-finding routines, no stand-alone
sorting functions and no stack structures of its own; Python's `bisect`
module, `sorted` and plain lists cover those. It is a library only and
installs no command-line tool.