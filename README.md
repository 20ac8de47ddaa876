# algokit

A collection of classic algorithms and data structures in plain Python. It has
no third-party dependencies. You can use it for study, for interview practice,
or as small building blocks that are easy to read.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.arrays` | `first_negative_in_windows`, maximum subarray sum (`max_subarray_sum_brute`, `max_subarray_sum_prefix`, `max_subarray_sum_kadane`), `find_peak`, `PrefixSums`, `sort_012`, `matrix_trace`, `matrix_normal` |
| `algokit.bits` | `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bit_range`, `count_set_bits`, `count_set_bits_fast` |
| `algokit.arithmetic` | Euclid's `gcd`, `prime_sum_pair` |
| `algokit.recursion` | `count_inversions`, `quick_sort_lomuto`, `hanoi_moves` (a generator of moves) |
| `algokit.sorting` | `bubble_sort`, `counting_sort` (integers 0..255), `insertion_sort`, `merge_sort`, `quick_sort_hoare`, `selection_sort` |
| `algokit.heaps` | `sift_down`, `build_max_heap`, `heap_sort`, `k_largest`, and a `MaxHeap` class with `push`, `pop_root` and `remove` |
| `algokit.searching` | `contains_sorted`, `lower_bound`, `upper_bound`, `count_sorted`, `linear_search` |
| `algokit.generic_tree` | `GenericNode`, `build_generic_tree` (a depth-first sequence where -1 closes a node), `describe`, `diameter`, `node_to_root_path`, `distance_between` |
| `algokit.dynamic` | `knapsack_01`, `egg_drop`, `can_partition`, `subset_sum`, `longest_common_subsequence`, `min_insertions_palindrome`, `trapped_water`, `travelling_salesman` |
| `algokit.greedy` | `max_activities`, `fractional_knapsack`, `Job` and `schedule_jobs`, `optimal_merge_cost` |
| `algokit.backtracking` | `rat_in_maze_paths` (a generator of path grids), `solve_n_queens` |
| `algokit.dsu` | `UnionFind` with path compression, union by rank and set sizes |
| `algokit.graphs` | `WeightedGraph`, `adjacency_from_edges`, `articulation_points`, `greedy_coloring`, `hamiltonian_cycles`, `is_bipartite`, `bfs`, `dfs` |
| `algokit.shortest_paths` | `bellman_ford` (raises `NegativeCycleError`), `dijkstra` on a `WeightedGraph`, `floyd_warshall` |
| `algokit.spanning` | `Edge`, `kruskal_tree`, `kruskal_weight`, `prim_weight`, `prim_parents` |
| `algokit.flow` | `max_flow` (Ford–Fulkerson; returns the flow and the augmenting paths) |
| `algokit.expressions` | `precedence`, `infix_to_postfix`, `has_redundant_parentheses` |
| `algokit.strings` | `is_palindrome`, `reverse_string`, `sort_by_length` |
| `algokit.binary_tree` | `BinaryNode`, `build_from_preorder`, `largest_bst` |
| `algokit.bst` | `bst_insert`, `inorder`, `preorder`, `postorder`, `level_order`, `morris_inorder`, `height` |
| `algokit.avl` | `AVLTree` with `insert`, `delete`, `in` and `preorder` |
| `algokit.tree_diameter` | `build_level_order`, `height_and_diameter`, `diameter` |

## Examples

```python
from algokit.arrays import first_negative_in_windows, max_subarray_sum_kadane
from algokit.dynamic import trapped_water
from algokit.expressions import infix_to_postfix
from algokit.avl import AVLTree

first_negative_in_windows([12, -1, -7, 8, -15, 30, 16, 28], 3)
# [-1, -1, -7, -15, -15, 0]

max_subarray_sum_kadane([-2, 1, -3, 4, -1, 2, 1, -5, 4])
# 6

trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])
# 6

infix_to_postfix("a^(b*c-d/(e+f))")
# 'abc*def+/-^'

tree = AVLTree([9, 5, 10, 0, 6, 11, -1, 1, 2])
tree.preorder()
# [9, 1, 0, -1, 5, 2, 6, 10, 11]
10 in tree
# True
```

Sorting functions return a new list and do not change their input. Invalid
input raises an exception and does not return a sentinel value. A graph with a
negative cycle is one example. A few results follow the classic formulation on
purpose: `max_subarray_sum_kadane` resets its running sum at zero, so it never
returns a negative number.

## What it does not do

algokit is a library only. It has no command-line programs and no interactive
prompts, and it installs no console commands. You call its functions from your
own Python code.