# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Requires Python 3.10 or later.

## Installation

```
pip install .
```

## Modules

- `dsakit.sorting`: `bubble_sort`, `insertion_sort`, `selection_sort_largest`,
  `selection_sort_smallest`, `exchange_sort` and `quick_sort`. Each takes any
  iterable, leaves it untouched and returns a new ascending list.
  `partition(values, low, high)` is the in-place Lomuto step used by
  `quick_sort`, pivoting on `values[high]` and returning the pivot's index.
- `dsakit.searching`: `linear_search(values, key)` returns the first matching
  position; `binary_search(values, key)` searches an ascending sequence. Both
  return `None` when the key is absent.
- `dsakit.stack`: `Stack(capacity=10)` with `push`, `pop`, `peek`, `is_empty`,
  `len()` and iteration from top to bottom. A full stack raises `Overflow`, an
  empty one `Underflow` (a subclass of `IndexError`).
- `dsakit.fifo`: `ArrayQueue(capacity=100)` with `enqueue`, `dequeue`,
  `is_empty`, `len()` and iteration from front to rear. Its slots are never
  reused: once `capacity` values have been enqueued in total it raises
  `Overflow`, even if some have been dequeued.
- `dsakit.circular`: `CircularQueue(capacity=5)`, a ring buffer that reuses
  freed slots, and `LinkedCircularQueue()`, an unbounded circular linked list.
  Both offer `enqueue`, `dequeue`, `is_empty`, `len()` and iteration.
- `dsakit.array_tree`: `ArrayBinaryTree(node_count)`, a binary tree in a list
  of `2 ** height - 1` slots, with `set_root`, `add_left`, `add_right`,
  `update(old, new)` (returns how many slots changed), `delete(key)` (moves
  the last occupied slot into the deleted one) and iteration over occupied
  slots.
- `dsakit.complete_tree`: `Node` and `CompleteBinaryTree(values=())`, a linked
  tree filled level by level, with `insert`, `level_order`, `search`,
  `delete` (overwrites with the deepest value and drops the deepest node) and
  `len()`.
- `dsakit.traversals`: `inorder`, `preorder`, `postorder` (recursive) and
  `iterative_inorder`, `iterative_preorder`, `iterative_postorder` (stack
  based). Each takes a root `Node` or `None` and returns a list of values.
- `dsakit.bst_array`: `ArrayBST(root_value, capacity=100)`, a binary search
  tree in array slots, with `insert` (returns the slot index), `set_left`,
  `set_right` and iteration in slot order. Raises `DuplicateKeyError` for a
  repeated value and `TreeFullError` when a position falls outside the array.
- `dsakit.bst`: `BinarySearchTree(values=())` with `insert` and `delete`
  (both return a bool), `in`, `minimum`, `is_empty`, `inorder`, `preorder`
  and `postorder`.
- `dsakit.graph`: `build_adjacency(edges)` turns `(source, destination)` pairs
  into a directed adjacency mapping; `bfs` and `dfs` return the vertices
  reachable from a start vertex in visiting order.
- `dsakit.mst`: `kruskal(vertex_count, edges)` and `prim(vertex_count, edges)`
  take `(source, destination, weight)` edges over vertices `1..vertex_count`
  and return a `SpanningTree` with `edges` and `cost`. Weights of 0 or of 999
  and above count as no edge; an invalid edge or a disconnected graph raises
  `ValueError`. `prim` treats edges as undirected and grows from vertex 1.
- `dsakit.shortest_path`: `dijkstra(vertex_count, edges, source)` returns a
  `Route` (`target`, `distance`, `path`, `reachable`) for every other vertex;
  unreachable targets have `distance` `None`. `format_routes` renders them as
  a tab-separated table.

## Examples

```python
from dsakit.sorting import quick_sort
from dsakit.searching import binary_search
from dsakit.bst import BinarySearchTree

values = quick_sort([5, 2, 9, 1])
print(values)                      # [1, 2, 5, 9]
print(binary_search(values, 9))    # 3

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.delete(30)
print(tree.inorder())              # [20, 40, 50, 70]
print(40 in tree)                  # True
```

Graph algorithms take plain edge lists:

```python
from dsakit.mst import kruskal
from dsakit.shortest_path import dijkstra, format_routes

tree = kruskal(3, [(1, 2, 4), (2, 3, 1), (1, 3, 3)])
print(tree.cost)                   # 4

routes = dijkstra(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)], 1)
print(format_routes(routes))
```

## Interactive menus

The `dsakit` command runs a numbered menu against standard input and output:

```
dsakit stack
dsakit queue
dsakit circular-queue
dsakit circular-queue --linked
dsakit bst
```

`stack` uses a ten-slot `Stack`, `queue` a hundred-slot `ArrayQueue`,
`circular-queue` a five-slot `CircularQueue` (or, with `--linked`, a
`LinkedCircularQueue`), and `bst` a `BinarySearchTree`. Choices and values
are whitespace-separated integers; option 6 or the end of input ends the
session. A token that is not an integer stops the command with exit status 2.

## What it does not do

The menus cover only the stack, the queues and the binary search tree; the
sorts, searches, array trees and graph algorithms are available from Python
only. Nothing is saved between sessions.