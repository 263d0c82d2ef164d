# algolab

A small collection of classic data structures and algorithms, written to be
read and experimented with. Nothing outside the standard library is required.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.containers` | `DynamicArray` (grows its storage by a factor of 1.5, with `reserve`, `clear` and `capacity`) and a doubly linked `LinkedList` of `ListNode`s with `append`, `pop`, `insert`, `erase`, `first` and `end` |
| `algolab.stack` | `Stack` (last in, first out) |
| `algolab.queues` | `ArrayQueue` (ring buffer, 100 slots by default, doubling when full) and `ListQueue` |
| `algolab.heap` | `PriorityQueue`, a binary heap ordered by a `before(a, b)` predicate; largest first by default |
| `algolab.search` | `binary_search` returning a `SearchTrace` of `Probe`s, `sorted_contains`, `compare_strings` |
| `algolab.rbtree` | `RedBlackTree` with `insert`, `delete`, `search`, `minimum`, `maximum`, `successor`, rotations, in-order iteration and `render` (ANSI-coloured text drawing) |
| `algolab.graph` | `dfs`, `bfs` (`BfsResult`), `dijkstra` (`DijkstraResult`), `adjacency_matrix`, `is_connected`, and a six-vertex sample graph from `sample_adjacency` / `sample_weights` |
| `algolab.orgtree` | `TreeNode`, `build_sample_tree`, `format_tree` and `height` for a general tree |
| `algolab.maze` | `TileType`, `Dir`, `Pos`, `can_go`, path finders `right_hand_path`, `bfs_path` and `astar_path`, and a `Walker` that steps along a path |
| `algolab.sorting` | Sorting exercises: `counting_sort`, `sort_points`, `sort_points_by_y`, `sort_words`, `sort_members_by_age`, `kth_largest`, `mean_and_median`, `unique_sorted`, `sorted_numbers` |
| `algolab.puzzles` | Short puzzles: `is_palindrome`, `smallest_generator`, `diamond`, `gpa`, `best_card_sum`, `missing_chess_pieces`, `box_floors`, `binomial` |

Functions raise `ValueError`, `IndexError` or `KeyError` for inputs they
cannot handle, such as popping an empty container, deleting a missing key
or asking for a path that does not exist.

## Examples

A priority queue that pops the smallest item first:

```python
import operator
from algolab.heap import PriorityQueue

pq = PriorityQueue([400, 100, 200, 300], before=operator.lt)
print(list(pq.drain()))  # [100, 200, 300, 400]
```

A binary search that records each probe:

```python
from algolab.search import binary_search

trace = binary_search([1, 8, 15, 23, 32, 44, 56, 64, 81, 91], 81)
print(trace.found, trace.index)  # True 8
for probe in trace.probes:
    print(probe.left, probe.right, probe.verdict)
```

Shortest paths on the sample weighted graph:

```python
from algolab.graph import dijkstra, sample_weights

result = dijkstra(sample_weights(), 0)
print(result.cost)    # [0, 15, 20, 25, 30, None]
print(result.parent)  # [0, 0, 1, 1, 3, None]
```

A red-black tree iterated in key order:

```python
from algolab.rbtree import RedBlackTree

tree = RedBlackTree()
for key in (30, 10, 20, 25, 40, 50):
    tree.insert(key)
tree.delete(10)
print(list(tree), 25 in tree)  # [20, 25, 30, 40, 50] True
print(tree.render())
```

Finding a path through a maze grid and walking it:

```python
from algolab.maze import Pos, TileType, Walker, astar_path

rows = [
    "#####",
    "#...#",
    "#.#.#",
    "#...#",
    "#####",
]
grid = [[TileType.WALL if c == "#" else TileType.EMPTY for c in row] for row in rows]

path = astar_path(grid, Pos(1, 1), Pos(3, 3))
walker = Walker(path)
while not walker.finished():
    walker.update(100)
print(walker.pos)  # Pos(y=3, x=3)
```

## What it does not do

- There are no commands: everything is used from Python code.
- `algolab.maze` finds paths on a grid you supply; it does not generate
  mazes, draw them or run an animation loop.
- The exercises in `algolab.sorting` and `algolab.puzzles` take their input
  as arguments and return results; they do not read standard input.