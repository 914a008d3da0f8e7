# dsalgo

Classic data structures and algorithms, plus a few image-processing routines
for 8-bit bitmaps and raw pixel buffers. Everything is plain Python with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsalgo.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `counting_sort`, `heap_sort`, `merge_sort`, `quick_sort`, `radix_sort` / `radix_passes`, and the in-place helpers `max_heapify`, `build_max_heap`, `partition_last`, `partition_first` |
| `dsalgo.fibonacci` | `fibonacci_recursive`, `fibonacci_memo`, `fibonacci_dp`, `fibonacci_iterative`, `fibonacci_matrix`, `matrix_power` |
| `dsalgo.arith` | `gcd`, `lcm` |
| `dsalgo.bigint` | `BigInteger`, a non-negative decimal integer supporting addition |
| `dsalgo.kmp` | `failure_table`, `kmp_search` |
| `dsalgo.hashing` | `HashTable` with `linear_probe`, `quadratic_probe`, `double_probe` / `make_double_probe`; `TableFullError` |
| `dsalgo.doubly` | `DoublyLinkedList` with a sentinel header |
| `dsalgo.union_find` | `UnionFind` with path compression |
| `dsalgo.binary_tree` | `TreeNode`, traversals and tree queries |
| `dsalgo.graph` | `AdjacencyList`, `bfs_from`, `dfs_from` |
| `dsalgo.shortest_paths` | `dijkstra`, `floyd_warshall`, `bellman_ford`, `prim`; `NegativeCycleError` |
| `dsalgo.bitmap` | `FileHeader`, `InfoHeader`, `Bitmap`, `row_stride`, `read_bitmap`, `write_bitmap`, `bmp_to_raw` |
| `dsalgo.filters` | `median_filter`, `binarize`, `dilate`, `erode` |
| `dsalgo.canny` | `gradient_maps`, `suppress_non_maxima`, `follow_edges`, `canny_edge`, `canny_file` |

## Examples

### Sorting

The sorts take any iterable of integers and return a new sorted list.

```python
from dsalgo.sorting import counting_sort, merge_sort, radix_passes

merge_sort([5, 2, 9, 1])          # [1, 2, 5, 9]
counting_sort([3, 0, 2, 3], 3)    # [0, 2, 3, 3]
list(radix_passes([21, 13, 5], 2))  # the list after each digit pass
```

`counting_sort` raises `ValueError` for a value outside `0..maximum`;
`radix_passes` and `radix_sort` raise `ValueError` for negative values.

### Numbers and strings

```python
from dsalgo.arith import gcd, lcm
from dsalgo.bigint import BigInteger
from dsalgo.fibonacci import fibonacci_iterative, fibonacci_matrix
from dsalgo.kmp import kmp_search

gcd(12, 18)                               # 6
lcm(4, 6)                                 # 12
str(BigInteger("999") + BigInteger("1"))  # "1000"
fibonacci_iterative(10)                   # 55
fibonacci_matrix(50)                      # F(50) modulo 1_000_000_007
kmp_search("abababa", "aba")              # [0, 2, 4]
```

`fibonacci_recursive` and `fibonacci_matrix` return 1 for every `n` below 3,
including 0; the other variants return 0 for `n == 0`. All raise `ValueError`
for negative `n`.

### Hash tables

A `HashTable` takes a probe function; double hashing is built with
`make_double_probe`. `insert` returns the slot used and raises
`TableFullError` when no probed slot is free.

```python
from dsalgo.hashing import HashTable, linear_probe, make_double_probe

table = HashTable(13, linear_probe)
for value in (10, 20, 30, 40, 33, 46, 50, 60):
    table.insert(value)
print(table)   # [0: 60] [1: 40] ... end

double = HashTable(13, make_double_probe(11, 1, "+"))
```

### Lists, sets and trees

```python
from dsalgo.doubly import DoublyLinkedList
from dsalgo.union_find import UnionFind
from dsalgo.binary_tree import TreeNode, inorder, height, is_balanced

items = DoublyLinkedList([1, 2, 3])
items.insert_first(0)
str(items)              # "[0] -> [1] -> [2] -> [3] -> NULL"
list(reversed(items))   # [3, 2, 1, 0]
items.search(2)         # 2 (position), or None when absent

sets = UnionFind(5)
sets.union(3, 1)
sets.find(3)            # 1, the smaller root represents the set

root = TreeNode(2, TreeNode(1), TreeNode(3))
list(inorder(root))     # [1, 2, 3]
height(root)            # 2
is_balanced(root)       # True
```

### Graphs

```python
from dsalgo.graph import AdjacencyList
from dsalgo.shortest_paths import dijkstra, bellman_ford, NegativeCycleError

graph = AdjacencyList(4)
graph.add_edge(0, 1)
graph.add_edge(0, 2)
graph.add_edge(1, 3)
graph.dfs()   # [0, 1, 3, 2]
graph.bfs()   # [0, 1, 2, 3]

weighted = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []]
dijkstra(weighted, 0, 3)                                    # 4
bellman_ford([(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 1)], 4, 0, 3)  # 4
```

`dijkstra` and `bellman_ford` return `math.inf` for an unreachable target;
`bellman_ford` raises `NegativeCycleError` when a negative cycle is reachable
from the start. `floyd_warshall` treats a zero matrix entry as "no edge".

### Images

```python
from dsalgo.bitmap import read_bitmap, bmp_to_raw
from dsalgo.filters import binarize, median_filter, dilate, erode
from dsalgo.canny import canny_file

bitmap = read_bitmap("picture.bmp")
rows = bitmap.rows()                 # stored pixel rows, padding included
bmp_to_raw("picture.bmp", "picture.raw")

smooth = median_filter(raw, width, height)
mask = binarize(smooth, 120)
grown = dilate(mask, width, height)
shrunk = erode(mask, width, height)

canny_file("gray.bmp", "edges.bmp", 50, 150)
```

The filters take raw 8-bit pixel data of exactly `width * height` bytes and
return new bytes. `canny_file` expects an 8-bit grayscale bitmap and writes a
bitmap with the same headers and palette whose pixels are 0 or 255.

## Commands

```
dsalgo-hashing
```

Fills hash tables of size 13 and 11 with fixed sample values using linear,
quadratic and double-hashing probes, and prints each table.

```
dsalgo-canny [SOURCE] [TARGET] [--low N] [--high N]
```

Runs Canny edge detection on an 8-bit grayscale bitmap. `SOURCE` defaults to
`Lenna(gray).bmp`, `TARGET` to `Lenna(Canny).bmp`, and the thresholds to 50
and 150. On a read or format error it prints a message to standard error and
exits with status 1.

## Not included

The package has no singly linked list, circular list, deque, heap or
priority queue, segment tree or binary-search-tree class. Its image routines
cover bitmap I/O, median filtering, thresholding, dilation, erosion and Canny
edges only; there is no brightness or contrast adjustment, colour-to-grayscale
conversion or image flipping.