# dsakit

A small collection of classic data structures and algorithms on integers,
with no runtime dependencies (Python 3.10 and later).

## Modules

### `dsakit.sorting`

- `insertion_sort(items)`, `selection_sort(items)`, `merge_sort(items)` and
  `quick_sort(items)` each take any iterable of integers and return a new
  sorted list; the input is left untouched. `quick_sort` uses the last
  element as its pivot.
- `format_array(items)` renders numbers as `"12 11 13 "` — each value
  followed by a space, with no trailing newline.

### `dsakit.matrix`

- `read_matrix(rows, cols, read_value=input)` builds a `rows` x `cols`
  matrix in row order, calling `read_value` with a prompt
  (`"Enter the 1 element\t:"`, …) for each element and converting the answer
  with `int`. A negative dimension raises `MatrixShapeError`.
- `add_matrices(a, b)` returns the element-wise sum; matrices of different
  shapes raise `MatrixShapeError` (a subclass of `ValueError`).
- `to_triplets(matrix)` returns the sparse form of a matrix: three rows
  holding the row indices, column indices and values of its non-zero
  entries, in row order. A matrix with no non-zero entries gives
  `[[], [], []]`.
- `format_matrix(matrix, separator=" ")` renders each row as its values each
  followed by `separator`, one row per line.

### `dsakit.tree`

- `Node(data, left=None, right=None)` is a binary tree node (a dataclass).
- `in_order(root)`, `pre_order(root)` and `post_order(root)` are generators
  yielding the values of a tree in the given depth-first order.
- `BinarySearchTree(values=())` is an unbalanced search tree of distinct
  integers:
  - `insert(value)` adds a value; duplicates are ignored.
  - `delete(value)` removes a value if present, replacing a node with two
    children by its in-order successor.
  - `search(key)` returns the `Node` holding `key`, or `None`.
  - `minimum()` returns the smallest value, raising `ValueError` when empty.
  - `key in tree` tests membership; iterating yields the values in order.

### `dsakit.heap`

- `MinHeap(capacity=100)` is a binary min-heap stored in level order:
  - `insert(value)` adds a value, raising `HeapFullError` (an
    `OverflowError`) once `capacity` values are held.
  - `delete_min()` removes and returns the smallest value; `peek()` returns
    it without removing it. Both raise `HeapEmptyError` (an `IndexError`)
    on an empty heap.
  - `len(heap)` gives the number of values; iterating yields them in
    storage order, not sorted order.
- `MAX_SIZE` is the default capacity, 100.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Library use

```python
from dsakit.sorting import merge_sort, format_array
from dsakit.tree import BinarySearchTree
from dsakit.heap import MinHeap
from dsakit.matrix import add_matrices, to_triplets

print(format_array(merge_sort([12, 11, 13, 5, 6, 7])))   # 5 6 7 11 12 13

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
tree.delete(20)
print(40 in tree, list(tree))    # True [30, 40, 50, 60, 70, 80]

heap = MinHeap()
for value in (10, 20, 5, 30, 15):
    heap.insert(value)
print(heap.peek(), len(heap))    # 5 5
print(heap.delete_min())         # 5

print(add_matrices([[1, 2, 3], [4, 5, 6]], [[6, 5, 4], [3, 2, 1]]))
print(to_triplets([[0, 0, 6], [0, 1, 0]]))   # [[0, 1], [2, 1], [6, 1]]
```

## Command-line demonstrations

Each module installs a short demonstration command.

`dsakit-sort [ALGORITHM] [VALUES ...]` sorts a list with one algorithm
(`insertion`, `merge`, `quick` or `selection`; default `insertion`) and
prints it before and after. Without values it uses a built-in sample array
for that algorithm.

```
dsakit-sort
dsakit-sort quick 3 1 2
```

`dsakit-matrix [DEMO]` runs one of three demos:

- `add` (default): prompts for two 2 x 3 matrices on standard input and
  prints their sum.
- `column-major`: prompts for a 3 x 3 matrix and prints it row by row,
  tab-separated.
- `sparse`: prints the triplet form of a built-in 4 x 5 sparse matrix.

```
dsakit-matrix
dsakit-matrix sparse
```

`dsakit-tree [DEMO]` runs `bst` (default: builds a search tree, deletes 20,
prints the in-order values before and after, then looks up 40) or
`traversals` (prints the in-, pre- and post-order traversals of a fixed
five-node tree).

```
dsakit-tree
dsakit-tree traversals
```

`dsakit-heap [VALUES ...]` inserts the given values (default
`10 20 5 30 15`) into a min-heap, prints it in storage order, deletes the
minimum and prints it again.

```
dsakit-heap
dsakit-heap 7 3 9
```

## What it does not do

The matrix commands work only with the fixed shapes above; there is no
command for matrices of other sizes, though `read_matrix` accepts any shape.
None of the structures is saved anywhere: everything lives in memory for the
length of one call or command.