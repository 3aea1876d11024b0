# dstructs

A small collection of classic container data structures. Each structure
orders or compares its values through functions you supply, so it can hold
values of any kind.

## Contents

- `dstructs.compare` – ready-made comparison and equality functions:
  `int_equal`, `int_compare`, `pointer_equal` (object identity) and
  `pointer_compare` (orders objects by `id()`).
- `dstructs.arraylist.ArrayList` – a growable sequence with `append`,
  `prepend`, `insert`, `remove`, `remove_range`, `index_of`, `clear` and an
  in-place quicksort `sort(compare_func)`. It supports `len()`, indexing and
  iteration.
- `dstructs.avl_tree` – `AVLTree`, a self-balancing binary search tree mapping
  keys to values, with `insert`, `remove`, `remove_node`, `lookup`,
  `lookup_node`, `to_list`, `items`, `len()`, `in` and iteration over keys in
  order. Its nodes (`AVLTreeNode`) expose `key`, `value`, `parent`, `height`,
  `left`, `right` and `child(side)` with `Side.LEFT` / `Side.RIGHT`;
  `subtree_height(node)` gives a subtree's height (0 for `None`).
- `dstructs.binary_heap` – `BinaryHeap`, a list-backed priority queue, min or
  max according to `HeapType.MIN` / `HeapType.MAX`.
- `dstructs.binomial_heap.BinomialHeap` – a priority queue built from
  binomial trees, taking the same `HeapType`.
- `dstructs.bloom_filter.BloomFilter` – a compact, probabilistic set
  membership test with `insert`, `query` (also `in`), `read`/`load` of the
  packed bit table, and `union`/`intersection`. At most
  `bloom_filter.MAX_FUNCTIONS` (64) hash functions may be used.

Compare functions are three-way: they return a negative number, zero or a
positive number as the first argument is less than, equal to or greater than
the second.

## Installation

```
pip install .
```

## Examples

```python
from dstructs.compare import int_compare, int_equal
from dstructs.arraylist import ArrayList
from dstructs.avl_tree import AVLTree
from dstructs.binary_heap import BinaryHeap, HeapType
from dstructs.bloom_filter import BloomFilter

items = ArrayList(0)
for n in (5, 3, 9):
    items.append(n)
items.prepend(1)
items.sort(int_compare)
print(list(items))                    # [1, 3, 5, 9]
print(items.index_of(int_equal, 5))   # 2

tree = AVLTree(int_compare)
tree.insert(10, "ten")
tree.insert(4, "four")
print(tree.lookup(4))                 # four
print(tree.to_list())                 # [4, 10]

heap = BinaryHeap(HeapType.MAX, int_compare)
for n in (2, 8, 5):
    heap.insert(n)
print(heap.pop())                     # 8

bloom = BloomFilter(128, hash, 4)
bloom.insert("apple")
print("apple" in bloom)               # True
```

## Errors

- `ArrayList.insert` raises `IndexError` for an index outside `0..len`.
  `remove` and `remove_range` silently ignore a range that does not lie
  within the list; `index_of` returns -1 when nothing matches.
- `AVLTree.lookup` raises `KeyError` for a missing key; `remove` returns
  `False` instead.
- `BinaryHeap.pop` and `BinomialHeap.pop` raise `IndexError` on an empty heap.
- `BloomFilter` raises `ValueError` for a non-positive table size, for a
  number of functions outside `0..MAX_FUNCTIONS`, for `load` data shorter
  than `(table_size + 7) // 8` bytes, and for `union`/`intersection` of
  filters created with a different table size, hash function or number of
  functions.

A bloom filter may report a value as present that was never inserted, but it
never reports an inserted value as absent. Only the low 32 bits of the hash
function's result are used.

## Running the tests

```
pip install .[test]
pytest
```