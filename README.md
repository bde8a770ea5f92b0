# containerkit

Small container types with fixed growth rules and cursor-style iterators
that raise `InvalidIteratorError` when they are used in a way they cannot be.

## Modules

### `containerkit.arrays`

- `IntArray`: a growable array of integers. Its `capacity` starts at 2 and
  doubles when an append finds it full. `push_back(value)` appends,
  `sort(sort_func)` passes the stored list to `sort_func` to sort in place.
  Supports `len()`, iteration and indexing.
- `bubble_sort(values)`: sorts a list in place in ascending order.
- `DynamicArray`: a generic growable array. Its `capacity` starts at 2 and
  doubles when full; `resize(capacity)` moves the elements into a larger
  buffer and raises `ValueError` if the new capacity is not larger than the
  current one. `clear()` empties it. Indexing accepts negative indices and
  raises `IndexError` outside the stored elements.
- `ArrayIterator`: returned by `DynamicArray.begin()` and `end()` (index `-1`
  marks the end). Read or write the element through `.value`; move with
  `increment()` and `decrement()`. A cursor taken before the array's buffer
  was reallocated raises `InvalidIteratorError`, as does dereferencing the end
  cursor or a cursor passed to `erase`.
  `DynamicArray.erase(position)` removes the element and returns a cursor to
  the element that moved into its place.
- `InvalidIteratorError`: the error raised by all iterators in the package.

### `containerkit.linked_list`

- `SinglyLinkedList`: a forward-only list with `push_back`, `push_front`,
  `len()` and iteration.
- `LinkedList`: a doubly linked list with `push_back`, `push_front`,
  `begin()`, `end()`, `insert(position, value)` (inserts before `position`
  and returns a cursor to the new element) and `erase(position)` (returns a
  cursor to the following element). Both raise `InvalidIteratorError` for the
  end cursor or a cursor from another list.
- `ListIterator`: a cursor with `.value`, `increment()` and `decrement()`.

### `containerkit.bst`

- `BinarySearchTree`: a map from unique keys to values. `insert(key, value)`
  returns `False` if the key is already present. `find(key)` returns a cursor
  at the key, or `end()` if it is absent. `erase(position)` removes an entry
  and returns a cursor to the next entry in key order. Iterating yields `Pair`
  objects (`first` is the key, `second` the value) in ascending key order.
  `successor(node)` and `predecessor(node)` walk the nodes in key order.
- `TreeIterator`: a cursor with `.pair`, `increment()` and `decrement()`.
- `BSTNode`: a tree node with `is_root()`, `is_left_child()`,
  `is_right_child()`, `is_leaf()` and `is_full()`.

### `containerkit.basics`

- `add`, `sub`, `mul`: integer arithmetic helpers.
- `Status`: bit flags (`HUNGRY`, `THIRSTY`, `TIRED`, `FIRE`, `COLD`, `POISON`,
  `HOT1` to `HOT6`), with `add_status`, `has_status` and `remove_status`.

## Install

```
pip install .
```

## Example

```python
from containerkit.arrays import DynamicArray, IntArray, bubble_sort
from containerkit.bst import BinarySearchTree
from containerkit.linked_list import LinkedList

numbers = IntArray()
for n in (5, 3, 9, 1):
    numbers.push_back(n)
numbers.sort(bubble_sort)
print(list(numbers))            # [1, 3, 5, 9]

arr = DynamicArray()
for n in range(4):
    arr.push_back(n)
it = arr.erase(arr.begin())     # removes 0
print(it.value, list(arr))      # 1 [1, 2, 3]

lst = LinkedList()
lst.push_back("b")
lst.push_front("a")
print(list(lst))                # ['a', 'b']

tree = BinarySearchTree()
tree.insert(100, "x")
tree.insert(50, "y")
tree.insert(150, "z")
print([p.first for p in tree])  # [50, 100, 150]
```

## Limits

The tree is not rebalanced, so its depth follows the insertion order. The
package is a library only; it has no command-line interface.

## Tests

```
pip install .[test]
pytest
```