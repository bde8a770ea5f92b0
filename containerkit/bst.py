"""An unbalanced binary search tree map with in-order iterators."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from containerkit.arrays import InvalidIteratorError

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class Pair(Generic[K, V]):
    """A key and its value."""

    first: K
    second: V


@dataclass(eq=False)
class BSTNode:
    """A tree node holding a pair and links to its parent and children."""

    pair: Pair
    parent: BSTNode | None = field(default=None, repr=False)
    left: BSTNode | None = field(default=None, repr=False)
    right: BSTNode | None = field(default=None, repr=False)

    def is_root(self) -> bool:
        return self.parent is None

    def is_left_child(self) -> bool:
        return self.parent is not None and self.parent.left is self

    def is_right_child(self) -> bool:
        return self.parent is not None and self.parent.right is self

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_full(self) -> bool:
        return self.left is not None and self.right is not None


class TreeIterator(Generic[K, V]):
    """An in-order position in a :class:`BinarySearchTree`; no node is end."""

    def __init__(self, tree: BinarySearchTree[K, V] | None = None,
                 node: BSTNode | None = None) -> None:
        self._tree = tree
        self._node = node

    @property
    def pair(self) -> Pair[K, V]:
        if self._node is None:
            raise InvalidIteratorError("cannot dereference the end iterator")
        return self._node.pair

    def increment(self) -> TreeIterator[K, V]:
        """Move to the in-order successor; past the largest key becomes end."""
        if self._node is None or self._tree is None:
            raise InvalidIteratorError("cannot advance this iterator")
        self._node = self._tree.successor(self._node)
        return self

    def decrement(self) -> TreeIterator[K, V]:
        """Move to the in-order predecessor; before the smallest key becomes end."""
        if self._node is None or self._tree is None:
            raise InvalidIteratorError("cannot step back this iterator")
        self._node = self._tree.predecessor(self._node)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeIterator):
            return NotImplemented
        return self._tree is other._tree and self._node is other._node

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        at = "end" if self._node is None else repr(self._node.pair)
        return f"TreeIterator(at={at})"


class BinarySearchTree(Generic[K, V]):
    """A map from unique keys to values kept in a binary search tree."""

    def __init__(self) -> None:
        self._root: BSTNode | None = None
        self._count = 0

    def insert(self, key: K, value: V) -> bool:
        """Add ``key`` with ``value``; return False if the key is already present."""
        new_node = BSTNode(Pair(key, value))
        if self._root is None:
            self._root = new_node
        else:
            node = self._root
            while True:
                if node.pair.first < key:
                    if node.right is None:
                        node.right = new_node
                        break
                    node = node.right
                elif node.pair.first > key:
                    if node.left is None:
                        node.left = new_node
                        break
                    node = node.left
                else:
                    return False
            new_node.parent = node
        self._count += 1
        return True

    def successor(self, node: BSTNode) -> BSTNode | None:
        """Return the node that follows ``node`` in key order, or None."""
        if node.right is not None:
            current = node.right
            while current.left is not None:
                current = current.left
            return current
        current = node
        while not current.is_root():
            if current.is_left_child():
                return current.parent
            current = current.parent
        return None

    def predecessor(self, node: BSTNode) -> BSTNode | None:
        """Return the node that precedes ``node`` in key order, or None."""
        if node.left is not None:
            current = node.left
            while current.right is not None:
                current = current.right
            return current
        current = node
        while not current.is_root():
            if current.is_right_child():
                return current.parent
            current = current.parent
        return None

    def begin(self) -> TreeIterator[K, V]:
        node = self._root
        if node is None:
            return self.end()
        while node.left is not None:
            node = node.left
        return TreeIterator(self, node)

    def end(self) -> TreeIterator[K, V]:
        return TreeIterator(self, None)

    def find(self, key: K) -> TreeIterator[K, V]:
        """Return an iterator at ``key``, or the end iterator if it is absent."""
        node = self._root
        while node is not None:
            if node.pair.first < key:
                node = node.right
            elif node.pair.first > key:
                node = node.left
            else:
                break
        return TreeIterator(self, node)

    def erase(self, position: TreeIterator[K, V]) -> TreeIterator[K, V]:
        """Remove the entry at ``position``; return an iterator to the next entry."""
        if position._tree is not self or position._node is None:
            raise InvalidIteratorError("iterator does not point into this tree")
        return TreeIterator(self, self._delete_node(position._node))

    def _delete_node(self, target: BSTNode) -> BSTNode | None:
        following = self.successor(target)

        if target.is_full():
            target.pair = following.pair
            self._delete_node(following)
            return target

        child = target.right if target.right is not None else target.left
        if child is not None:
            child.parent = target.parent
        if target is self._root:
            self._root = child
        elif target.is_left_child():
            target.parent.left = child
        else:
            target.parent.right = child
        target.parent = target.left = target.right = None
        self._count -= 1
        return following

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Pair[K, V]]:
        node: Any = self.begin()._node
        while node is not None:
            yield node.pair
            node = self.successor(node)

    def __repr__(self) -> str:
        items = ", ".join(f"{p.first!r}: {p.second!r}" for p in self)
        return f"BinarySearchTree({{{items}}})"