"""Singly and doubly linked lists, the latter with checked iterators."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from containerkit.arrays import InvalidIteratorError

T = TypeVar("T")


@dataclass(eq=False)
class _SinglyNode:
    value: Any
    next: _SinglyNode | None = field(default=None, repr=False)


class SinglyLinkedList(Generic[T]):
    """A forward-only linked list."""

    def __init__(self) -> None:
        self._head: _SinglyNode | None = None
        self._tail: _SinglyNode | None = None
        self._count = 0

    def push_back(self, value: T) -> None:
        """Append ``value`` after the last node."""
        node = _SinglyNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the first node."""
        node = _SinglyNode(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._count += 1

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


@dataclass(eq=False)
class _ListNode:
    data: Any
    next: _ListNode | None = field(default=None, repr=False)
    prev: _ListNode | None = field(default=None, repr=False)


class ListIterator(Generic[T]):
    """A position in a :class:`LinkedList`; no node marks the end."""

    def __init__(self, owner: LinkedList[T] | None = None,
                 node: _ListNode | None = None) -> None:
        self._list = owner
        self._node = node
        self.valid = owner is not None and node is not None

    @property
    def value(self) -> T:
        if self._node is None:
            raise InvalidIteratorError("cannot dereference the end iterator")
        return self._node.data

    @value.setter
    def value(self, new_value: T) -> None:
        if self._node is None:
            raise InvalidIteratorError("cannot dereference the end iterator")
        self._node.data = new_value

    def increment(self) -> ListIterator[T]:
        """Move to the next node; past the last node becomes end."""
        if self._node is None or not self.valid:
            raise InvalidIteratorError("cannot advance this iterator")
        self._node = self._node.next
        return self

    def decrement(self) -> ListIterator[T]:
        """Move to the previous node; before the first node becomes end."""
        if self._node is None or not self.valid:
            raise InvalidIteratorError("cannot step back this iterator")
        self._node = self._node.prev
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListIterator):
            return NotImplemented
        return self._node is other._node and self._list is other._list

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        at = "end" if self._node is None else repr(self._node.data)
        return f"ListIterator(at={at}, valid={self.valid})"


class LinkedList(Generic[T]):
    """A doubly linked list with head and tail."""

    def __init__(self) -> None:
        self._head: _ListNode | None = None
        self._tail: _ListNode | None = None
        self._count = 0

    def push_back(self, value: T) -> None:
        node = _ListNode(value, None, self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def push_front(self, value: T) -> None:
        node = _ListNode(value, self._head, None)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._count += 1

    def begin(self) -> ListIterator[T]:
        return ListIterator(self, self._head)

    def end(self) -> ListIterator[T]:
        return ListIterator(self, None)

    def _check_position(self, position: ListIterator[T]) -> _ListNode:
        if position._list is not self or position == self.end() or not position.valid:
            raise InvalidIteratorError("iterator does not point into this list")
        return position._node

    def erase(self, position: ListIterator[T]) -> ListIterator[T]:
        """Remove the node at ``position`` and return an iterator to the next one."""
        node = self._check_position(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._count -= 1
        position.valid = False
        return ListIterator(self, node.next)

    def insert(self, position: ListIterator[T], value: T) -> ListIterator[T]:
        """Insert ``value`` before ``position`` and return an iterator to it."""
        target = self._check_position(position)
        node = _ListNode(value, target, target.prev)
        if target.prev is None:
            self._head = node
        else:
            target.prev.next = node
        target.prev = node
        self._count += 1
        return ListIterator(self, node)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"