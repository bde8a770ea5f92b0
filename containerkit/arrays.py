"""Growable arrays with doubling capacity and checked iterators."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_INITIAL_CAPACITY = 2


class InvalidIteratorError(RuntimeError):
    """Raised when an iterator is used after it stopped being valid."""


def bubble_sort(values: list[int]) -> None:
    """Sort ``values`` in place in ascending order by repeated adjacent swaps."""
    if len(values) <= 1:
        return
    for _ in values:
        for j, (left, right) in enumerate(zip(values, values[1:])):
            if left > right:
                values[j], values[j + 1] = right, left


class IntArray:
    """An integer array whose capacity starts at two and doubles when full."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._capacity = _INITIAL_CAPACITY

    @property
    def capacity(self) -> int:
        return self._capacity

    def push_back(self, value: int) -> None:
        """Append ``value``, doubling the capacity first if the array is full."""
        if self._capacity <= len(self._items):
            self._capacity *= 2
        self._items.append(value)

    def sort(self, sort_func: Callable[[list[int]], Any]) -> None:
        """Sort the stored values in place with ``sort_func``."""
        sort_func(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __repr__(self) -> str:
        return f"IntArray({self._items!r})"


class ArrayIterator(Generic[T]):
    """A position in a :class:`DynamicArray`; index ``-1`` marks the end."""

    def __init__(self, array: DynamicArray[T] | None = None,
                 data: list | None = None, index: int = -1) -> None:
        self._array = array
        self._data = data
        self.index = index
        self.valid = array is not None and index >= 0

    def _buffer_changed(self) -> bool:
        return self._array is None or self._array._data is not self._data

    def _check_dereference(self) -> None:
        if (self._buffer_changed() or self.index == -1 or not self.valid
                or self.index >= len(self._array)):
            raise InvalidIteratorError("iterator cannot be dereferenced")

    @property
    def value(self) -> T:
        self._check_dereference()
        return self._data[self.index]

    @value.setter
    def value(self, new_value: T) -> None:
        self._check_dereference()
        self._data[self.index] = new_value

    def increment(self) -> ArrayIterator[T]:
        """Advance to the next element; past the last element becomes end."""
        if self._buffer_changed() or self.index == -1:
            raise InvalidIteratorError("cannot advance this iterator")
        if len(self._array) - 1 == self.index:
            self.index = -1
        else:
            self.index += 1
        return self

    def decrement(self) -> ArrayIterator[T]:
        """Step back one element."""
        if self._buffer_changed():
            raise InvalidIteratorError("cannot step back this iterator")
        if len(self._array) == 0:
            self.index = -1
        else:
            self.index -= 1
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayIterator):
            return NotImplemented
        return self._data is other._data and self.index == other.index

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ArrayIterator(index={self.index}, valid={self.valid})"


class DynamicArray(Generic[T]):
    """A generic growable array with capacity doubling and iterators."""

    def __init__(self) -> None:
        self._data: list = [None] * _INITIAL_CAPACITY
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def push_back(self, value: T) -> None:
        """Append ``value``, doubling the capacity if the array is full."""
        if self.capacity <= self._count:
            self.resize(self._count * 2)
        self._data[self._count] = value
        self._count += 1

    def resize(self, capacity: int) -> None:
        """Move the elements into a new buffer of ``capacity`` slots.

        The new capacity must exceed the current one.
        """
        if capacity <= self.capacity:
            raise ValueError(
                f"new capacity {capacity} must exceed current capacity {self.capacity}"
            )
        new_data: list = [None] * capacity
        new_data[:self._count] = self._data[:self._count]
        self._data = new_data

    def clear(self) -> None:
        self._count = 0

    def begin(self) -> ArrayIterator[T]:
        if self._count == 0:
            return ArrayIterator(self, self._data, -1)
        return ArrayIterator(self, self._data, 0)

    def end(self) -> ArrayIterator[T]:
        return ArrayIterator(self, self._data, -1)

    def erase(self, position: ArrayIterator[T]) -> ArrayIterator[T]:
        """Remove the element at ``position`` and return an iterator to the
        element that took its place."""
        if (position._array is not self or position == self.end()
                or position.index >= self._count):
            raise InvalidIteratorError("iterator does not point into this array")
        idx = position.index
        self._data[idx:self._count - 1] = self._data[idx + 1:self._count]
        self._count -= 1
        position.valid = False
        return ArrayIterator(self, self._data, idx)

    def _normalize(self, index: int) -> int:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("array index out of range")
        return index

    def __getitem__(self, index: int) -> T:
        return self._data[self._normalize(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[self._normalize(index)] = value

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        yield from self._data[:self._count]

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r})"