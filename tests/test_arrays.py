import pytest

from containerkit.arrays import (
    ArrayIterator,
    DynamicArray,
    IntArray,
    InvalidIteratorError,
    bubble_sort,
)


def _filled(values):
    arr = DynamicArray()
    for v in values:
        arr.push_back(v)
    return arr


def test_int_array_starts_empty_with_capacity_two():
    arr = IntArray()
    assert len(arr) == 0
    assert arr.capacity == 2


def test_int_array_push_back_keeps_order_and_grows():
    arr = IntArray()
    values = [5, -1, 7, 3, 9]
    for v in values:
        arr.push_back(v)
    assert list(arr) == values
    assert arr.capacity >= len(arr)
    assert arr[2] == 7


def test_int_array_capacity_doubles():
    arr = IntArray()
    for v in range(3):
        arr.push_back(v)
    assert arr.capacity == 4


def test_int_array_index_out_of_range():
    arr = IntArray()
    arr.push_back(1)
    assert arr[0] == 1
    with pytest.raises(IndexError):
        _ = arr[1]
    assert len(arr) == 1
    assert list(arr) == [1]


def test_int_array_sort_with_bubble_sort_worked_example():
    arr = IntArray()
    for v in range(10, -1, -1):
        arr.push_back(v)
    arr.sort(bubble_sort)
    assert [arr[i] for i in range(10)] == list(range(10))
    assert list(arr) == sorted(range(11))


def test_int_array_sort_with_custom_function():
    arr = IntArray()
    values = [3, 1, 2, 8]
    for v in values:
        arr.push_back(v)
    arr.sort(lambda items: items.sort(reverse=True))
    assert list(arr) == sorted(values, reverse=True)


@pytest.mark.parametrize("values", [[], [1], [2, 1], [4, 4, 1, 9, -3, 0]])
def test_bubble_sort_sorts_in_place(values):
    data = list(values)
    bubble_sort(data)
    assert data == sorted(values)


def test_dynamic_array_push_and_iterate():
    arr = _filled(["a", "b", "c"])
    assert list(arr) == ["a", "b", "c"]
    assert len(arr) == 3
    assert arr.capacity == 4


def test_dynamic_array_resize_smaller_raises():
    arr = DynamicArray()
    with pytest.raises(ValueError):
        arr.resize(2)


def test_dynamic_array_resize_keeps_data():
    arr = _filled([1, 2])
    arr.resize(10)
    assert arr.capacity == 10
    assert list(arr) == [1, 2]


def test_dynamic_array_setitem_and_getitem():
    arr = _filled([1, 2, 3])
    arr[1] = 20
    assert arr[1] == 20
    assert arr[-1] == 3
    with pytest.raises(IndexError):
        arr[3] = 0


def test_iterator_walks_all_elements():
    values = [10, 20, 30, 40]
    arr = _filled(values)
    it = arr.begin()
    seen = []
    while it != arr.end():
        seen.append(it.value)
        it.increment()
    assert seen == values


def test_begin_equals_end_when_empty():
    arr = DynamicArray()
    assert arr.begin() == arr.end()


def test_iterator_value_assignment_updates_array():
    arr = _filled([1, 2])
    it = arr.begin()
    it.value = 99
    assert arr[0] == 99


def test_iterator_invalidated_by_reallocation():
    arr = _filled([1, 2])
    it = arr.begin()
    arr.push_back(3)
    with pytest.raises(InvalidIteratorError):
        it.value
    with pytest.raises(InvalidIteratorError):
        it.increment()
    with pytest.raises(InvalidIteratorError):
        it.decrement()


def test_increment_end_iterator_raises():
    arr = _filled([1])
    it = arr.end()
    with pytest.raises(InvalidIteratorError):
        it.increment()


def test_dereference_end_raises():
    arr = _filled([1])
    with pytest.raises(InvalidIteratorError):
        arr.end().value


def test_default_iterator_is_invalid():
    with pytest.raises(InvalidIteratorError):
        ArrayIterator().value


def test_decrement_moves_back():
    arr = _filled([1, 2, 3])
    it = arr.begin()
    it.increment().increment()
    assert it.value == 3
    it.decrement()
    assert it.value == 2


def test_erase_middle_returns_next_element():
    arr = _filled([1, 2, 3, 4])
    it = arr.begin()
    it.increment()
    nxt = arr.erase(it)
    assert nxt.value == 3
    assert list(arr) == [1, 3, 4]
    with pytest.raises(InvalidIteratorError):
        it.value


def test_erase_end_raises():
    arr = _filled([1, 2])
    with pytest.raises(InvalidIteratorError):
        arr.erase(arr.end())


def test_erase_foreign_iterator_raises():
    arr = _filled([1, 2])
    other = _filled([1, 2])
    with pytest.raises(InvalidIteratorError):
        arr.erase(other.begin())


def test_erase_all_through_iterators():
    arr = _filled([5, 6, 7])
    while len(arr):
        arr.erase(arr.begin())
    assert list(arr) == []
    assert arr.begin() == arr.end()


def test_clear_empties_array():
    arr = _filled([1, 2, 3])
    arr.clear()
    assert len(arr) == 0
    assert list(arr) == []
    assert arr.begin() == arr.end()