import pytest

from dsakit.doubly_linked import (
    XORList,
    build_doubly,
    doubly_values,
    reverse_doubly,
    sorted_insert,
)


def _backward(head):
    node = head
    while node is not None and node.next is not None:
        node = node.next
    values = []
    while node is not None:
        values.append(node.value)
        node = node.prev
    return values


def test_build_round_trip_and_back_links():
    values = [1, 2, 3, 4]
    head = build_doubly(values)
    assert doubly_values(head) == values
    assert _backward(head) == values[::-1]
    assert head.prev is None


def test_sorted_insert_keeps_order_and_links():
    head = None
    inserted = [5, 1, 9, 3, 5, 0, 12]
    for value in inserted:
        head = sorted_insert(head, value)
    assert doubly_values(head) == sorted(inserted)
    assert _backward(head) == sorted(inserted, reverse=True)
    assert head.prev is None


@pytest.mark.parametrize("value", [0, 2, 3, 4, 10])
def test_sorted_insert_positions(value):
    base = [2, 4, 6]
    head = sorted_insert(build_doubly(base), value)
    assert doubly_values(head) == sorted(base + [value])
    assert _backward(head) == sorted(base + [value], reverse=True)


def test_reverse_doubly():
    values = [1, 2, 3, 4, 5]
    head = reverse_doubly(build_doubly(values))
    assert doubly_values(head) == values[::-1]
    assert _backward(head) == values
    assert head.prev is None


def test_reverse_trivial_chains():
    assert reverse_doubly(None) is None
    single = build_doubly([7])
    assert reverse_doubly(single) is single


def test_xor_list_worked_example():
    xl = XORList()
    assert list(xl) == []
    for value in range(5):
        xl.add(value)
    assert list(xl) == [0, 1, 2, 3, 4]
    assert [xl.get(i) for i in range(5)] == [0, 1, 2, 3, 4]
    with pytest.raises(IndexError):
        xl.get(5)
    xl.remove(5)
    xl.remove(0)
    assert list(xl) == [1, 2, 3, 4]
    xl.remove(2)
    xl.remove(4)
    assert list(xl) == [1, 2, 4]
    assert len(xl) == 3


def test_xor_list_remove_last_and_all():
    xl = XORList([1, 2, 3])
    xl.remove(2)
    assert list(xl) == [1, 2]
    xl.add(9)
    assert list(xl) == [1, 2, 9]
    for _ in range(3):
        xl.remove(0)
    assert list(xl) == []
    assert len(xl) == 0


def test_xor_list_negative_index():
    xl = XORList([1, 2])
    with pytest.raises(IndexError):
        xl.get(-1)
    xl.remove(-1)
    assert list(xl) == [1, 2]