"""Tests for basic OrderedList insertion and access."""

import random

import pytest

from orderedlist import (
    EmptyCollectionError,
    IndexOutOfRangeError,
    OrderedList,
    case_insensitive,
    reverse_order,
)


def test_list_creation(check_invariants) -> None:
    """Test creating an empty list."""
    lst = OrderedList[int]()
    assert lst.size() == 0
    assert len(lst) == 0
    assert lst.is_empty()
    assert not lst
    assert list(lst) == []
    check_invariants(lst)


def test_insert_keeps_order(check_invariants) -> None:
    """Test inserting out-of-order values."""
    lst = OrderedList[int]()
    for value in [5, 3, 8, 1]:
        lst.insert(value)

    assert list(lst) == [1, 3, 5, 8]
    assert lst.size() == 4
    check_invariants(lst)


def test_insert_single_sets_both_boundaries() -> None:
    """Test that the first insert becomes both head and tail."""
    lst = OrderedList[int]()
    lst.insert(42)
    assert lst._head is lst._tail
    assert lst.get_first() == 42
    assert lst.get_last() == 42


def test_insert_front_back_and_interior(check_invariants) -> None:
    """Test each insertion position."""
    lst = OrderedList([10, 20])
    lst.insert(5)  # front
    lst.insert(30)  # back
    lst.insert(15)  # interior
    lst.insert(25)  # interior
    assert list(lst) == [5, 10, 15, 20, 25, 30]
    check_invariants(lst)


def test_insert_equal_to_head_goes_first() -> None:
    """Test that a value equal to the head is placed before it."""
    lst = OrderedList(["b", "c"], order=case_insensitive)
    lst.insert("B")
    assert list(lst) == ["B", "b", "c"]


def test_insert_equal_to_tail_goes_last() -> None:
    """Test that a value equal to the tail is placed after it."""
    lst = OrderedList(["a", "c"], order=case_insensitive)
    lst.insert("C")
    assert list(lst) == ["a", "c", "C"]


def test_insert_equal_in_interior_goes_before_match() -> None:
    """Test that an interior duplicate lands before the first equal value."""
    lst = OrderedList(["a", "b", "c"], order=case_insensitive)
    lst.insert("B")
    assert list(lst) == ["a", "B", "b", "c"]


def test_insert_descending_order(check_invariants) -> None:
    """Test inserting under a reversed comparator."""
    lst = OrderedList[int](order=reverse_order())
    for value in [2, 9, 4, 9, 1]:
        lst.insert(value)
    assert list(lst) == [9, 9, 4, 2, 1]
    check_invariants(lst)


def test_random_inserts_stay_sorted(check_invariants) -> None:
    """Test many random inserts, including duplicates."""
    rng = random.Random(42)
    lst = OrderedList[int]()
    values = []
    for _ in range(300):
        value = rng.randint(-50, 50)
        values.append(value)
        lst.insert(value)

    assert list(lst) == sorted(values)
    assert lst.size() == 300
    check_invariants(lst)


def test_get_round_trip() -> None:
    """Test that indexed access matches iteration from both directions."""
    lst = OrderedList([7, 3, 9, 1, 4, 4, 8])
    values = list(lst)
    assert [lst.get(i) for i in range(lst.size())] == values
    assert [lst[i] for i in range(len(lst))] == values
    assert list(reversed(lst)) == values[::-1]


def test_get_out_of_range() -> None:
    """Test that bad indices raise instead of clamping."""
    lst = OrderedList([1, 2, 3])
    with pytest.raises(IndexOutOfRangeError):
        lst.get(3)
    with pytest.raises(IndexOutOfRangeError):
        lst.get(-1)
    with pytest.raises(IndexError):
        lst[10]
    with pytest.raises(IndexOutOfRangeError):
        OrderedList[int]().get(0)


def test_get_first_and_last() -> None:
    """Test boundary access."""
    lst = OrderedList([4, 2, 6])
    assert lst.get_first() == 2
    assert lst.get_last() == 6


def test_get_first_and_last_on_empty() -> None:
    """Test boundary access on an empty list."""
    lst = OrderedList[int]()
    with pytest.raises(EmptyCollectionError):
        lst.get_first()
    with pytest.raises(EmptyCollectionError):
        lst.get_last()


def test_contains_uses_order_equality() -> None:
    """Test that membership compares with the order, not identity or ==."""
    lst = OrderedList(["Apple", "banana"], order=case_insensitive)
    assert lst.contains("apple")
    assert "BANANA" in lst
    assert not lst.contains("cherry")
    assert not OrderedList[str]().contains("x")


def test_order_property() -> None:
    """Test that the comparator is exposed read-only."""
    lst = OrderedList[str](order=case_insensitive)
    assert lst.order is case_insensitive
    with pytest.raises(AttributeError):
        lst.order = reverse_order()  # type: ignore[misc]


def test_repr_and_str() -> None:
    """Test text forms of the list."""
    lst = OrderedList([3, 1, 2])
    assert repr(lst) == "OrderedList([1, 2, 3])"
    assert str(lst) == "1 <=> 2 <=> 3"
    assert str(OrderedList[int]()) == "List is empty."
