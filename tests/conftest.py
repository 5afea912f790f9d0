"""Shared fixtures for orderedlist tests."""

from typing import Any, Callable

import pytest

from orderedlist import OrderedList


def _assert_chain_consistent(lst: OrderedList[Any]) -> None:
    """Walk the internal chain and check sortedness, links, boundaries and size."""
    head, tail = lst._head, lst._tail
    if lst._size == 0:
        assert head is None
        assert tail is None
        return

    assert head is not None and tail is not None
    assert head.prev is None
    assert tail.next is None

    count = 0
    prev = None
    node = head
    while node is not None:
        assert node.prev is prev
        if prev is not None:
            assert prev.next is node
            assert lst.order(prev.value, node.value) <= 0
        prev = node
        node = node.next
        count += 1

    assert prev is tail
    assert count == lst._size


@pytest.fixture
def check_invariants() -> Callable[[OrderedList[Any]], None]:
    """Return a checker asserting the list's chain invariants."""
    return _assert_chain_consistent
