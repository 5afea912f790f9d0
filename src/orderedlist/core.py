"""Main OrderedList implementation."""

import logging
from typing import Generic, Iterable, Iterator, TypeVar

from orderedlist.errors import EmptyCollectionError, IndexOutOfRangeError, NotFoundError
from orderedlist.formatting import render
from orderedlist.linkedlist import Node, merge_sort
from orderedlist.ordering import natural_order
from orderedlist.types import Comparator

T = TypeVar("T")

logger = logging.getLogger(__name__)


class OrderedList(Generic[T]):
    """
    Doubly-linked list that keeps its values in non-decreasing order.

    Values are positioned by a three-way comparator fixed at construction.
    Insertion at either end is O(1), interior insertion and value lookups are
    O(n), and indexed access walks from whichever end is closer.
    """

    def __init__(
        self,
        iterable: Iterable[T] | None = None,
        *,
        order: Comparator = natural_order,
    ) -> None:
        """
        Initialize the list.

        Args:
            iterable: Optional values to start with. Read once; the values
                are linked in source order and then merge sorted, which keeps
                equal values in their source order.
            order: Comparator returning negative, zero or positive.
                Defaults to the natural ``<`` ordering.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        self._order = order
        if iterable is not None:
            self._build(iterable)

    @property
    def order(self) -> Comparator:
        """The comparator this list is ordered by."""
        return self._order

    def _build(self, iterable: Iterable[T]) -> None:
        """Link values in source order, then sort the chain in place."""
        for value in iterable:
            self._link_last(Node(value))
            self._size += 1
        self._head, self._tail = merge_sort(self._head, self._order)
        logger.debug("Built and sorted chain of %d nodes", self._size)

    def insert(self, value: T) -> None:
        """
        Insert a value at its ordered position.

        A value equal to the current first value is placed before it. In the
        interior, the value goes before the first node that does not sort
        before it.
        """
        node = Node(value)
        if self._head is None:
            self._head = self._tail = node
        elif self._order(self._head.value, value) >= 0:
            self._link_first(node)
        elif self._order(self._tail.value, value) <= 0:  # type: ignore[union-attr]
            self._link_last(node)
        else:
            self._link_interior(node)
        self._size += 1

    def _link_first(self, node: Node[T]) -> None:
        """Link node before the head. O(1)."""
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node

    def _link_last(self, node: Node[T]) -> None:
        """Link node after the tail. O(1)."""
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def _link_interior(self, node: Node[T]) -> None:
        """Link node before the first node that does not sort before it."""
        # The head sorts before node and the tail after it, so the scan stops
        # strictly inside the chain.
        curr = self._head.next  # type: ignore[union-attr]
        while self._order(curr.value, node.value) < 0:  # type: ignore[union-attr]
            curr = curr.next  # type: ignore[union-attr]
        node.next = curr
        node.prev = curr.prev  # type: ignore[union-attr]
        curr.prev.next = node  # type: ignore[union-attr]
        curr.prev = node  # type: ignore[union-attr]

    def remove_first(self) -> T:
        """
        Remove and return the first value.

        Raises:
            EmptyCollectionError: If the list is empty
        """
        if self._head is None:
            raise EmptyCollectionError("Cannot remove from an empty list")
        return self._unlink(self._head)

    def remove_last(self) -> T:
        """
        Remove and return the last value.

        Raises:
            EmptyCollectionError: If the list is empty
        """
        if self._tail is None:
            raise EmptyCollectionError("Cannot remove from an empty list")
        return self._unlink(self._tail)

    def remove_at(self, index: int) -> T:
        """
        Remove and return the value at ``index``.

        Raises:
            IndexOutOfRangeError: If index is outside ``[0, len(self))``
        """
        return self._unlink(self._node_at(index))

    def remove_identical(self, value: T) -> bool:
        """
        Remove the first node holding this exact object (compared with ``is``).

        Returns:
            True once the node is removed

        Raises:
            EmptyCollectionError: If the list is empty
            NotFoundError: If no node holds ``value``
        """
        if self._head is None:
            raise EmptyCollectionError("Cannot remove from an empty list")
        curr = self._head
        while curr is not None and curr.value is not value:
            curr = curr.next
        if curr is None:
            raise NotFoundError(f"{value!r} is not in the list")
        self._unlink(curr)
        return True

    def remove_matching(self, value: T) -> bool:
        """
        Remove the first node whose value compares equal to ``value`` under the order.

        Returns:
            True once the node is removed

        Raises:
            EmptyCollectionError: If the list is empty
            NotFoundError: If no value compares equal
        """
        if self._head is None:
            raise EmptyCollectionError("Cannot remove from an empty list")
        curr = self._find(value)
        if curr is None:
            raise NotFoundError(f"No value comparing equal to {value!r} in the list")
        self._unlink(curr)
        return True

    def _unlink(self, node: Node[T]) -> T:
        """Remove a node from the chain, repairing neighbours and size. O(1)."""
        prev = node.prev
        nxt = node.next
        if prev is None and nxt is None:
            self._head = None
            self._tail = None
        elif prev is None:
            self._head = nxt
            nxt.prev = None  # type: ignore[union-attr]
        elif nxt is None:
            self._tail = prev
            prev.next = None
        else:
            prev.next = nxt
            nxt.prev = prev
        node.prev = None
        node.next = None
        self._size -= 1
        return node.value

    def clear(self) -> None:
        """Remove every value, detaching each node's links."""
        node = self._head
        while node is not None:
            nxt = node.next
            node.prev = None
            node.next = None
            node = nxt
        logger.debug("Cleared %d nodes", self._size)
        self._head = None
        self._tail = None
        self._size = 0

    def _node_at(self, index: int) -> Node[T]:
        """Find the node at ``index``, walking from the nearer end."""
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(
                f"Index {index} out of range for list of size {self._size}"
            )
        if index < (self._size >> 1):
            node = self._head
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def _find(self, value: T) -> Node[T] | None:
        """Return the first node comparing equal to ``value``, or None."""
        node = self._head
        while node is not None and self._order(node.value, value) != 0:
            node = node.next
        return node

    def get(self, index: int) -> T:
        """
        Return the value at ``index``.

        Raises:
            IndexOutOfRangeError: If index is outside ``[0, len(self))``
        """
        return self._node_at(index).value

    def get_first(self) -> T:
        """Return the first (lowest) value. Raises EmptyCollectionError if empty."""
        if self._head is None:
            raise EmptyCollectionError("Cannot get the first value of an empty list")
        return self._head.value

    def get_last(self) -> T:
        """Return the last (highest) value. Raises EmptyCollectionError if empty."""
        if self._tail is None:
            raise EmptyCollectionError("Cannot get the last value of an empty list")
        return self._tail.value

    def contains(self, value: T) -> bool:
        """Return True if some value compares equal to ``value`` under the order."""
        return self._find(value) is not None

    def size(self) -> int:
        """Return the number of values in the list."""
        return self._size

    def is_empty(self) -> bool:
        """Return True if the list holds no values."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"OrderedList({list(self)!r})"

    def __str__(self) -> str:
        return render(self)
