"""Doubly-linked nodes and the merge sort that runs directly on their links."""

from typing import Generic, TypeVar

from orderedlist.types import Comparator

T = TypeVar("T")


class Node(Generic[T]):
    """A node in the doubly-linked chain."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None


def split(node: Node[T] | None, count: int) -> Node[T] | None:
    """
    Cut a chain after its first ``count`` nodes. O(count).

    Both sides of the cut are null-terminated.

    Args:
        node: Head of the chain to cut (may be None)
        count: Number of nodes to keep in the first part, at least 1

    Returns:
        Head of the second part, or None if the chain holds ``count``
        nodes or fewer and no cut was made
    """
    if node is None:
        return None
    for _ in range(count - 1):
        if node.next is None:
            return None
        node = node.next
    rest = node.next
    if rest is None:
        return None
    node.next = None
    rest.prev = None
    return rest


def merge(
    a: Node[T] | None,
    b: Node[T] | None,
    order: Comparator,
) -> tuple[Node[T] | None, Node[T] | None]:
    """
    Merge two sorted, null-terminated chains into one sorted chain.

    On a tie the node from ``a`` goes first, so merging keeps the relative
    order of equal values. Every ``prev`` link is rewritten to the node's
    predecessor in the result.

    Returns:
        Tuple of (head, tail) of the merged chain
    """
    head: Node[T] | None = None
    tail: Node[T] | None = None

    while a is not None and b is not None:
        if order(a.value, b.value) <= 0:
            taken, a = a, a.next
        else:
            taken, b = b, b.next
        taken.prev = tail
        if tail is None:
            head = taken
        else:
            tail.next = taken
        tail = taken

    # At most one side has nodes left and they are already in order
    rest = a if a is not None else b
    if rest is not None:
        rest.prev = tail
        if tail is None:
            head = rest
        else:
            tail.next = rest
        while rest.next is not None:
            rest = rest.next
        tail = rest

    if tail is not None:
        tail.next = None
    return head, tail


def merge_sort(
    head: Node[T] | None,
    order: Comparator,
) -> tuple[Node[T] | None, Node[T] | None]:
    """
    Sort a chain in place with a bottom-up merge sort. O(n log n).

    Adjacent runs of width 1, 2, 4, ... are merged left to right until a
    single run remains. Equal values keep their original relative order.

    Returns:
        Tuple of (head, tail) of the sorted chain
    """
    if head is None or head.next is None:
        return head, head

    width = 1
    while True:
        remaining: Node[T] | None = head
        head = tail = None
        runs = 0

        while remaining is not None:
            left = remaining
            right = split(left, width)
            remaining = split(right, width)
            run_head, run_tail = merge(left, right, order)
            runs += 1

            if tail is None:
                head = run_head
            else:
                tail.next = run_head
                if run_head is not None:
                    run_head.prev = tail
            tail = run_tail

        if runs == 1:
            return head, tail
        width *= 2
