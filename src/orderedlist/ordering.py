"""Ordering rules accepted by OrderedList."""

from orderedlist.types import Comparable, Comparator


def natural_order(a: Comparable, b: Comparable) -> int:
    """Compare two values by their natural ``<`` ordering."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def case_insensitive(a: str, b: str) -> int:
    """
    Compare two strings ignoring case.

    Both sides are casefolded first, so "Apple" and "apple" compare equal and
    "Apple" sorts before "banana".
    """
    return natural_order(a.casefold(), b.casefold())


def reverse_order(order: Comparator = natural_order) -> Comparator:
    """Return a comparator that sorts in the opposite direction of ``order``."""

    def reversed_order(a: object, b: object) -> int:
        return order(b, a)

    return reversed_order
