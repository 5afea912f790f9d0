"""orderedlist - Doubly-linked list that keeps its values sorted under a pluggable order."""

from orderedlist.core import OrderedList
from orderedlist.errors import (
    EmptyCollectionError,
    IndexOutOfRangeError,
    NotFoundError,
    OrderedListError,
)
from orderedlist.formatting import render
from orderedlist.ordering import case_insensitive, natural_order, reverse_order
from orderedlist.types import Comparable, Comparator

__version__ = "0.0.1"

__all__ = [
    "OrderedList",
    "OrderedListError",
    "EmptyCollectionError",
    "IndexOutOfRangeError",
    "NotFoundError",
    "render",
    "natural_order",
    "case_insensitive",
    "reverse_order",
    "Comparable",
    "Comparator",
]
