"""Exception classes for orderedlist."""


class OrderedListError(Exception):
    """Base exception for all orderedlist errors."""


class EmptyCollectionError(OrderedListError, IndexError):
    """Raised when reading or removing a boundary value of an empty list."""


class NotFoundError(OrderedListError, ValueError):
    """Raised when a value to remove is not present in the list."""


class IndexOutOfRangeError(OrderedListError, IndexError):
    """Raised when an index falls outside ``[0, len(list))``."""
