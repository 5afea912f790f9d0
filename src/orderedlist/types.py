"""Type definitions for orderedlist."""

from typing import Any, Callable, Protocol, TypeAlias


class Comparable(Protocol):
    """Anything usable with the natural order (supports ``<``)."""

    def __lt__(self, other: Any) -> bool: ...


# Three-way comparison: negative if a sorts first, zero if equal, positive otherwise
Comparator: TypeAlias = Callable[[Any, Any], int]
