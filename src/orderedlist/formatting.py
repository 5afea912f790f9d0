"""Text rendering of list contents."""

from typing import Iterable

DEFAULT_DELIMITER = " <=> "
EMPTY_MESSAGE = "List is empty."


def render(
    values: Iterable[object],
    delimiter: str = DEFAULT_DELIMITER,
    empty: str = EMPTY_MESSAGE,
) -> str:
    """
    Render values in iteration order.

    Args:
        values: Values to render, read once
        delimiter: Separator placed between consecutive values
        empty: Text returned when there are no values

    Returns:
        The ``str()`` of each value joined by ``delimiter``, or ``empty``
    """
    parts = [str(value) for value in values]
    if not parts:
        return empty
    return delimiter.join(parts)
