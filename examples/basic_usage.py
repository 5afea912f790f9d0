"""Basic usage example for orderedlist."""

from orderedlist import EmptyCollectionError, OrderedList


def main() -> None:
    """Demonstrate basic list operations."""
    print("=== Inserting values ===\n")
    numbers = OrderedList[int]()
    for value in [5, 3, 8, 1]:
        numbers.insert(value)
        print(f"  insert({value}) -> {numbers}")

    print(f"\nSize: {numbers.size()}")
    print(f"First: {numbers.get_first()}, last: {numbers.get_last()}")
    print(f"Value at index 2: {numbers.get(2)}")
    print(f"Contains 3? {numbers.contains(3)}\n")

    print("=== Removing values ===\n")
    print(f"  remove_at(1) -> {numbers.remove_at(1)}")
    print(f"  remove_first() -> {numbers.remove_first()}")
    print(f"  remove_last() -> {numbers.remove_last()}")
    print(f"  remaining: {numbers}\n")

    numbers.clear()
    print(f"After clear: {numbers}")
    try:
        numbers.remove_first()
    except EmptyCollectionError as exc:
        print(f"  remove_first() on empty list: {exc}")


if __name__ == "__main__":
    main()
