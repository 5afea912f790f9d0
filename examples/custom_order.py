"""Example building lists under custom orderings."""

from orderedlist import OrderedList, case_insensitive, reverse_order


def main() -> None:
    """Demonstrate bulk construction with different comparators."""
    fruit = ["banana", "Apple", "cherry", "apple"]

    print("=== Natural order ===")
    print(f"  {OrderedList(fruit)}\n")

    print("=== Case-insensitive order ===")
    # Equal keys ("Apple", "apple") keep their source order
    print(f"  {OrderedList(fruit, order=case_insensitive)}\n")

    print("=== Descending order ===")
    scores = OrderedList([72, 95, 88, 95, 60], order=reverse_order())
    print(f"  {scores}")
    print(f"  top score: {scores.get_first()}")


if __name__ == "__main__":
    main()
