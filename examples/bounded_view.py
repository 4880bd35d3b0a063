"""BoundedView example: the declared capacity is recorded but not enforced."""

from linkedseq import BoundedView


def main() -> None:
    """Demonstrate the wrapper's forwarding behavior."""
    view = BoundedView[int](2)

    for value in (10, 20, 30):
        view.add(value)
        print(f"Added {value}: {view}")

    view.add(0, 5)
    print(f"\nAfter add(0, 5): {view.get_values()}")
    print(f"Declared capacity: {view.get_capacity()}, stored: {view.get_values().size()}")

    snapshot = view.get_values()
    snapshot.clear()
    print(f"\nCleared snapshot, view still holds: {view.get_values()}")


if __name__ == "__main__":
    main()
