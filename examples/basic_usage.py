"""Basic usage example for linkedseq."""

from linkedseq import OutOfRangeError, SequentialList


def main() -> None:
    """Demonstrate basic list operations."""
    lst = SequentialList[str]()

    print("=== Building a list ===\n")
    lst.append("b")
    lst.append("d")
    lst.insert_at(0, "a")
    lst.insert_at(2, "c")
    print(f"Values: {lst}")
    print(f"Size: {lst.size()}\n")

    print("=== Lookups ===\n")
    print(f"get(2) -> {lst.get(2)!r}")
    print(f"index_of('d') -> {lst.index_of('d')}")
    print(f"contains('z') -> {lst.contains('z')}\n")

    print("=== Bounds checking ===\n")
    try:
        lst.get(lst.size())
    except OutOfRangeError as e:
        print(f"  get({e.index}) failed: {e}\n")

    print("=== Copies are independent ===\n")
    dup = lst.copy()
    dup.remove_value("a")
    print(f"Original: {lst}")
    print(f"Copy:     {dup}")


if __name__ == "__main__":
    main()
