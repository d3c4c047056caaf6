"""Basic usage example for linkeddeque."""

from linkeddeque import Deque, EmptyDequeError


def main() -> None:
    """Demonstrate adding, removing and iterating."""
    deque = Deque[str]()

    print("=== Basic Deque Example ===\n")

    deque.add_first("First String")
    deque.add_last("Last String")
    deque.add_first("Push First back one")
    deque.add_last("Push Last back one")
    print(f"Size after four adds: {deque.size()}")

    removed = deque.remove_last()
    print(f"Removed from tail: {removed}\n")

    for s in deque:
        print(f"  {s}")

    # Drain from the head
    while not deque.is_empty():
        deque.remove_first()

    try:
        deque.remove_first()
    except EmptyDequeError as exc:
        print(f"\nEmpty deque: {exc}")


if __name__ == "__main__":
    main()
