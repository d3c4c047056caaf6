"""Doubly-linked node chain tracking head, tail and size for O(1) end operations."""

from collections.abc import Iterator
from typing import Generic, TypeVar

from linkeddeque.errors import EmptyDequeError

T = TypeVar("T")


class Node(Generic[T]):
    """A node in the chain. `next` points toward the tail, `prev` toward the head."""

    __slots__ = ("item", "prev", "next")

    def __init__(self, item: T) -> None:
        self.item = item
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None


class NodeChain(Generic[T]):
    """
    Doubly-linked chain without sentinels.

    `first` and `last` are None exactly when the chain is empty. Nodes are
    created by the push methods and detached by the pop methods only.
    """

    def __init__(self) -> None:
        self.first: Node[T] | None = None
        self.last: Node[T] | None = None
        self.size = 0

    def push_front(self, item: T) -> Node[T]:
        """Link a new node holding item as the head. O(1)."""
        node = Node(item)
        old_first = self.first
        node.next = old_first
        if old_first is None:
            self.last = node
        else:
            old_first.prev = node
        self.first = node
        self.size += 1
        return node

    def push_back(self, item: T) -> Node[T]:
        """Link a new node holding item as the tail. O(1)."""
        node = Node(item)
        old_last = self.last
        node.prev = old_last
        if old_last is None:
            self.first = node
        else:
            old_last.next = node
        self.last = node
        self.size += 1
        return node

    def pop_front(self) -> Node[T]:
        """Detach and return the head node with its links cleared. O(1)."""
        node = self.first
        if node is None:
            raise EmptyDequeError("Cannot remove from an empty deque")
        self.first = node.next
        self.size -= 1
        if self.first is None:
            self.last = None
        else:
            self.first.prev = None
        node.next = None
        return node

    def pop_back(self) -> Node[T]:
        """Detach and return the tail node with its links cleared. O(1)."""
        node = self.last
        if node is None:
            raise EmptyDequeError("Cannot remove from an empty deque")
        self.last = node.prev
        self.size -= 1
        if self.last is None:
            self.first = None
        else:
            self.last.next = None
        node.prev = None
        return node

    def nodes(self) -> Iterator[Node[T]]:
        """Yield nodes head to tail by following live `next` links."""
        node = self.first
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        """Return the number of nodes in the chain."""
        return self.size

    def __bool__(self) -> bool:
        """Return True if the chain is non-empty."""
        return self.size > 0
