"""Main Deque implementation."""

from collections.abc import Iterable
from typing import Generic, TypeVar

from linkeddeque.errors import InvalidArgumentError
from linkeddeque.iterator import DequeIterator
from linkeddeque.linkedlist import Node, NodeChain
from linkeddeque.types import MUTATION_POLICIES, MutationPolicy

T = TypeVar("T")


class Deque(Generic[T]):
    """
    Double-ended queue with O(1) insertion and removal at both ends.

    Backed by a doubly-linked node chain. None cannot be stored. The deque
    is not synchronized; see LockedDeque for shared use across threads.
    """

    def __init__(
        self,
        iterable: Iterable[T] = (),
        *,
        on_mutation: MutationPolicy = "ignore",
    ) -> None:
        """
        Initialize the deque.

        Args:
            iterable: Items appended to the tail in order.
            on_mutation: What an iterator does when the deque is mutated after
                the iterator was created:
                - "ignore": keep following live links (default, unreliable)
                - "raise": raise ConcurrentModificationError on the next read

        Raises:
            ValueError: If on_mutation is not a known policy
            InvalidArgumentError: If iterable yields None
        """
        if on_mutation not in MUTATION_POLICIES:
            raise ValueError(f"Unknown mutation policy: {on_mutation!r}")
        self._chain = NodeChain[T]()
        self._mutations = 0
        self.on_mutation: MutationPolicy = on_mutation
        for item in iterable:
            self.add_last(item)

    def is_empty(self) -> bool:
        """Return True if the deque holds no items."""
        return self._chain.size == 0

    def size(self) -> int:
        """Return the number of items in the deque."""
        return self._chain.size

    def add_first(self, item: T) -> None:
        """
        Insert item at the head. O(1).

        Raises:
            InvalidArgumentError: If item is None
        """
        if item is None:
            raise InvalidArgumentError("This deque does not accept None")
        self._chain.push_front(item)
        self._mutations += 1

    def add_last(self, item: T) -> None:
        """
        Insert item at the tail. O(1).

        Raises:
            InvalidArgumentError: If item is None
        """
        if item is None:
            raise InvalidArgumentError("This deque does not accept None")
        self._chain.push_back(item)
        self._mutations += 1

    def remove_first(self) -> T:
        """
        Remove and return the item at the head. O(1).

        Raises:
            EmptyDequeError: If the deque is empty
        """
        node = self._chain.pop_front()
        self._mutations += 1
        return node.item

    def remove_last(self) -> T:
        """
        Remove and return the item at the tail. O(1).

        Raises:
            EmptyDequeError: If the deque is empty
        """
        node = self._chain.pop_back()
        self._mutations += 1
        return node.item

    def iterate(self) -> DequeIterator[T]:
        """Return a new iterator over the items, head to tail."""
        return DequeIterator(self)

    def __iter__(self) -> DequeIterator[T]:
        """Return a new iterator over the items, head to tail."""
        return DequeIterator(self)

    def snapshot(self) -> list[T]:
        """Return a copy of the items, head to tail. O(n)."""
        return [node.item for node in self._chain.nodes()]

    def check_invariants(self) -> None:
        """
        Walk the chain in both directions and assert its structural invariants. O(n).

        Raises:
            AssertionError: Naming the first invariant found broken
        """
        chain = self._chain
        if chain.size < 0:
            raise AssertionError(f"negative size {chain.size}")
        if chain.size == 0:
            if chain.first is not None or chain.last is not None:
                raise AssertionError("empty deque has a first or last node")
            return
        if chain.first is None or chain.last is None:
            raise AssertionError(f"deque of size {chain.size} lacks a first or last node")
        if chain.first.prev is not None:
            raise AssertionError("first node has a prev link")
        if chain.last.next is not None:
            raise AssertionError("last node has a next link")

        forward: list[Node[T]] = []
        node = chain.first
        while node is not None:
            if node.item is None:
                raise AssertionError("None stored in the deque")
            if node.next is not None and node.next.prev is not node:
                raise AssertionError("next/prev links disagree")
            forward.append(node)
            if len(forward) > chain.size:
                raise AssertionError(f"forward walk exceeds size {chain.size}")
            node = node.next
        if len(forward) != chain.size:
            raise AssertionError(f"forward walk found {len(forward)} nodes, size is {chain.size}")
        if forward[-1] is not chain.last:
            raise AssertionError("forward walk does not end at last node")

        backward: list[Node[T]] = []
        node = chain.last
        while node is not None and len(backward) <= chain.size:
            backward.append(node)
            node = node.prev
        backward.reverse()
        if len(backward) != len(forward) or any(a is not b for a, b in zip(forward, backward)):
            raise AssertionError("backward walk is not the inverse of the forward walk")

    def __len__(self) -> int:
        """Return the number of items in the deque."""
        return self._chain.size

    def __bool__(self) -> bool:
        """Return True if the deque is non-empty."""
        return self._chain.size > 0

    def __repr__(self) -> str:
        """Return a repr listing the items, head to tail."""
        return f"{type(self).__name__}({self.snapshot()!r})"
