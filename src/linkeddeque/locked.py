"""Deque guarded by a lock for use from multiple threads."""

import threading
from collections.abc import Iterable
from typing import Generic, TypeVar

from linkeddeque.core import Deque
from linkeddeque.iterator import DequeIterator

T = TypeVar("T")


class LockedDeque(Generic[T]):
    """
    Deque whose every operation runs under a single lock.

    Iteration walks a private copy of the chain taken under the lock, so it
    never observes mutations made by other threads while it is in progress.
    """

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._lock = threading.Lock()
        self._deque = Deque[T](iterable)

    def is_empty(self) -> bool:
        """Return True if the deque holds no items."""
        with self._lock:
            return self._deque.is_empty()

    def size(self) -> int:
        """Return the number of items in the deque."""
        with self._lock:
            return self._deque.size()

    def add_first(self, item: T) -> None:
        """Insert item at the head."""
        with self._lock:
            self._deque.add_first(item)

    def add_last(self, item: T) -> None:
        """Insert item at the tail."""
        with self._lock:
            self._deque.add_last(item)

    def remove_first(self) -> T:
        """Remove and return the item at the head."""
        with self._lock:
            return self._deque.remove_first()

    def remove_last(self) -> T:
        """Remove and return the item at the tail."""
        with self._lock:
            return self._deque.remove_last()

    def snapshot(self) -> list[T]:
        """Return a copy of the items, head to tail."""
        with self._lock:
            return self._deque.snapshot()

    def iterate(self) -> DequeIterator[T]:
        """Return an iterator over a copy of the items taken under the lock."""
        with self._lock:
            copy = Deque[T](self._deque.snapshot())
        return copy.iterate()

    def __iter__(self) -> DequeIterator[T]:
        """Return an iterator over a copy of the items."""
        return self.iterate()

    def __len__(self) -> int:
        """Return the number of items in the deque."""
        return self.size()

    def __bool__(self) -> bool:
        """Return True if the deque is non-empty."""
        return not self.is_empty()

    def __repr__(self) -> str:
        """Return a repr listing the items, head to tail."""
        return f"{type(self).__name__}({self.snapshot()!r})"
