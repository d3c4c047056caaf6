"""Forward iteration over a Deque."""

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from linkeddeque.errors import (
    ConcurrentModificationError,
    ExhaustedIteratorError,
    UnsupportedOperationError,
)
from linkeddeque.linkedlist import Node

if TYPE_CHECKING:
    from linkeddeque.core import Deque

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DequeIterator(Generic[T]):
    """
    One-shot, read-only cursor over a deque, head to tail.

    The cursor follows live links from the head as it was when the iterator
    was created. Mutating the deque while the cursor is in use makes further
    reads unreliable, unless the deque was built with on_mutation="raise",
    in which case the next read raises ConcurrentModificationError.
    """

    __slots__ = ("_deque", "_current", "_expected_mutations")

    def __init__(self, deque: "Deque[T]") -> None:
        self._deque = deque
        self._current: Node[T] | None = deque._chain.first
        self._expected_mutations = deque._mutations

    def _check_mutations(self) -> None:
        if self._deque.on_mutation != "raise":
            return
        if self._deque._mutations != self._expected_mutations:
            logger.debug(
                "Deque %#x mutated during iteration (%d mutations since iterator creation)",
                id(self._deque),
                self._deque._mutations - self._expected_mutations,
            )
            raise ConcurrentModificationError("Deque mutated during iteration")

    def has_next(self) -> bool:
        """Return True if another item can be taken."""
        self._check_mutations()
        return self._current is not None

    def __next__(self) -> T:
        """Take the next item, head to tail."""
        self._check_mutations()
        node = self._current
        if node is None:
            raise ExhaustedIteratorError("No more items to return")
        self._current = node.next
        return node.item

    next = __next__

    def __iter__(self) -> "DequeIterator[T]":
        """Return the iterator itself."""
        return self

    def remove(self) -> None:
        """Not supported: the iterator cannot be used to modify the deque."""
        raise UnsupportedOperationError("This iterator cannot be used to modify the deque")
