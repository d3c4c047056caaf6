"""linkeddeque - Generic double-ended queue with O(1) operations at both ends."""

from linkeddeque.core import Deque
from linkeddeque.errors import (
    ConcurrentModificationError,
    DequeError,
    EmptyDequeError,
    ExhaustedIteratorError,
    InvalidArgumentError,
    UnsupportedOperationError,
)
from linkeddeque.iterator import DequeIterator
from linkeddeque.locked import LockedDeque
from linkeddeque.types import MutationPolicy

__version__ = "0.0.1"

__all__ = [
    "Deque",
    "DequeIterator",
    "LockedDeque",
    "DequeError",
    "InvalidArgumentError",
    "EmptyDequeError",
    "ExhaustedIteratorError",
    "UnsupportedOperationError",
    "ConcurrentModificationError",
    "MutationPolicy",
]
