"""Exception classes for linkeddeque."""


class DequeError(Exception):
    """Base exception for all linkeddeque errors."""


class InvalidArgumentError(DequeError, ValueError):
    """Raised when None is passed to add_first() or add_last()."""


class EmptyDequeError(DequeError, IndexError):
    """Raised when removing from an empty deque."""


class ExhaustedIteratorError(DequeError, StopIteration):
    """Raised when taking the next item from an iterator with nothing left."""


class UnsupportedOperationError(DequeError, TypeError):
    """Raised when attempting to mutate a deque through its iterator."""


class ConcurrentModificationError(DequeError, RuntimeError):
    """Raised by a fail-fast iterator when its deque was mutated after creation."""
