"""Type definitions for linkeddeque."""

from typing import Literal, TypeAlias, TypeVar

# Generic type variable for stored items
T = TypeVar("T")

# Policy for iterators that observe a mutation of their deque
MutationPolicy: TypeAlias = Literal["ignore", "raise"]

MUTATION_POLICIES: tuple[MutationPolicy, ...] = ("ignore", "raise")
