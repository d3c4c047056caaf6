"""Randomized operation sequences checked against a list model."""

import random

import pytest

from linkeddeque import Deque, EmptyDequeError, InvalidArgumentError

_OPERATIONS = ("add_first", "add_last", "remove_first", "remove_last", "add_none")


def _run_sequence(seed: int, steps: int) -> None:
    rng = random.Random(seed)
    deque = Deque[int]()
    model: list[int] = []
    adds = removes = 0

    for step in range(steps):
        op = rng.choice(_OPERATIONS)
        if op == "add_first":
            deque.add_first(step)
            model.insert(0, step)
            adds += 1
        elif op == "add_last":
            deque.add_last(step)
            model.append(step)
            adds += 1
        elif op == "add_none":
            with pytest.raises(InvalidArgumentError):
                deque.add_last(None)  # type: ignore[arg-type]
        elif not model:
            with pytest.raises(EmptyDequeError):
                getattr(deque, op)()
        elif op == "remove_first":
            assert deque.remove_first() == model.pop(0)
            removes += 1
        else:
            assert deque.remove_last() == model.pop()
            removes += 1

        deque.check_invariants()
        assert deque.size() == adds - removes == len(model)
        assert deque.is_empty() == (deque.size() == 0)
        assert list(deque) == model


@pytest.mark.parametrize("seed", range(20))
def test_random_sequences_match_model(seed: int) -> None:
    """Test random operation sequences keep size, order and invariants."""
    _run_sequence(seed, steps=200)


@pytest.mark.parametrize("size", [0, 1, 2, 5])
def test_round_trip_at_each_end(size: int) -> None:
    """Test add then remove at the same end restores any prior state."""
    deque = Deque(range(1, size + 1))
    before = deque.snapshot()

    deque.add_first(99)
    assert deque.remove_first() == 99
    assert deque.snapshot() == before

    deque.add_last(99)
    assert deque.remove_last() == 99
    assert deque.snapshot() == before
    deque.check_invariants()


def test_drain_from_alternating_ends() -> None:
    """Test draining by alternating ends visits items outside-in."""
    deque = Deque(range(6))
    drained = []
    while deque:
        drained.append(deque.remove_first())
        if deque:
            drained.append(deque.remove_last())
        deque.check_invariants()
    assert drained == [0, 5, 1, 4, 2, 3]
    assert deque.is_empty()


def test_check_invariants_detects_broken_links() -> None:
    """Test the invariant checker notices an inconsistent chain."""
    deque = Deque([1, 2, 3])
    chain = deque._chain
    assert chain.last is not None
    chain.last.prev = chain.first
    with pytest.raises(AssertionError, match="links disagree"):
        deque.check_invariants()


def test_check_invariants_detects_wrong_size() -> None:
    """Test the invariant checker notices a size mismatch."""
    deque = Deque([1, 2])
    deque._chain.size = 3
    with pytest.raises(AssertionError, match="forward walk found 2 nodes"):
        deque.check_invariants()
