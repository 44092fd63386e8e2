"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


def _swap(stack: deque) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _push(source: deque, target: deque) -> None:
    if source:
        target.appendleft(source.popleft())


def _rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its first element."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        _swap(self.a)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        _swap(self.b)

    def ss(self) -> None:
        """Swap the top two of both stacks."""
        _swap(self.a)
        _swap(self.b)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.b, self.a)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.a, self.b)

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b)

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _reverse_rotate(self.a)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _reverse_rotate(self.b)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)

    def apply(self, operation: str) -> None:
        """Perform the operation with the given name."""
        if operation not in OPERATIONS:
            raise ValueError(f"unknown operation {operation!r}")
        getattr(self, operation)()