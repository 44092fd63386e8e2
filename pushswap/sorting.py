"""Choosing the operations that sort stack ``a``."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from pushswap.libft.conversion import INT_MAX
from pushswap.mapping import index_mapping
from pushswap.parsing import is_sorted
from pushswap.stacks import Stacks


def _require_length(ranks: Sequence[int], length: int) -> None:
    if len(ranks) != length:
        raise ValueError(f"expected {length} values, got {len(ranks)}")


def max_bits(value: int) -> int:
    """Return the number of bits needed to write the non-negative ``value``."""
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    return value.bit_length()


def sort_three(ranks: Sequence[int]) -> list[str]:
    """Return the operations that sort three values on ``a``."""
    _require_length(ranks, 3)
    a, b, c = ranks
    if a > b and b < c and a < c:
        return ["sa"]
    if a > b and b > c:
        return ["sa", "rra"]
    if a > b and b < c and a > c:
        return ["ra"]
    if a < b and b > c and a < c:
        return ["sa", "ra"]
    if a < b and b > c and a > c:
        return ["rra"]
    return []


def sort_four(ranks: Sequence[int]) -> list[str]:
    """Bring the minimum to the top, push it, order the rest and push it back.

    The three-value pattern is read from ``ranks[1:4]`` when the minimum is
    first and from ``ranks[0:3]`` otherwise.
    """
    _require_length(ranks, 4)
    min_idx = min(range(4), key=ranks.__getitem__)
    moves = {0: [], 1: ["ra"], 2: ["ra", "ra"], 3: ["rra"]}[min_idx]
    rest = ranks[1:4] if min_idx < 1 else ranks[0:3]
    return [*moves, "pb", *sort_three(rest), "pa"]


def find_two_min(ranks: Sequence[int]) -> tuple[Optional[int], Optional[int]]:
    """Return the positions of the smallest and second smallest values.

    Values equal to the 32-bit maximum are never selected; a position that is
    not found is None.
    """
    min1 = min2 = INT_MAX
    idx1: Optional[int] = None
    idx2: Optional[int] = None
    for position, value in enumerate(ranks):
        if value < min1:
            min2, idx2 = min1, idx1
            min1, idx1 = value, position
        elif value < min2:
            min2, idx2 = value, position
    return idx1, idx2


def sort_five(ranks: Sequence[int]) -> list[str]:
    """Push two values to ``b``, order the three left from ``ranks[2:5]``, push back."""
    _require_length(ranks, 5)
    return ["ra", "pb", "ra", "pb", *sort_three(ranks[2:5]), "pa", "pa"]


def sort_small(ranks: Sequence[int]) -> list[str]:
    """Return fixed operation sequences for two to five values; nothing otherwise."""
    length = len(ranks)
    if length == 2:
        return ["ra"]
    if length == 3:
        return sort_three(ranks)
    if length == 4:
        return sort_four(ranks)
    if length == 5:
        return sort_five(ranks)
    return []


def radix_sort(ranks: Sequence[int]) -> list[str]:
    """Sort ranks ``0..n-1`` by binary radix, one bit per pass."""
    if not ranks:
        return []
    stacks = Stacks(ranks)
    operations: list[str] = []

    def perform(operation: str) -> None:
        stacks.apply(operation)
        operations.append(operation)

    for bit in range(max_bits(len(ranks) - 1)):
        for _ in range(len(ranks)):
            perform("pb" if (stacks.a[0] >> bit) & 1 == 0 else "ra")
        while stacks.b:
            perform("pa")
    return operations


def solve(values: Sequence[int]) -> list[str]:
    """Return the operations that sort ``values``; none if they are already sorted."""
    if is_sorted(values):
        return []
    ranks = index_mapping(values)
    if len(ranks) <= 5:
        return sort_small(ranks)
    return radix_sort(ranks)