"""Replacing values by their rank in sorted order."""

from __future__ import annotations

from collections.abc import Sequence


def index_mapping(values: Sequence[int]) -> list[int]:
    """Return, for each value, its position among the values sorted ascending."""
    ranks: dict[int, int] = {}
    for position, value in enumerate(sorted(values)):
        ranks.setdefault(value, position)
    return [ranks[value] for value in values]