"""Replacing values by their position in sorted order."""

from __future__ import annotations

from typing import Dict, Iterable, List


def rank_values(values: Iterable[int]) -> List[int]:
    """Return, for each value, its index in the ascending sorted order.

    Equal values share the index of their first sorted occurrence.
    """
    items = list(values)
    first_position: Dict[int, int] = {}
    for position, value in enumerate(sorted(items)):
        first_position.setdefault(value, position)
    return [first_position[value] for value in items]