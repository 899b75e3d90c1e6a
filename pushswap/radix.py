"""Binary radix sort of ranked values using only stack operations."""

from __future__ import annotations

from typing import Iterable, List

from .stacks import Stacks


def find_max_index(indices: Iterable[int]) -> int:
    """Return the largest index; raise ValueError when there is none."""
    items = list(indices)
    if not items:
        raise ValueError("no indices given")
    return max(items)


def calculate_max_bits(value: int) -> int:
    """Return the number of bits needed to write a non-negative ``value``."""
    if value < 0:
        raise ValueError("value must not be negative")
    return value.bit_length()


def radix_sort(stacks: Stacks) -> List[str]:
    """Sort the ranks in ``stacks.a`` ascending from the top.

    Each pass over a bit sends values with that bit clear to ``b`` and
    rotates the rest, then brings ``b`` back. Returns the operations used.
    """
    start = len(stacks.operations)
    if not stacks.a:
        return []
    max_index = find_max_index(stacks.a)
    size = max_index + 1
    for bit in range(calculate_max_bits(max_index)):
        for _ in range(size):
            if not stacks.a:
                continue
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()
    return stacks.operations[start:]