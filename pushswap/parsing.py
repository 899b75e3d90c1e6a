"""Reading stack values from command-line arguments."""

from __future__ import annotations

from typing import Iterable, List

from .text import atoi, split


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of stack values."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def check_duplicates(values: Iterable[int]) -> List[int]:
    """Return ``values`` as a list, raising :class:`InputError` if any value repeats."""
    seen = set()
    result = []
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value {value}")
        seen.add(value)
        result.append(value)
    return result


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Parse space-separated integers from every argument, in reading order.

    A token that is not a valid 32-bit integer reads as zero, and zero is
    rejected, as is any repeated value.
    """
    values: List[int] = []
    seen = set()
    for arg in args:
        for token in split(arg, " "):
            number = atoi(token)
            if number in seen:
                raise InputError(f"duplicate value {number}")
            seen.add(number)
            if number == 0:
                raise InputError(f"invalid value {token!r}")
            values.append(number)
    return values