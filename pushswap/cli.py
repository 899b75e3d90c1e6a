"""Command line: read integers, print the operations that sort them."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from .parsing import InputError, parse_arguments
from .radix import radix_sort
from .ranking import rank_values
from .stacks import Stacks


def build_stack(args: Iterable[str]) -> List[int]:
    """Return stack ``a`` top first: each value read is pushed on top of the previous."""
    return list(reversed(parse_arguments(args)))


def solve(args: Iterable[str]) -> List[str]:
    """Return the operations that sort the values given in ``args``."""
    stacks = Stacks(rank_values(build_stack(args)))
    return radix_sort(stacks)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; print ``Error`` for invalid input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] == "":
        return 1
    try:
        operations = solve(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    for operation in operations:
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())