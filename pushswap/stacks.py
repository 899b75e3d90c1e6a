"""The two stacks of the puzzle and the operations that move values between them."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, List, Optional


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of every operation performed.

    An operation that cannot change its stack (swapping or rotating fewer than
    two values) does nothing and is not logged. The combined operations log
    each single operation that took effect, followed by their own name.
    """

    def __init__(self, a: Optional[Iterable[Any]] = None, b: Optional[Iterable[Any]] = None) -> None:
        self.a: deque = deque(a or ())
        self.b: deque = deque(b or ())
        self.operations: List[str] = []

    def _record(self, name: str) -> None:
        self.operations.append(name)

    @staticmethod
    def _swap(stack: deque) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque, step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    def sa(self) -> None:
        """Swap the top two values of ``a``."""
        if self._swap(self.a):
            self._record("sa")

    def sb(self) -> None:
        """Swap the top two values of ``b``."""
        if self._swap(self.b):
            self._record("sb")

    def ss(self) -> None:
        """Swap the top two values of both stacks."""
        self.sa()
        self.sb()
        self._record("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            raise IndexError("pa: stack b is empty")
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            raise IndexError("pb: stack a is empty")
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a, -1):
            self._record("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b, -1):
            self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self.ra()
        self.rb()
        self._record("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._rotate(self.a, 1):
            self._record("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._rotate(self.b, 1):
            self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self.rra()
        self.rrb()
        self._record("rrr")