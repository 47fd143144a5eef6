"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence
from typing import TextIO


class Stacks:
    """Stack ``a``, filled with ``values``, and an empty stack ``b``.

    The top of each stack is its first element. Every operation is written
    to ``out``, one name per line, and recorded in ``operations``.
    """

    def __init__(self, values: Iterable[int], out: TextIO | None = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.out = out if out is not None else sys.stdout
        self.operations: list[str] = []

    def _record(self, name: str) -> None:
        self.operations.append(name)
        self.out.write(name + "\n")

    def sa(self) -> None:
        """Swap the two top elements of stack a."""
        if len(self.a) < 2:
            raise IndexError("sa needs at least two elements in stack a")
        first = self.a.popleft()
        second = self.a.popleft()
        self.a.appendleft(first)
        self.a.appendleft(second)
        self._record("sa")

    def ra(self) -> None:
        """Move the top of stack a to its bottom."""
        if len(self.a) < 2:
            raise IndexError("ra needs at least two elements in stack a")
        self.a.rotate(-1)
        self._record("ra")

    def rra(self) -> None:
        """Move the bottom of stack a to its top."""
        if len(self.a) < 2:
            raise IndexError("rra needs at least two elements in stack a")
        self.a.rotate(1)
        self._record("rra")

    def pa(self) -> None:
        """Move the top of stack b onto stack a."""
        if not self.b:
            raise IndexError("pa needs a non-empty stack b")
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of stack a onto stack b."""
        if not self.a:
            raise IndexError("pb needs a non-empty stack a")
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def describe(self) -> str:
        """Stack a from top to bottom, each value followed by its rank."""
        values = list(self.a)
        ranks = to_ranks(values)
        parts = [f"{value} ({rank})  -> " for value, rank in zip(values, ranks)]
        return "".join(parts) + "NULL\n"


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values are in strictly increasing order."""
    items = list(values)
    return all(low < high for low, high in zip(items, items[1:]))


def to_ranks(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in the sorted order."""
    order = {value: rank for rank, value in enumerate(sorted(values))}
    if len(order) != len(values):
        raise ValueError("values must be distinct")
    return [order[value] for value in values]