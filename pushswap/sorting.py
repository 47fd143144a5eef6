"""Sorting stack a with the puzzle's operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from io import StringIO

from .stack import Stacks, is_sorted, to_ranks

# Moves that bring the element at a given depth of a five-element stack a
# (then a four-element one) to the top before it is pushed onto b.
_ZERO_MOVES = {
    0: (),
    1: ("sa",),
    2: ("ra", "ra"),
    3: ("rra", "rra"),
    4: ("rra",),
}
_ONE_MOVES = {
    0: (),
    1: ("sa",),
    2: ("ra", "ra"),
    3: ("rra",),
}


def _replace_by_ranks(stacks: Stacks) -> None:
    stacks.a = deque(to_ranks(list(stacks.a)))


def sort_three(stacks: Stacks, smallest: int, median: int, greatest: int) -> None:
    """Order the three elements of stack a, known to be the given values.

    Nothing is done when the top is none of the three values. A stack
    already in order is not recognised and gets ``sa`` then ``ra``.
    """
    a = stacks.a
    top = a[0]
    if top == greatest:
        second_is_smallest = a[1] == smallest
        stacks.ra()
        if not second_is_smallest:
            stacks.sa()
    elif top == median:
        if a[1] == smallest:
            stacks.sa()
        else:
            stacks.rra()
    elif top == smallest:
        stacks.sa()
        stacks.ra()


def sort_four(stacks: Stacks) -> None:
    """Order stack a holding the ranks 0 to 3."""
    top = stacks.a[0]
    if top == 0:
        stacks.pb()
        sort_three(stacks, 1, 2, 3)
        stacks.pa()
    elif top == 1:
        stacks.pb()
        sort_three(stacks, 0, 2, 3)
        stacks.pa()
        stacks.sa()
    elif top == 2:
        stacks.sa()
        sort_four(stacks)
    elif top == 3:
        stacks.pb()
        sort_three(stacks, 0, 1, 2)
        stacks.pa()
        stacks.ra()


def _push_rank(stacks: Stacks, rank: int, moves: dict[int, tuple[str, ...]]) -> None:
    values = list(stacks.a)
    if rank not in values:
        return
    depth = values.index(rank)
    if depth not in moves:
        return
    for name in moves[depth]:
        getattr(stacks, name)()
    stacks.pb()


def sort_five(stacks: Stacks) -> None:
    """Order stack a holding the ranks 0 to 4."""
    _push_rank(stacks, 0, _ZERO_MOVES)
    _push_rank(stacks, 1, _ONE_MOVES)
    sort_three(stacks, 2, 3, 4)
    stacks.pa()
    stacks.pa()


def sort_small(stacks: Stacks) -> None:
    """Replace stack a by its ranks and order it when it holds 2 to 5 values."""
    _replace_by_ranks(stacks)
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks, 0, 1, 2)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)


def sort_big(stacks: Stacks) -> None:
    """Replace stack a by its ranks and order it with a binary radix sort."""
    _replace_by_ranks(stacks)
    size = len(stacks.a)
    max_rank = size - 1
    bit = 0
    while max_rank >> bit:
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()
        bit += 1


def solve(values: Iterable[int]) -> list[str]:
    """The operations that sort ``values``; none when already sorted."""
    items = list(values)
    if is_sorted(items):
        return []
    stacks = Stacks(items, StringIO())
    if len(items) <= 5:
        sort_small(stacks)
    else:
        sort_big(stacks)
    return stacks.operations