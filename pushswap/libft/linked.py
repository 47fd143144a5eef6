"""A singly linked list of arbitrary items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list that keeps a pointer to its last node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, item: Any) -> None:
        """Add ``item`` after the last node."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def appendleft(self, item: Any) -> None:
        """Add ``item`` before the first node."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Content of the last node, or None for an empty list."""
        return None if self._tail is None else self._tail.content

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every item, first to last."""
        for item in self:
            func(item)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``func(item)`` for every item, in order."""
        return LinkedList(func(item) for item in self)

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each item to ``release`` first."""
        node = self._head
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following
        self._head = None
        self._tail = None
        self._size = 0