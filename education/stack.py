"""A last-in, first-out stack built on singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    elem: T
    next: Optional[_Node[T]] = None


class Stack(Generic[T]):
    """A stack whose iteration runs from the top down."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        if items is not None:
            self.extend(items)

    def push(self, elem: T) -> None:
        """Put ``elem`` on top."""
        self._head = _Node(elem, self._head)
        self._size += 1

    def pop(self) -> Optional[T]:
        """Remove and return the top element, or None when empty."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.elem

    def is_empty(self) -> bool:
        return self._head is None

    def extend(self, items: Iterable[T]) -> None:
        """Push each of ``items`` in turn."""
        for item in items:
            self.push(item)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.elem
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"