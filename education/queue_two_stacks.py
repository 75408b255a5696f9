"""A first-in, first-out queue made of two stacks."""

from typing import Generic, Optional, TypeVar

from education.stack import Stack

T = TypeVar("T")


class Queue(Generic[T]):
    """Elements go in on one stack and come out of the other."""

    def __init__(self) -> None:
        self._inbox: Stack[T] = Stack()
        self._outbox: Stack[T] = Stack()

    def enqueue(self, elem: T) -> None:
        self._inbox.push(elem)

    def dequeue(self) -> Optional[T]:
        """Remove and return the oldest element, or None when empty."""
        if self._outbox.is_empty():
            while not self._inbox.is_empty():
                self._outbox.push(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __bool__(self) -> bool:
        return len(self) > 0