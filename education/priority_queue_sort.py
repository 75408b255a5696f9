"""A single queue whose elements carry a priority."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from education.priority_queue import Priority
from education.queue_two_stacks import Queue

T = TypeVar("T")


@dataclass
class _Entry(Generic[T]):
    priority: Priority
    value: T


class PQueueSort(Generic[T]):
    """Stores each value with its priority; values leave in arrival order."""

    def __init__(self) -> None:
        self._queue: Queue[_Entry[T]] = Queue()

    def enqueue(self, priority: Priority, value: T) -> None:
        self._queue.enqueue(_Entry(Priority(priority), value))

    def dequeue(self) -> Optional[T]:
        """Remove and return the oldest value, or None when empty."""
        entry = self._queue.dequeue()
        return None if entry is None else entry.value

    def __len__(self) -> int:
        return len(self._queue)