"""A queue with three priority levels, served highest first."""

from enum import IntEnum
from typing import Generic, Optional, TypeVar

from education.queue_two_stacks import Queue

T = TypeVar("T")


class Priority(IntEnum):
    """Priority levels, ordered from lowest to highest."""

    LOW = 0
    NORMAL = 1
    HIGH = 2


class PQueue(Generic[T]):
    """One FIFO queue per priority; higher priorities are served first."""

    def __init__(self) -> None:
        self._queues: dict[Priority, Queue[T]] = {p: Queue() for p in Priority}

    def enqueue(self, priority: Priority, elem: T) -> None:
        self._queues[Priority(priority)].enqueue(elem)

    def dequeue(self) -> Optional[T]:
        """Remove the oldest element of the highest non-empty level, or None."""
        for priority in sorted(Priority, reverse=True):
            queue = self._queues[priority]
            if queue:
                return queue.dequeue()
        return None

    def __len__(self) -> int:
        return sum(len(queue) for queue in self._queues.values())