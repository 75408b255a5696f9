"""Classic in-place sorting algorithms over a mutable sequence."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Sort(Generic[T]):
    """Sorts the wrapped sequence in place, one algorithm per method.

    Every method sorts ``data`` ascending, prints the algorithm's name with
    the result and returns the same sequence object.
    """

    def __init__(self, data: MutableSequence[T]) -> None:
        self.data = data

    def __repr__(self) -> str:
        return f"Sort({self.data!r})"

    def _report(self, label: str) -> MutableSequence[T]:
        print(f"{label} {list(self.data)!r}")
        return self.data

    def bubble(self) -> MutableSequence[T]:
        data = self.data
        end = len(data)
        swapped = True
        while swapped and end > 1:
            swapped = False
            for j in range(end - 1):
                if data[j] > data[j + 1]:
                    data[j], data[j + 1] = data[j + 1], data[j]
                    swapped = True
            end -= 1
        return self._report("Bubble Sort")

    def selection(self) -> MutableSequence[T]:
        data = self.data
        size = len(data)
        for i in range(size):
            min_idx = min(range(i, size), key=data.__getitem__)
            data[i], data[min_idx] = data[min_idx], data[i]
        return self._report("Selection Sort")

    def insertion(self) -> MutableSequence[T]:
        data = self.data
        for i in range(1, len(data)):
            j = i
            while j > 0 and data[j] < data[j - 1]:
                data[j], data[j - 1] = data[j - 1], data[j]
                j -= 1
        return self._report("Insertion Sort")

    def heapsort(self) -> MutableSequence[T]:
        data = self.data
        size = len(data)
        for i in reversed(range(size // 2)):
            _sift_down(data, size, i)
        for end in reversed(range(1, size)):
            data[0], data[end] = data[end], data[0]
            _sift_down(data, end, 0)
        return self._report("Heapsort")

    def quicksort(self) -> MutableSequence[T]:
        _quicksort(self.data, 0, len(self.data) - 1)
        return self._report("Quicksort")

    def mergesort(self) -> MutableSequence[T]:
        _mergesort(self.data, 0, len(self.data) - 1)
        return self._report("Mergesort")


def _sift_down(data: MutableSequence[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def _quicksort(data: MutableSequence[Any], left: int, right: int) -> None:
    if left >= right:
        return
    p = _partition(data, left, right)
    _quicksort(data, left, p - 1)
    _quicksort(data, p + 1, right)


def _partition(data: MutableSequence[Any], left: int, right: int) -> int:
    pivot = data[right]
    i = left - 1
    for j in range(left, right + 1):
        if data[j] > pivot:
            continue
        i += 1
        data[i], data[j] = data[j], data[i]
    return i


def _mergesort(data: MutableSequence[Any], left: int, right: int) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _mergesort(data, left, mid)
    _mergesort(data, mid + 1, right)
    _merge(data, left, mid, right)


def _merge(data: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    merged = []
    a, b = left, mid + 1
    while a <= mid and b <= right:
        if data[a] < data[b]:
            merged.append(data[a])
            a += 1
        else:
            merged.append(data[b])
            b += 1
    merged.extend(data[a : mid + 1])
    merged.extend(data[b : right + 1])
    data[left : right + 1] = merged


def gen_arr(length: int) -> list[int]:
    """Return ``length`` random integers, each in ``range(length)``."""
    return [random.randrange(length) for _ in range(length)]