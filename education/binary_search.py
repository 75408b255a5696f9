"""Binary search over a sorted sequence."""

from collections.abc import Sequence
from typing import Any, Optional


def binary_search(arr: Sequence[Any], elem: Any) -> Optional[int]:
    """Return an index of ``elem`` in the sorted ``arr``, or None if absent."""
    if not arr or elem > arr[-1] or elem < arr[0]:
        return None

    left, right = 0, len(arr)
    while left < right:
        mid = (right - left) // 2 + left
        current = arr[mid]
        if elem < current:
            right = mid
        elif elem > current:
            left = mid + 1
        else:
            return mid
    return None