"""A small in-place Timsort: insertion-sorted runs merged bottom-up."""

from __future__ import annotations

import heapq
from typing import List

MIN_RUN = 5


def insertion_sort(arr: List[int], left: int, right: int) -> None:
    """Sort ``arr[left..right]`` (inclusive) in place."""
    for i in range(left + 1, right + 1):
        item = arr[i]
        j = i - 1
        while j >= left and arr[j] > item:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = item


def merge(arr: List[int], left: int, mid: int, right: int) -> None:
    """Merge the sorted ranges ``arr[left..mid]`` and ``arr[mid+1..right]``."""
    arr[left : right + 1] = list(
        heapq.merge(arr[left : mid + 1], arr[mid + 1 : right + 1])
    )


def tim_sort(arr: List[int]) -> None:
    """Sort ``arr`` in place."""
    n = len(arr)
    for start in range(0, n, MIN_RUN):
        insertion_sort(arr, start, min(start + MIN_RUN - 1, n - 1))
    size = MIN_RUN
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            if mid < right:
                merge(arr, left, mid, right)
        size *= 2