"""Selection of order statistics by partitioning."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest element (k = 1 is the maximum)."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]


def _partition(values: list[int], left: int, right: int) -> int:
    pivot = values[right]
    store = left
    for j in range(left, right):
        if values[j] <= pivot:
            values[store], values[j] = values[j], values[store]
            store += 1
    values[store], values[right] = values[right], values[store]
    return store


def quick_select(nums: Sequence[int], k: int) -> int:
    """Return the element at index k of the ascending order, by quickselect."""
    if not 0 <= k < len(nums):
        raise ValueError(f"k must be between 0 and {len(nums) - 1}, got {k}")
    values = list(nums)
    left, right = 0, len(values) - 1
    while left < right:
        pivot_index = _partition(values, left, right)
        if k == pivot_index:
            return values[k]
        if k < pivot_index:
            right = pivot_index - 1
        else:
            left = pivot_index + 1
    return values[left]