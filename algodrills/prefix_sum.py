"""Prefix-sum problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def prefix_sum_ex(nums: Sequence[int], i: int, j: int) -> int:
    """Sum of nums[i] through nums[j] inclusive, using prefix sums."""
    if not 0 <= i or j >= len(nums):
        raise IndexError(f"range [{i}, {j}] is outside the sequence")
    prefix = list(accumulate(nums, initial=0))
    return prefix[j + 1] - prefix[i]


def largest_altitude(gain: Iterable[int]) -> int:
    """Highest altitude reached starting from 0 and applying each gain."""
    return max(accumulate(gain, initial=0))


def pivot_index(nums: Sequence[int]) -> int:
    """Leftmost index whose left and right sums are equal, or -1."""
    remaining = sum(nums)
    left = 0
    for i, value in enumerate(nums):
        if left == remaining - left - value:
            return i
        left += value
    return -1