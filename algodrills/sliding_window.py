"""Fixed and variable sliding-window problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import islice

from sortedcontainers import SortedSet

_VOWELS = frozenset("aeiou")


def _check_window(nums: Sequence[int], k: int) -> None:
    if len(nums) < k:
        raise ValueError("Array length is less than k")


def sliding_window_ex(nums: Sequence[int], k: int) -> int:
    """Largest sum of any k consecutive elements."""
    _check_window(nums, k)
    window = sum(nums[:k])
    best = window
    for incoming, outgoing in zip(islice(nums, k, None), nums):
        window += incoming - outgoing
        best = max(best, window)
    return best


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Largest average of any k consecutive elements."""
    if k < 1:
        raise ValueError("k must be positive")
    return sliding_window_ex(nums, k) / k


def max_vowels(s: str, k: int) -> int:
    """Most vowels in any substring of length k; 0 when s is shorter than k."""
    if len(s) < k:
        return 0
    count = sum(c in _VOWELS for c in s[:k])
    best = count
    for incoming, outgoing in zip(s[k:], s):
        count += (incoming in _VOWELS) - (outgoing in _VOWELS)
        best = max(best, count)
    return best


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of 1s in a binary array after flipping at most k zeros."""
    best = left = zeros = 0
    for right, value in enumerate(nums):
        zeros += 1 - value
        while zeros > k:
            zeros -= 1 - nums[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def longest_subarray(nums: Iterable[int]) -> int:
    """Longest run of 1s left after deleting exactly one element of a binary array."""
    previous, current, best = -1, 0, 0
    for value in nums:
        if value == 1:
            best = max(best, current + previous + 1)
            current += 1
        elif value == 0:
            best = max(best, current + previous)
            previous, current = current, 0
        else:
            raise ValueError(f"expected 0 or 1, got {value!r}")
    return best


def contains_nearby_almost_duplicate(nums: Sequence[int], k: int, t: int) -> bool:
    """Return True if two indices at most k apart hold values at most t apart."""
    window: SortedSet = SortedSet()
    for i, value in enumerate(nums):
        nearest = next(iter(window.irange(minimum=value - t)), None)
        if nearest is not None and nearest <= value + t:
            return True
        window.add(value)
        if i >= k:
            window.discard(nums[i - k])
    return False