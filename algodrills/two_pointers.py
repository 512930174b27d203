"""Two-pointer techniques over arrays and strings."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def two_pointer_ex(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of two elements of a sorted sequence summing to target, or None."""
    left, right = 0, len(nums) - 1
    while left < right:
        total = nums[left] + nums[right]
        if total == target:
            return left, right
        if total < target:
            left += 1
        else:
            right -= 1
    return None


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeros to the end in place, keeping the order of other elements."""
    write = 0
    for read, value in enumerate(nums):
        if value != 0:
            nums[write] = value
            if read != write:
                nums[read] = 0
            write += 1


def is_subsequence(s: str, t: str) -> bool:
    """Return True if s can be obtained from t by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def max_area(height: Sequence[int]) -> int:
    """Largest water area between two lines of the given heights."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def max_operations(nums: Sequence[int], k: int) -> int:
    """Maximum number of disjoint pairs summing to k."""
    values = sorted(nums)
    left, right = 0, len(values) - 1
    pairs = 0
    while left < right:
        total = values[left] + values[right]
        if total < k:
            left += 1
        elif total > k:
            right -= 1
        else:
            pairs += 1
            left += 1
            right -= 1
    return pairs