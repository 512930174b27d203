"""Binary search and its variations."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

_MAX_SPEED = 1_000_000_000


def guess(num: int, pick: int) -> int:
    """Answer a guess: 0 if right, -1 if num is too high, 1 if too low."""
    if num == pick:
        return 0
    return -1 if num > pick else 1


def guess_number(n: int, pick: int) -> int:
    """Find pick in 1..n using only the guess oracle."""
    low, high = 1, n
    while low < high:
        mid = low + (high - low) // 2
        answer = guess(mid, pick)
        if answer == 1:
            low = mid + 1
        elif answer == 0:
            return mid
        else:
            high = mid
    return high


def search_rotate_array(nums: Sequence[int], target: int) -> int | None:
    """Index of target in a rotated ascending array, or None."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target <= nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return None


def successful_pairs(spells: Iterable[int], potions: Iterable[int], success: int) -> list[int]:
    """For each spell, how many potions give a product of at least success."""
    ordered = sorted(potions)
    return [
        len(ordered) - bisect_left(ordered, success, key=lambda potion: spell * potion)
        for spell in spells
    ]


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an element not smaller than its right neighbour, found by bisection."""
    if not nums:
        raise ValueError("nums must not be empty")
    left, right = 0, len(nums) - 1
    while left < right:
        middle = left + (right - left) // 2
        if nums[middle] > nums[middle + 1]:
            right = middle
        else:
            left = middle + 1
    return left


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Smallest whole eating speed that finishes all piles within h hours."""
    left, right = 1, _MAX_SPEED
    while left < right:
        mid = left + (right - left) // 2
        hours = sum((pile + mid - 1) // mid for pile in piles)
        if hours > h:
            left = mid + 1
        else:
            right = mid
    return left