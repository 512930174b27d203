"""Problems solved with hash maps and hash sets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from math import gcd


def find_difference(nums1: Iterable[int], nums2: Iterable[int]) -> list[list[int]]:
    """Distinct values only in nums1, and distinct values only in nums2, each sorted."""
    set1, set2 = set(nums1), set(nums2)
    return [sorted(set1 - set2), sorted(set2 - set1)]


def unique_occurrences(arr: Iterable[int]) -> bool:
    """Return True if every value occurs a different number of times."""
    counts = Counter(arr).values()
    return len(counts) == len(set(counts))


def close_strings(word1: str, word2: str) -> bool:
    """Return True if one word can become the other by swapping characters
    and by exchanging all occurrences of two existing characters."""
    if len(word1) != len(word2):
        return False
    counts1, counts2 = Counter(word1), Counter(word2)
    if counts1.keys() != counts2.keys():
        return False
    return sorted(counts1.values()) == sorted(counts2.values())


def equal_pairs(grid: Sequence[Sequence[int]]) -> int:
    """Number of (row, column) pairs holding the same values in the same order."""
    rows = Counter(tuple(row) for row in grid)
    return sum(rows[column] for column in zip(*grid))


def max_points(points: Iterable[Sequence[int]]) -> int:
    """Largest number of the given distinct points lying on one straight line."""
    remaining = sorted((p[0], p[1]) for p in points)
    best = 0
    while remaining:
        x0, y0 = remaining.pop()
        slopes: Counter[tuple[int, int]] = Counter()
        for x1, y1 in remaining:
            dx, dy = x0 - x1, y0 - y1
            divisor = gcd(dx, dy)
            slopes[(dx // divisor, dy // divisor)] += 1
        best = max(best, max(slopes.values(), default=best))
        if best > len(remaining) // 2:
            break
    return best + 1