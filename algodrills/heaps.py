"""Priority-queue problems: an infinite set, subsequence scores and hiring costs."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


class SmallestInfiniteSet:
    """The set of all positive integers, supporting pop-smallest and add-back."""

    def __init__(self) -> None:
        self._next = 1
        self._returned: list[int] = []
        self._members: set[int] = set()

    def pop_smallest(self) -> int:
        """Remove and return the smallest integer in the set."""
        if self._returned:
            value = heapq.heappop(self._returned)
            self._members.discard(value)
            return value
        self._next += 1
        return self._next - 1

    def add_back(self, num: int) -> None:
        """Put num back into the set if it had been popped."""
        if num < self._next and num not in self._members:
            self._members.add(num)
            heapq.heappush(self._returned, num)


def max_score(nums1: Sequence[int], nums2: Sequence[int], k: int) -> int:
    """Largest (sum of chosen nums1) * (min of chosen nums2) over k chosen indices."""
    if len(nums1) != len(nums2):
        raise ValueError("nums1 and nums2 must have the same length")
    if not 1 <= k <= len(nums1):
        raise ValueError(f"k must be between 1 and {len(nums1)}, got {k}")

    pairs = sorted(zip(nums1, nums2), key=lambda pair: pair[1], reverse=True)
    heap = [first for first, _ in pairs[:k]]
    heapq.heapify(heap)
    total = sum(heap)
    best = total * pairs[k - 1][1]
    for first, second in pairs[k:]:
        if first > heap[0]:
            total += first - heapq.heapreplace(heap, first)
            best = max(best, total * second)
    return best


def total_cost(costs: Sequence[int], k: int, candidates: int) -> int:
    """Total cost of hiring k workers, each round taking the cheapest of the first
    and last `candidates` remaining workers, preferring the front on ties."""
    n = len(costs)
    if not 1 <= k <= n:
        raise ValueError(f"k must be between 1 and {n}, got {k}")
    if candidates < 1:
        raise ValueError("candidates must be positive")

    if 2 * candidates + k > n:
        return sum(heapq.nsmallest(k, costs))

    front = list(costs[:candidates])
    back = list(costs[n - candidates:])
    heapq.heapify(front)
    heapq.heapify(back)
    i, j = candidates, n - candidates - 1
    total = 0
    for _ in range(k):
        if front[0] <= back[0]:
            total += heapq.heapreplace(front, costs[i])
            i += 1
        else:
            total += heapq.heapreplace(back, costs[j])
            j -= 1
    return total