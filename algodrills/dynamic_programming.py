"""Dynamic programming problems: sequences, paths, strings and trading."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

_MODULUS = 10**9 + 7


def tribonacci(n: int) -> int:
    """The n-th tribonacci number, with T0 = 0 and T1 = T2 = 1."""
    if n == 0:
        return 0
    if n in (1, 2):
        return 1
    a, b, c = 0, 1, 1
    for _ in range(2, n):
        a, b, c = b, c, a + b + c
    return c


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top step, starting on step 0 or 1 and climbing 1 or 2."""
    if len(cost) < 2:
        raise ValueError("cost must hold at least two steps")
    before, last = cost[0], cost[1]
    for step in cost[2:]:
        before, last = last, min(before, last) + step
    return min(before, last)


def fib(n: int) -> int:
    """The n-th Fibonacci number; values below 2 are returned unchanged."""
    if n < 2:
        return n
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def climb_stairs(n: int) -> int:
    """Ways to climb n steps taking 1 or 2 at a time."""
    if n <= 2:
        return n
    a, b = 1, 2
    for _ in range(2, n):
        a, b = b, a + b
    return b


def rob(nums: Sequence[int]) -> int:
    """Largest total from houses where no two robbed houses are adjacent."""
    if not nums:
        raise ValueError("nums must not be empty")
    best, previous = nums[0], 0
    for amount in nums[1:]:
        best, previous = max(best, previous + amount), best
    return best


def num_tilings(n: int) -> int:
    """Ways to tile a 2 x n board with dominoes and trominoes, modulo 10**9 + 7."""
    a, b, c = 0, 1, 1
    for _ in range(1, n):
        a, b, c = b, c, (2 * c % _MODULUS + a) % _MODULUS
    return c


def unique_paths(m: int, n: int) -> int:
    """Monotone right/down paths across an m x n grid."""
    if n < 1:
        raise ValueError("n must be at least 1")
    row = [1] * n
    for _ in range(1, m):
        row = list(accumulate(row))
    return row[-1]


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(text2) + 1)
    for c1 in text1:
        current = [0]
        for j, c2 in enumerate(text2):
            if c1 == c2:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def max_profit(prices: Sequence[int], fee: int) -> int:
    """Largest profit from unlimited trades, paying fee once per trade."""
    if not prices:
        raise ValueError("prices must not be empty")
    sell, buy = 0, -prices[0]
    for price in prices:
        sell, buy = max(sell, buy + price - fee), max(buy, sell - price)
    return sell


def min_distance(word1: str, word2: str) -> int:
    """Edit distance with insertions, deletions and replacements."""
    previous = list(range(len(word2) + 1))
    for i, c1 in enumerate(word1, start=1):
        current = [i]
        for j, c2 in enumerate(word2):
            if c1 == c2:
                current.append(previous[j])
            else:
                current.append(min(previous[j], previous[j + 1], current[j]) + 1)
        previous = current
    return previous[-1]