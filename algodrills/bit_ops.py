"""Bit manipulation problems."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor

_MASK32 = 0xFFFFFFFF


def count_bits(n: int) -> list[int]:
    """Number of set bits for every integer from 0 to n inclusive."""
    return [x.bit_count() for x in range(n + 1)]


def single_number(nums: Iterable[int]) -> int:
    """The element that appears once when every other element appears twice."""
    return reduce(xor, nums, 0)


def min_flips(a: int, b: int, c: int) -> int:
    """Fewest bit flips in a and b so that a | b == c (32-bit values)."""
    mismatched = ((a | b) ^ c) & _MASK32
    double = (a & b & ~c) & _MASK32
    return mismatched.bit_count() + double.bit_count()


def count_arrangement(n: int) -> int:
    """Number of beautiful arrangements of 1..n, by bitmask dynamic programming."""
    ways = [0] * (1 << n)
    ways[0] = 1
    for mask in range(1, len(ways)):
        position = mask.bit_count()
        for value in range(1, n + 1):
            bit = 1 << (value - 1)
            if mask & bit and (position % value == 0 or value % position == 0):
                ways[mask] += ways[mask ^ bit]
    return ways[-1]