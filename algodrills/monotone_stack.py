"""Next-greater-element problems solved with a monotone stack."""

from __future__ import annotations

from collections.abc import Sequence


def monotone_stack_ex(nums: Sequence[int]) -> list[int]:
    """For each element, the next strictly greater element to its right, or -1."""
    answer = [-1] * len(nums)
    stack: list[int] = []
    for i, value in enumerate(nums):
        while stack and value > nums[stack[-1]]:
            answer[stack.pop()] = value
        stack.append(i)
    return answer


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait for a warmer temperature, 0 where none comes."""
    answer = [0] * len(temperatures)
    stack: list[int] = []
    for i, temperature in enumerate(temperatures):
        while stack and temperature > temperatures[stack[-1]]:
            j = stack.pop()
            answer[j] = i - j
        stack.append(i)
    return answer


class StockSpanner:
    """Reports, for each new price, how many consecutive days it has topped."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, float]] = [(-1, float("inf"))]
        self._day = -1

    def next(self, price: int) -> int:
        """Record today's price and return its span."""
        while price >= self._stack[-1][1]:
            self._stack.pop()
        self._day += 1
        span = self._day - self._stack[-1][0]
        self._stack.append((self._day, price))
        return span