"""Combinatorial search by backtracking."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import product

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def letter_combinations(digits: str) -> list[str]:
    """All letter strings a phone keypad digit string can spell."""
    if not digits:
        return []
    return ["".join(letters) for letters in product(*(_KEYPAD.get(d, "") for d in digits))]


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """All sets of k distinct digits 1..9 summing to n, each in descending order."""

    def search(chosen: list[int], highest: int, remaining: int) -> Iterator[list[int]]:
        needed = k - len(chosen)
        # The largest possible sum of `needed` distinct digits not above `highest`.
        if remaining < 0 or remaining > (2 * highest - needed + 1) * needed // 2:
            return
        if needed == 0:
            yield list(chosen)
            return
        for digit in range(highest, 0, -1):
            if digit < needed:
                break
            chosen.append(digit)
            yield from search(chosen, digit - 1, remaining - digit)
            chosen.pop()

    return list(search([], 9, n))