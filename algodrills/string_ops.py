"""String problems: matching, merging, reversing and run-length compression."""

from __future__ import annotations

import re
from collections.abc import MutableSequence, Sequence
from itertools import combinations, groupby, zip_longest
from math import gcd

_VOWELS = frozenset("aeiouAEIOU")
_ASCII_WHITESPACE = re.compile(r"[ \t\n\f\r]+")


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of needle in haystack, or -1."""
    return haystack.find(needle)


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the characters of two words, appending the longer word's tail."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def gcd_of_strings(str1: str, str2: str) -> str:
    """Longest string that builds both inputs by repetition, or "" if none does."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: gcd(len(str1), len(str2))]


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in s, leaving other characters in place."""
    chars = list(s)
    positions = [i for i, c in enumerate(chars) if c in _VOWELS]
    vowels = [chars[i] for i in positions]
    for i, vowel in zip(positions, reversed(vowels)):
        chars[i] = vowel
    return "".join(chars)


def reverse_words(s: str) -> str:
    """Reverse the word order, joining words with single spaces."""
    words = [word for word in _ASCII_WHITESPACE.split(s) if word]
    return " ".join(reversed(words))


def compress(chars: MutableSequence[str]) -> int:
    """Run-length compress chars in place and return the compressed length.

    Each run becomes its character followed by the run length when above one;
    the compressed form occupies the start of chars.
    """
    compressed: list[str] = []
    for char, run in groupby(chars):
        count = sum(1 for _ in run)
        compressed.append(char)
        if count > 1:
            compressed.extend(str(count))
    chars[: len(compressed)] = compressed
    return len(compressed)


def count_prefix_suffix_pairs(words: Sequence[str]) -> int:
    """Count pairs i < j where words[i] is both a prefix and a suffix of words[j]."""
    return sum(
        1
        for first, second in combinations(words, 2)
        if second.startswith(first) and second.endswith(first)
    )