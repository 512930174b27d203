import pytest

from algodrills.sliding_window import (
    contains_nearby_almost_duplicate,
    find_max_average,
    longest_ones,
    longest_subarray,
    max_vowels,
    sliding_window_ex,
)


def test_sliding_window_ex_worked_example():
    assert sliding_window_ex([2, 1, 5, 1, 3, 2], 3) == 9


def test_sliding_window_ex_whole_array_and_single():
    nums = [4, -2, 7, 1]
    assert sliding_window_ex(nums, len(nums)) == sum(nums)
    assert sliding_window_ex(nums, 1) == max(nums)


def test_sliding_window_ex_too_short():
    with pytest.raises(ValueError):
        sliding_window_ex([1, 2], 3)


def test_find_max_average_worked_example():
    assert find_max_average([1, 12, -5, -6, 50, 3], 4) == pytest.approx(12.75)


def test_find_max_average_matches_window_sum():
    nums = [5, -1, 8, 2, 2]
    assert find_max_average(nums, 2) == pytest.approx(sliding_window_ex(nums, 2) / 2)


@pytest.mark.parametrize("nums,k", [([1], 2), ([1, 2], 0)])
def test_find_max_average_rejects_bad_k(nums, k):
    with pytest.raises(ValueError):
        find_max_average(nums, k)


def test_max_vowels_worked_example():
    assert max_vowels("abciiidef", 3) == 3


@pytest.mark.parametrize("s,k", [("aeiou", 2), ("leetcode", 3), ("rhythms", 4)])
def test_max_vowels_bounded_by_k(s, k):
    assert 0 <= max_vowels(s, k) <= k


def test_max_vowels_short_string():
    assert max_vowels("ab", 5) == 0


def test_longest_ones_worked_example():
    nums = [0, 0, 1, 1, 0, 0, 1, 1, 1, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1]
    assert longest_ones(nums, 3) == 10


def test_longest_ones_limits():
    nums = [1, 0, 1, 0, 0, 1]
    assert longest_ones(nums, len(nums)) == len(nums)
    assert longest_ones([1, 1, 1], 0) == 3
    assert longest_ones([0, 0], 0) == 0


def test_longest_subarray_worked_example():
    assert longest_subarray([0, 1, 1, 1, 0, 1, 1, 0, 1]) == 5


def test_longest_subarray_must_delete_one():
    ones = [1] * 4
    assert longest_subarray(ones) == len(ones) - 1
    assert longest_subarray([0, 0, 0]) == 0


def test_longest_subarray_rejects_non_binary():
    with pytest.raises(ValueError):
        longest_subarray([1, 2])


def test_contains_nearby_almost_duplicate_worked_example():
    assert contains_nearby_almost_duplicate([1, 5, 9, 1, 5, 9], 2, 3) is False


def test_contains_nearby_almost_duplicate_found():
    assert contains_nearby_almost_duplicate([1, 2, 3, 1], 3, 0) is True
    assert contains_nearby_almost_duplicate([1, 0, 1, 1], 1, 2) is True


def test_contains_nearby_almost_duplicate_distance_matters():
    nums = [1, 5, 9, 1]
    assert contains_nearby_almost_duplicate(nums, 2, 0) is False
    assert contains_nearby_almost_duplicate(nums, 3, 0) is True