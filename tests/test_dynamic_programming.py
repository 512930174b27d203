import math

import pytest

from algodrills.dynamic_programming import (
    climb_stairs,
    fib,
    longest_common_subsequence,
    max_profit,
    min_cost_climbing_stairs,
    min_distance,
    num_tilings,
    rob,
    tribonacci,
    unique_paths,
)

MODULUS = 10**9 + 7


def test_tribonacci_example():
    assert tribonacci(25) == 1389537


def test_tribonacci_recurrence():
    assert tribonacci(1) == tribonacci(2)
    for n in range(3, 30):
        assert tribonacci(n) == tribonacci(n - 1) + tribonacci(n - 2) + tribonacci(n - 3)


def test_fib_small_values_unchanged():
    for n in (0, 1):
        assert fib(n) == n


def test_fib_recurrence_and_known_value():
    for n in range(2, 40):
        assert fib(n) == fib(n - 1) + fib(n - 2)
    assert fib(28) == 317811


def test_climb_stairs_matches_fibonacci():
    for n in (1, 2):
        assert climb_stairs(n) == n
    for n in range(1, 35):
        assert climb_stairs(n) == fib(n + 1)


def test_min_cost_two_steps():
    assert min_cost_climbing_stairs([7, 4]) == 4
    assert min_cost_climbing_stairs([3, 9]) == 3


def test_min_cost_bounded_by_total():
    cost = [1, 100, 1, 1, 1, 100, 1, 1, 100, 1]
    result = min_cost_climbing_stairs(cost)
    assert result <= sum(cost)
    assert result >= min(cost)


def test_min_cost_requires_two_steps():
    with pytest.raises(ValueError):
        min_cost_climbing_stairs([5])


def test_rob_example():
    assert rob([2, 7, 9, 3, 1]) == 12


def test_rob_single_house_and_trailing_zero():
    assert rob([42]) == 42
    nums = [5, 1, 1, 5, 3]
    assert rob(nums + [0]) == rob(nums)


def test_rob_empty_raises():
    with pytest.raises(ValueError):
        rob([])


def test_num_tilings_recurrence():
    for n in range(4, 40):
        assert num_tilings(n) == (2 * num_tilings(n - 1) + num_tilings(n - 3)) % MODULUS


def test_num_tilings_stays_below_modulus():
    assert 0 <= num_tilings(1000) < MODULUS


def test_unique_paths_matches_binomial():
    for m in range(1, 8):
        for n in range(1, 8):
            assert unique_paths(m, n) == math.comb(m + n - 2, m - 1)
            assert unique_paths(m, n) == unique_paths(n, m)


def test_unique_paths_rejects_empty_width():
    with pytest.raises(ValueError):
        unique_paths(3, 0)


def test_lcs_of_subsequence_is_its_length():
    assert longest_common_subsequence("abcde", "ace") == len("ace")
    assert longest_common_subsequence("ace", "abcde") == len("ace")


def test_lcs_bounded_and_reflexive():
    a, b = "kitten", "sitting"
    assert longest_common_subsequence(a, a) == len(a)
    assert longest_common_subsequence(a, b) <= min(len(a), len(b))
    assert longest_common_subsequence(a, b) == longest_common_subsequence(b, a)


def test_max_profit_rising_prices_without_fee():
    prices = [1, 3, 6, 10]
    assert max_profit(prices, 0) == prices[-1] - prices[0]


def test_max_profit_fee_never_helps():
    prices = [1, 3, 2, 8, 4, 9]
    assert max_profit(prices, 2) <= max_profit(prices, 0)
    assert max_profit(prices, 1000) == max_profit([9, 4, 1], 0)


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([], 1)


def test_min_distance_example():
    assert min_distance("intention", "execution") == 5


def test_min_distance_against_empty_and_symmetry():
    assert min_distance("horse", "") == len("horse")
    assert min_distance("", "ros") == len("ros")
    assert min_distance("horse", "ros") == min_distance("ros", "horse")
    assert min_distance("same", "same") == min_distance("", "")


def test_min_distance_triangle_inequality():
    a, b, c = "kitten", "sitting", "mitten"
    assert min_distance(a, c) <= min_distance(a, b) + min_distance(b, c)