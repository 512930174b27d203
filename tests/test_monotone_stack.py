import pytest

from algodrills.monotone_stack import StockSpanner, daily_temperatures, monotone_stack_ex


def test_monotone_stack_ex():
    assert monotone_stack_ex([2, 1, 2, 4, 3]) == [4, 2, 4, -1, -1]
    assert monotone_stack_ex([]) == []


@pytest.mark.parametrize("nums", [[5, 4, 3, 2, 1], [1, 1, 1], [3, 8, 2, 9, 9, 1, 7]])
def test_monotone_stack_invariant(nums):
    result = monotone_stack_ex(nums)
    assert len(result) == len(nums)
    for value, greater in zip(nums, result):
        assert greater == -1 or greater > value
    assert result[-1] == -1


def test_daily_temperatures():
    assert daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73]) == [1, 1, 4, 2, 1, 1, 0, 0]


def test_daily_temperatures_decreasing_is_all_zero():
    assert daily_temperatures([90, 80, 70]) == [0, 0, 0]


def test_daily_temperatures_points_to_warmer_day():
    temps = [30, 60, 40, 40, 50, 90]
    for i, wait in enumerate(daily_temperatures(temps)):
        if wait:
            assert temps[i + wait] > temps[i]
            assert all(t <= temps[i] for t in temps[i + 1 : i + wait])


def test_stock_spanner():
    spanner = StockSpanner()
    spans = [spanner.next(p) for p in [100, 80, 60, 70, 60, 75, 85]]
    assert spans == [1, 1, 1, 2, 1, 4, 6]


def test_stock_spanner_rising_prices_span_all_days():
    spanner = StockSpanner()
    spans = [spanner.next(p) for p in range(1, 6)]
    assert spans == [1, 2, 3, 4, 5]