from itertools import combinations

import pytest

from algodrills.spanning_tree import min_cost_connect_points


def _manhattan(p, q):
    return abs(p[0] - q[0]) + abs(p[1] - q[1])


def test_example():
    assert min_cost_connect_points([[3, 12], [-2, 5], [-4, 1]]) == 18


def test_single_point_costs_nothing():
    assert min_cost_connect_points([[7, -3]]) == 0


def test_two_points_cost_their_distance():
    p, q = [1, 2], [-4, 9]
    assert min_cost_connect_points([p, q]) == _manhattan(p, q)


def test_empty_raises():
    with pytest.raises(ValueError):
        min_cost_connect_points([])


def test_bounds_against_chain_and_nearest_edges():
    points = [[0, 0], [2, 2], [3, 10], [5, 2], [7, 0]]
    cost = min_cost_connect_points(points)
    chain = sum(_manhattan(a, b) for a, b in zip(points, points[1:]))
    assert cost <= chain
    shortest = min(_manhattan(a, b) for a, b in combinations(points, 2))
    assert cost >= shortest * (len(points) - 1)


def test_order_does_not_matter():
    points = [[0, 0], [2, 2], [3, 10], [5, 2], [7, 0]]
    assert min_cost_connect_points(points) == min_cost_connect_points(points[::-1])