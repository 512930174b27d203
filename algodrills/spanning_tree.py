"""Minimum spanning tree over points with Manhattan distances."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def min_cost_connect_points(points: Sequence[Sequence[int]]) -> int:
    """Minimum total Manhattan cost to connect all points (Kruskal's algorithm)."""
    if not points:
        raise ValueError("at least one point is required")

    edges = sorted(
        (abs(points[i][0] - points[j][0]) + abs(points[i][1] - points[j][1]), i, j)
        for i, j in combinations(range(len(points)), 2)
    )

    parent = list(range(len(points)))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    total = 0
    for cost, i, j in edges:
        root_a, root_b = find(i), find(j)
        if root_a == root_b:
            continue
        parent[root_b] = root_a
        total += cost
    return total