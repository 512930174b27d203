"""Graph traversal problems: BFS, DFS, union-find, topological checks and Euler circuits."""

from __future__ import annotations

import heapq
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Return True if every room is reachable from room 0 using the keys found."""
    visited = [False] * len(rooms)
    visited[0] = True
    queue = deque([0])
    while queue:
        room = queue.popleft()
        for key in rooms[room]:
            if not visited[key]:
                visited[key] = True
                queue.append(key)
    return all(visited)


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Count the connected groups ("provinces") of an adjacency matrix."""
    n = len(is_connected)
    parent = list(range(n))
    size = [1] * n

    def find(i: int) -> int:
        root = i
        while parent[root] != root:
            root = parent[root]
        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    groups = n
    for i, row in enumerate(is_connected):
        for j in range(i, len(row)):
            if row[j] != 1:
                continue
            root1, root2 = find(i), find(j)
            if root1 == root2:
                continue
            groups -= 1
            if size[root1] > size[root2]:
                parent[root2] = root1
                size[root1] += size[root2]
            else:
                parent[root1] = root2
                size[root2] += size[root1]
    return groups


def min_reorder(n: int, connections: Iterable[Sequence[int]]) -> int:
    """Minimum number of directed roads to flip so every city can reach city 0."""
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b in connections:
        graph[a].append((b, 1))
        graph[b].append((a, 0))

    flips = 0
    stack = [(0, -1)]
    while stack:
        city, parent = stack.pop()
        for neighbour, cost in graph[city]:
            if neighbour != parent:
                flips += cost
                stack.append((neighbour, city))
    return flips


def calc_equation(
    equations: Sequence[Sequence[str]],
    values: Sequence[float],
    queries: Iterable[Sequence[str]],
) -> list[float]:
    """Evaluate division queries from known ratios; unknown answers are -1.0."""
    graph: dict[str, list[tuple[str, float]]] = defaultdict(list)
    for (numerator, denominator), value in zip(equations, values):
        graph[numerator].append((denominator, value))
        graph[denominator].append((numerator, 1.0 / value))

    answers = []
    for start, goal in queries:
        if start not in graph or goal not in graph:
            answers.append(-1.0)
            continue
        if start == goal:
            answers.append(1.0)
            continue

        visited = {start}
        stack = [(start, 1.0)]
        result = -1.0
        while stack:
            node, product = stack.pop()
            for neighbour, weight in graph[node]:
                if neighbour in visited:
                    continue
                visited.add(neighbour)
                stack.append((neighbour, weight * product))
                if neighbour == goal:
                    result = weight * product
                    stack.clear()
                    break
        answers.append(result)
    return answers


def nearest_exit(maze: Sequence[Sequence[str]], entrance: Sequence[int]) -> int:
    """Steps from the entrance to the nearest border cell of a '.'/'+' maze, or -1."""
    grid = [list(row) for row in maze]
    rows, cols = len(grid), len(grid[0])
    start = (entrance[0], entrance[1])
    heap = [(0, start)]
    while heap:
        steps, (r, c) = heapq.heappop(heap)
        for dr, dc in _DIRECTIONS:
            x, y = r + dr, c + dc
            if not (0 <= x < rows and 0 <= y < cols):
                if (r, c) == start:
                    continue
                return steps
            if grid[x][y] == ".":
                heapq.heappush(heap, (steps + 1, (x, y)))
                grid[x][y] = "+"
    return -1


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange remains, or -1 if some can never rot."""
    cells = [list(row) for row in grid]
    rows, cols = len(cells), len(cells[0])
    fresh = 0
    queue: deque[tuple[int, int]] = deque()
    for i, row in enumerate(cells):
        for j, value in enumerate(row):
            if value == 1:
                fresh += 1
            elif value == 2:
                queue.append((i, j))

    minutes = 0
    while queue and fresh > 0:
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for dr, dc in _DIRECTIONS:
                x, y = r + dr, c + dc
                if 0 <= x < rows and 0 <= y < cols and cells[x][y] == 1:
                    cells[x][y] = 2
                    queue.append((x, y))
                    fresh -= 1
        minutes += 1

    return -1 if fresh > 0 else minutes


def sequence_reconstruction(nums: Sequence[int], sequences: Iterable[Sequence[int]]) -> bool:
    """Return True if nums is the unique shortest supersequence of the sequences."""
    successors: dict[int, set[int]] = defaultdict(set)
    for seq in sequences:
        for first, second in zip(seq, seq[1:]):
            successors[first].add(second)
    return all(second in successors.get(first, ()) for first, second in zip(nums, nums[1:]))


def crack_safe(n: int, k: int) -> str:
    """Shortest digit string containing every n-digit code over digits 0..k-1."""
    highest = 10 ** (n - 1)
    seen: set[int] = set()
    digits: list[str] = []
    stack: list[tuple[int, Iterable[int], int | None]] = [(0, iter(range(k)), None)]
    while stack:
        node, choices, digit = stack[-1]
        for x in choices:
            neighbour = node * 10 + x
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append((neighbour % highest, iter(range(k)), x))
                break
        else:
            stack.pop()
            if digit is not None:
                digits.append(str(digit))
    return "".join(digits) + "0" * (n - 1)