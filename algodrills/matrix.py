"""Grid traversal problems."""

from __future__ import annotations

from collections.abc import MutableSequence

_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def flood_fill(
    image: MutableSequence[MutableSequence[int]], sr: int, sc: int, new_color: int
) -> None:
    """Recolour in place the region of equal colour connected to (sr, sc)."""
    original = image[sr][sc]
    if original == new_color:
        return
    rows, cols = len(image), len(image[0])
    stack = [(sr, sc)]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < rows and 0 <= c < cols) or image[r][c] != original:
            continue
        image[r][c] = new_color
        stack.extend((r + dr, c + dc) for dr, dc in _NEIGHBOURS)