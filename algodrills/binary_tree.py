"""Binary tree and binary search tree problems."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node; equality compares whole subtrees by value."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _leaves(root: Optional[TreeNode]) -> Iterator[int]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            yield node.val
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same left-to-right leaf sequence."""
    return list(_leaves(root1)) == list(_leaves(root2))


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the subtree of a BST rooted at the node holding val, or None."""
    node = root
    while node is not None:
        if node.val == val:
            return node
        node = node.left if node.val > val else node.right
    return None


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove key from a BST in place and return the (possibly new) root."""
    if root is None:
        return None
    if root.val > key:
        root.left = delete_node(root.left, key)
        return root
    if root.val < key:
        root.right = delete_node(root.right, key)
        return root
    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    smallest = root.right
    while smallest.left is not None:
        smallest = smallest.left
    smallest.left = root.left
    return root.right


def good_nodes(root: Optional[TreeNode]) -> int:
    """Count nodes not smaller than any node on their path from the root."""
    count = 0
    stack = [(root, float("-inf"))] if root is not None else []
    while stack:
        node, highest = stack.pop()
        if node.val >= highest:
            count += 1
        highest = max(highest, node.val)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, highest))
    return count


def path_sum(root: Optional[TreeNode], target_sum: int) -> int:
    """Count downward paths whose values add up to target_sum."""
    prefix_sums: Counter[int] = Counter({0: 1})

    def walk(node: Optional[TreeNode], running: int) -> int:
        if node is None:
            return 0
        running += node.val
        found = prefix_sums[running - target_sum]
        prefix_sums[running] += 1
        found += walk(node.left, running) + walk(node.right, running)
        prefix_sums[running] -= 1
        return found

    return walk(root, 0)


def longest_zig_zag(root: Optional[TreeNode]) -> int:
    """Length (in edges) of the longest alternating left/right downward path."""

    def walk(node: Optional[TreeNode], came_from_right: bool, length: int) -> int:
        if node is None:
            return 0
        if came_from_right:
            left = walk(node.left, False, length + 1)
            right = walk(node.right, True, 1)
        else:
            left = walk(node.left, False, 1)
            right = walk(node.right, True, length + 1)
        return max(length, left, right)

    return walk(root, False, 0)


def lowest_common_ancestor(
    root: Optional[TreeNode], p: Optional[TreeNode], q: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Deepest node having both p and q (matched by subtree equality) below it."""
    if root is None or root == p or root == q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Values seen from the right, one per level, top to bottom."""
    view: list[int] = []
    queue: deque[tuple[Optional[TreeNode], int]] = deque([(root, 0)])
    while queue:
        node, depth = queue.popleft()
        if node is None:
            continue
        if len(view) <= depth:
            view.append(node.val)
        else:
            view[depth] = node.val
        queue.append((node.left, depth + 1))
        queue.append((node.right, depth + 1))
    return view


def max_level_sum(root: Optional[TreeNode]) -> int:
    """Smallest 1-based level whose values have the largest sum; 0 for no tree."""
    if root is None:
        return 0
    best_level, best_sum = 0, float("-inf")
    level, current = 1, [root]
    while current:
        total = sum(node.val for node in current)
        if total > best_sum:
            best_sum, best_level = total, level
        current = [child for node in current for child in (node.left, node.right) if child is not None]
        level += 1
    return best_level


class BSTIterator:
    """In-order cursor over a binary search tree."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._values: list[int] = []
        stack: list[TreeNode] = []
        node = root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            self._values.append(node.val)
            node = node.right
        self._index = 0

    def next(self) -> int:
        """Advance and return the next value, or -1 when exhausted."""
        if self._index == len(self._values):
            return -1
        value = self._values[self._index]
        self._index += 1
        return value

    def has_next(self) -> bool:
        """Return True if a further value is available."""
        return self._index < len(self._values)