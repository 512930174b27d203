"""Singly linked list problems."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """A singly linked list node; equality compares the whole remaining list."""

    val: int
    next: Optional[ListNode] = None


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding values in order; None for no values."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """The values of a linked list, front to back."""
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    return values


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the node at index len // 2 and return the head."""
    length = len(to_values(head))
    if length == 0:
        return None
    dummy = ListNode(0, head)
    before = dummy
    for _ in range(length // 2):
        before = before.next
    before.next = before.next.next
    return dummy.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Regroup nodes: those at even indices first, then those at odd indices."""
    if head is None:
        return None
    first_head = ListNode(0)
    second_head = ListNode(0)
    tails = [first_head, second_head]
    node: Optional[ListNode] = head
    index = 0
    while node is not None:
        following = node.next
        node.next = None
        tails[index % 2].next = node
        tails[index % 2] = node
        node = following
        index += 1
    tails[0].next = second_head.next
    return first_head.next


def pair_sum(head: Optional[ListNode]) -> int:
    """Largest sum of a node and its twin (index i and len - 1 - i), at least 0."""
    values = to_values(head)
    half = len(values) // 2
    return max([0, *(a + b for a, b in zip(values[:half], reversed(values)))])