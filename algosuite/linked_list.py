"""Singly linked list problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _iter_nodes(head)]


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as least-significant-digit-first lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node from the end of the list and return the new head.

    Raises ``ValueError`` unless ``1 <= n <= length``.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(0, head)
    fast: Optional[ListNode] = dummy
    for _ in range(n):
        fast = fast.next if fast is not None else None
        if fast is None:
            raise ValueError("n is larger than the list")
    slow = dummy
    while fast.next is not None:
        fast = fast.next
        slow = slow.next  # type: ignore[assignment]
    removed = slow.next
    slow.next = removed.next if removed is not None else None
    return dummy.next