"""Singly linked list of decimal digits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class ListNode:
    """A node holding one value and a link to the next node."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode:
        """Build a list from ``values`` and return its head; ``values`` must not be empty."""
        items = list(values)
        if not items:
            raise ValueError("a list needs at least one value")
        head: ListNode | None = None
        for value in reversed(items):
            head = cls(value, head)
        assert head is not None
        return head

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def add_two_numbers(l1: ListNode, l2: ListNode) -> ListNode:
    """Add two numbers stored as reversed digit lists, e.g. 2->4->3 + 5->6->4 = 7->0->8.

    The sum is written into ``l1``, which is extended as needed, and ``l1`` is returned.
    """
    if l1 is None or l2 is None:
        raise ValueError("both lists are required")
    carry = 0
    node = l1
    other: ListNode | None = l2
    while True:
        total = carry + node.val + (other.val if other is not None else 0)
        carry, node.val = (1, total - 10) if total >= 10 else (0, total)
        other = other.next if other is not None else None
        if node.next is None:
            if other is None:
                if carry:
                    node.next = ListNode(1)
                break
            node.next = ListNode(0)
        node = node.next
    return l1