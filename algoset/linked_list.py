"""Singly linked lists and the classic algorithms that operate on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare and hash by identity."""

    val: Any = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list.

        The iteration never ends if the list contains a cycle.
        """
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    items = list(values)
    head: ListNode | None = None
    for value in reversed(items):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[Any]:
    """Return the values of an acyclic list as a Python list."""
    return [] if head is None else list(head)


def _length_and_tail(head: ListNode) -> tuple[int, ListNode]:
    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1
    return length, tail


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` links ever revisits a node."""
    seen: set[ListNode] = set()
    node = head
    while node is not None:
        if node in seen:
            return True
        seen.add(node)
        node = node.next
    return False


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where the cycle begins, or None if there is no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    while head is not slow:
        head = head.next
        slow = slow.next
    return head


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    seen: set[ListNode] = set()
    node = head_a
    while node is not None:
        seen.add(node)
        node = node.next
    node = head_b
    while node is not None:
        if node in seen:
            return node
        node = node.next
    return None


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the new head.

    When ``n`` reaches or exceeds the length, the head itself is removed.
    """
    if head is None:
        raise ValueError("cannot remove a node from an empty list")
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    fast: ListNode = head
    for _ in range(n):
        if fast.next is None:
            return head.next
        fast = fast.next
    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def is_palindrome_list(head: ListNode | None) -> bool:
    """Return True if the list reads the same forwards and backwards."""
    values = to_values(head)
    return values == values[::-1]


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right and return the new head.

    A negative ``k`` leaves the list unchanged.
    """
    if head is None or head.next is None or k <= 0:
        return head
    length, tail = _length_and_tail(head)
    k %= length
    if k == 0:
        return head
    new_tail = head
    for _ in range(length - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head


def middle_node(head: ListNode | None) -> ListNode:
    """Return the middle node; for even lengths, the second of the two middles."""
    if head is None:
        raise ValueError("an empty list has no middle node")
    length, _ = _length_and_tail(head)
    node = head
    for _ in range(length // 2):
        node = node.next
    return node