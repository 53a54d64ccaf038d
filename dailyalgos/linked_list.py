"""Singly linked lists and the classic algorithms on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node onwards (endless if the list has a cycle)."""
        for node in _walk(self):
            yield node.val

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _walk(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a list holding ``values`` in order and return its head."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list as a Python list."""
    return [node.val for node in _walk(head)]


def list_length(head: ListNode | None) -> int:
    """Return the number of nodes in an acyclic list."""
    return sum(1 for _ in _walk(head))


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` loops forever."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def intersection_node(head_a: ListNode | None, head_b: ListNode | None) -> ListNode | None:
    """Return the first node shared by two acyclic lists, or None."""
    len_a = list_length(head_a)
    len_b = list_length(head_b)
    for _ in range(len_a - len_b):
        head_a = head_a.next
    for _ in range(len_b - len_a):
        head_b = head_b.next
    while head_a is not None and head_b is not None:
        if head_a is head_b:
            return head_a
        head_a = head_a.next
        head_b = head_b.next
    return None


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return the new head."""
    prev = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list; on ties the node of ``list2`` comes first."""
    dummy = ListNode(0)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def remove_loop(head: ListNode | None) -> bool:
    """Break a cycle in the list, if there is one. Returns True if a cycle was removed."""
    slow = fast = head
    while True:
        if fast is None or fast.next is None:
            return False
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break

    slow = head
    if slow is fast:
        while fast.next is not slow:
            fast = fast.next
    else:
        while slow.next is not fast.next:
            slow = slow.next
            fast = fast.next
    fast.next = None
    return True


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow