"""Singly linked list algorithms: cycles, intersections, removals, reversal, swaps."""

from __future__ import annotations

from algopractice.nodes import ListNode


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, or None if the list is acyclic."""
    fast = slow = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            entry = head
            while entry is not fast:
                entry = entry.next
                fast = fast.next
            return entry
    return None


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None if they never meet."""
    cur_a, cur_b = head_a, head_b
    while cur_a is not cur_b:
        cur_a = head_b if cur_a is None else cur_a.next
        cur_b = head_a if cur_b is None else cur_b.next
    return cur_a


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Unlink every node holding ``val`` and return the new head."""
    dummy = ListNode(next=head)
    cur = dummy
    while cur.next is not None:
        if cur.next.val == val:
            cur.next = cur.next.next
        else:
            cur = cur.next
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the new head.

    Raises ValueError when ``n`` is not between 1 and the list's length.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    dummy = ListNode(next=head)
    fast = slow = dummy
    for _ in range(n):
        fast = fast.next
        if fast is None:
            raise ValueError(f"list is shorter than {n} nodes")
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes in place and return the new head."""
    dummy = ListNode(next=head)
    cur = dummy
    while cur.next is not None and cur.next.next is not None:
        first = cur.next
        second = first.next
        first.next = second.next
        second.next = first
        cur.next = second
        cur = first
    return dummy.next