"""An index-addressed singly linked list with a sentinel head."""

from __future__ import annotations

from collections.abc import Iterator

from algopractice.nodes import ListNode, format_list


class MyLinkedList:
    """Singly linked list supporting insertion and removal by position."""

    def __init__(self) -> None:
        self._dummy = ListNode(-1)
        self._size = 0

    def _node_before(self, index: int) -> ListNode:
        cur = self._dummy
        for _ in range(index):
            cur = cur.next
        return cur

    def get(self, index: int) -> int:
        """Value at ``index``, or -1 if the index is out of range."""
        if not 0 <= index < self._size:
            return -1
        return self._node_before(index).next.val

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first element."""
        self._dummy.next = ListNode(val, self._dummy.next)
        self._size += 1

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` after the last element."""
        self._node_before(self._size).next = ListNode(val)
        self._size += 1

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` before position ``index``; ignored if out of range."""
        if not 0 <= index <= self._size:
            return
        prev = self._node_before(index)
        prev.next = ListNode(val, prev.next)
        self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the element at ``index``; ignored if out of range."""
        if not 0 <= index < self._size:
            return
        prev = self._node_before(index)
        prev.next = prev.next.next
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        cur = self._dummy.next
        while cur is not None:
            yield cur.val
            cur = cur.next

    def __str__(self) -> str:
        return format_list(self._dummy.next)