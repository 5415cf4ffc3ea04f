"""Singly linked list and binary tree nodes with builders and printers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; compared by identity."""

    val: int = 0
    next: ListNode | None = None


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; compared by identity."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_list(nums: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``nums`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in nums:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _iter_nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _iter_nodes(head)]


def format_list(head: ListNode | None) -> str:
    """Render a list as ``1 -> 2 -> nil``."""
    return "".join(f"{value} -> " for value in list_values(head)) + "nil"


def print_list(head: ListNode | None) -> None:
    """Print a list in the ``1 -> 2 -> nil`` form."""
    print(format_list(head))


def build_tree(nums: list[int]) -> TreeNode | None:
    """Build a height-balanced tree whose in-order traversal is ``nums``."""
    if not nums:
        return None
    mid = len(nums) // 2
    return TreeNode(
        nums[mid],
        build_tree(nums[:mid]),
        build_tree(nums[mid + 1:]),
    )


def tree_height(root: TreeNode | None) -> int:
    """Return the number of levels in the tree."""
    if root is None:
        return 0
    return max(tree_height(root.left), tree_height(root.right)) + 1


def level_order(root: TreeNode | None) -> list[int]:
    """Return the tree's values in breadth-first order."""
    if root is None:
        return []
    values = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        values.append(node.val)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return values


def print_tree_leveled(root: TreeNode | None) -> None:
    """Print the tree's values in breadth-first order followed by a blank line."""
    if root is None:
        return
    print("".join(f"{value} " for value in level_order(root)), end="\n\n")


def render_tree(root: TreeNode | None) -> str:
    """Lay the tree out on a grid, one line per level, parents centred over children."""
    if root is None:
        return ""
    height = tree_height(root)
    width = (1 << height) - 1
    grid = [[" "] * width for _ in range(height)]

    def place(node: TreeNode | None, row: int, left: int, right: int) -> None:
        if node is None:
            return
        mid = (left + right) // 2
        grid[row][mid] = str(node.val)
        place(node.left, row + 1, left, mid - 1)
        place(node.right, row + 1, mid + 1, right)

    place(root, 0, 0, width - 1)
    return "\n".join("".join(row) for row in grid)


def print_tree_structured(root: TreeNode | None) -> None:
    """Print the grid layout produced by :func:`render_tree`."""
    if root is None:
        return
    print(render_tree(root))