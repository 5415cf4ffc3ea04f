"""Array and sequence exercises: spirals, windows, two pointers, binary search."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import MutableSequence, Sequence


def generate_matrix(n: int) -> list[list[int]]:
    """Return an ``n`` x ``n`` matrix filled 1..n*n in clockwise spiral order."""
    matrix = [[0] * n for _ in range(n)]
    left, right, top, bottom = 0, n - 1, 0, n - 1
    counter = 1
    while True:
        for col in range(left, right + 1):
            matrix[top][col] = counter
            counter += 1
        top += 1
        if top > bottom:
            break
        for row in range(top, bottom + 1):
            matrix[row][right] = counter
            counter += 1
        right -= 1
        if right < left:
            break
        for col in range(right, left - 1, -1):
            matrix[bottom][col] = counter
            counter += 1
        bottom -= 1
        if bottom < top:
            break
        for row in range(bottom, top - 1, -1):
            matrix[row][left] = counter
            counter += 1
        left += 1
        if left > right:
            break
    return matrix


def min_sub_array_len(nums: Sequence[int], target: int) -> int:
    """Length of the shortest contiguous run summing to at least ``target``, or 0."""
    best: int | None = None
    start = 0
    total = 0
    for end, value in enumerate(nums):
        total += value
        while total >= target:
            length = end - start + 1
            best = length if best is None else min(best, length)
            total -= nums[start]
            start += 1
    return best or 0


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every element not equal to ``val`` to the front, in order; return their count.

    The sequence keeps its length; entries past the returned count are left as they were.
    """
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in the ascending sequence ``nums``, or -1."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of an ascending sequence, in ascending order."""
    result = [0] * len(nums)
    low, high = 0, len(nums) - 1
    for slot in range(len(nums) - 1, -1, -1):
        if abs(nums[low]) <= abs(nums[high]):
            result[slot] = nums[high] * nums[high]
            high -= 1
        else:
            result[slot] = nums[low] * nums[low]
            low += 1
    return result


def reverse_string(s: MutableSequence) -> None:
    """Reverse a mutable sequence of characters or bytes in place."""
    s.reverse()