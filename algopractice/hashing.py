"""Exercises solved with hash maps, sets and sorted two-pointer scans."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Whether ``ransom_note`` can be spelt using each letter of ``magazine`` at most once."""
    available = Counter(magazine)
    for char in ransom_note:
        available[char] -= 1
        if available[char] < 0:
            return False
    return True


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All unique ascending quadruplets from ``nums`` that sum to ``target``."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for a in range(size):
        if values[a] > 0 and values[a] > target:
            break
        if a > 0 and values[a] == values[a - 1]:
            continue
        for b in range(a + 1, size):
            pair = values[a] + values[b]
            if pair > 0 and pair > target:
                break
            if b > a + 1 and values[b] == values[b - 1]:
                continue
            c, d = b + 1, size - 1
            while c < d:
                total = pair + values[c] + values[d]
                if total > target:
                    d -= 1
                elif total < target:
                    c += 1
                else:
                    result.append([values[a], values[b], values[c], values[d]])
                    while c < d and values[c] == values[c + 1]:
                        c += 1
                    c += 1
                    while c < d and values[d] == values[d - 1]:
                        d -= 1
                    d -= 1
    return result


def four_sum_count(
    nums1: Iterable[int],
    nums2: Iterable[int],
    nums3: Iterable[int],
    nums4: Sequence[int],
) -> int:
    """Number of index tuples (i, j, k, l) with nums1[i]+nums2[j]+nums3[k]+nums4[l] == 0."""
    nums2 = list(nums2)
    pair_sums = Counter(a + b for a in nums1 for b in nums2)
    return sum(pair_sums[-c - d] for c in nums3 for d in nums4)


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Distinct values present in both inputs, in order of first appearance in ``nums2``."""
    pending = set(nums1)
    result = []
    for value in nums2:
        if value in pending:
            pending.discard(value)
            result.append(value)
    return result


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def digit_square_sum(n: int) -> int:
    """Sum of the squares of the decimal digits of a positive ``n``; 0 otherwise."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Whether repeatedly replacing ``n`` by its digit-square sum reaches 1."""
    seen: set[int] = set()
    while True:
        n = digit_square_sum(n)
        if n == 1:
            return True
        if n in seen:
            return False
        seen.add(n)


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """All unique ascending triplets from ``nums`` that sum to zero."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i in range(size - 2):
        if values[i] > 0:
            break
        if i > 0 and values[i] == values[i - 1]:
            continue
        left, right = i + 1, size - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                result.append([values[i], values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
    return result


def two_sum(nums: Iterable[int], target: int) -> list[int] | None:
    """Indices of two distinct elements summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return None