"""Algorithms over strings and integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import groupby


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring of ``s`` without repeated characters."""
    seen: set[str] = set()
    left = 0
    best = 0
    for right, char in enumerate(s):
        while char in seen:
            seen.discard(s[left])
            left += 1
        seen.add(char)
        best = max(best, right - left + 1)
    return best


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("max_subarray() needs at least one number")
    iterator = iter(nums)
    best = current = next(iterator)
    for num in iterator:
        current = max(num, current + num)
        best = max(best, current)
    return best


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        raise ValueError("cannot rotate an empty list")
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the same characters as ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def remove_duplicates(nums: list[int]) -> int:
    """Compact the distinct values of sorted ``nums`` to its front, in place.

    Returns how many distinct values there are; entries past that count keep
    whatever they held before.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Return the common elements, counted with multiplicity, in the order of ``nums2``."""
    remaining = Counter(nums1)
    result = []
    for num in nums2:
        if remaining[num] > 0:
            result.append(num)
            remaining[num] -= 1
    return result


def majority_element(nums: Sequence[int]) -> int:
    """Return the majority candidate of ``nums`` by Boyer-Moore voting (0 when empty)."""
    count = 0
    candidate = 0
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    return candidate


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low