"""Classic comparison and distribution sorts on lists of integers."""

from __future__ import annotations

from itertools import accumulate

_RADIX_LIMIT = 9999


def bubble_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` in place by repeated adjacent swaps and return it."""
    for done in range(len(nums) - 1):
        for j in range(len(nums) - done - 1):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]
    return nums


def _bucket_of(value: int) -> int:
    quotient = abs(value) // 10
    return quotient if value >= 0 else -quotient


def bucket_sort(nums: list[int]) -> list[int]:
    """Return a sorted copy, spreading values over ``len(nums)`` buckets of width ten.

    Every value divided by ten must give a bucket between 0 and ``len(nums) - 1``.
    """
    buckets: list[list[int]] = [[] for _ in nums]
    for value in nums:
        index = _bucket_of(value)
        if not 0 <= index < len(buckets):
            raise ValueError(f"value {value} falls outside the {len(buckets)} buckets")
        buckets[index].append(value)

    result: list[int] = []
    for bucket in buckets:
        result.extend(bubble_sort(bucket))
    return result


def counting_sort(nums: list[int]) -> list[int]:
    """Return a sorted copy of non-negative integers by counting occurrences."""
    if not nums:
        return []
    if min(nums) < 0:
        raise ValueError("counting sort needs non-negative integers")

    counts = [0] * (max(nums) + 1)
    for value in nums:
        counts[value] += 1
    positions = list(accumulate(counts))

    result = [0] * len(nums)
    for value in reversed(nums):
        positions[value] -= 1
        result[positions[value]] = value
    return result


def insertion_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` in place by sinking each item into the sorted prefix; return it."""
    for i in range(1, len(nums)):
        for j in range(i, 0, -1):
            if nums[j - 1] > nums[j]:
                nums[j - 1], nums[j] = nums[j], nums[j - 1]
    return nums


def merge(first: list[int], second: list[int]) -> list[int]:
    """Merge two sorted lists; on equal values the item from ``second`` comes first."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(nums: list[int]) -> list[int]:
    """Return a sorted list by splitting in halves and merging."""
    if len(nums) < 2:
        return nums
    half = len(nums) // 2
    return merge(merge_sort(nums[:half]), merge_sort(nums[half:]))


def radix_sort(nums: list[int]) -> list[int]:
    """Return a sorted copy using least-significant-digit passes.

    Values must lie between 0 and 9999.
    """
    for value in nums:
        if not 0 <= value <= _RADIX_LIMIT:
            raise ValueError(f"value {value} outside 0..{_RADIX_LIMIT}")

    passes = len(str(max(nums))) if nums else 1
    result = list(nums)
    for power in range(passes):
        divisor = 10**power
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // divisor) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
    return result


def selection_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` in place by swapping each position with the smallest rest; return it."""
    for i in range(len(nums)):
        smallest = min(range(i, len(nums)), key=nums.__getitem__)
        nums[i], nums[smallest] = nums[smallest], nums[i]
    return nums