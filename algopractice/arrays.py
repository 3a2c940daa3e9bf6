"""Introductory array exercises."""

from __future__ import annotations


def find_max_consecutive_ones(nums: list[int]) -> int:
    """Return the length of the longest run of ones."""
    best = run = 0
    for value in nums:
        if value == 1:
            run += 1
            best = max(best, run)
        else:
            run = 0
    return best


def digit_count(x: int) -> int:
    """Return how many decimal digits ``x`` has, ignoring its sign."""
    return len(str(abs(x)))


def find_numbers(nums: list[int]) -> int:
    """Count the numbers that have an even number of digits."""
    return sum(1 for value in nums if digit_count(value) % 2 == 0)


def sorted_squares(nums: list[int]) -> list[int]:
    """Return the squares of a sorted list, in ascending order."""
    left, right = 0, len(nums) - 1
    descending = []
    while left <= right:
        left_square = nums[left] * nums[left]
        right_square = nums[right] * nums[right]
        if right_square > left_square:
            descending.append(right_square)
            right -= 1
        else:
            descending.append(left_square)
            left += 1
    descending.reverse()
    return descending