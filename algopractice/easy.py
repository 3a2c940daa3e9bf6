"""Small integer and array puzzles: two-sum, roman numerals, palindromes."""

from __future__ import annotations

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_INT32_MIN = -2147483648
_INT32_MAX = 2147483647


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return the indices of two numbers adding up to ``target``, or ``[]``.

    Each value maps to the last index it occurs at. A complement found at
    index 0 or at the current index does not count as a match.
    """
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        other = last_index.get(target - value, 0)
        if other != 0 and other != index:
            return [index, other]
    return []


def roman_to_int(s: str) -> int:
    """Convert a roman numeral to an integer; unknown letters count as zero."""
    result = 0
    previous = 0
    for char in reversed(s):
        value = _ROMAN_VALUES.get(char, 0)
        result += -value if previous > value else value
        previous = value
    return result


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its unique values lead; return their count."""
    if not nums:
        return 0
    last = 0
    for value in nums[1:]:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def remove_element(nums: list[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front in place; return their count."""
    kept = 0
    for value in list(nums):
        if value != val:
            nums[kept] = value
            kept += 1
    return kept


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; return 0 when the result leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    remaining = abs(x)
    reversed_value = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
        if not _INT32_MIN < sign * reversed_value < _INT32_MAX:
            return 0
    return sign * reversed_value


def is_palindrome(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0 or (x % 10 == 0 and x != 0):
        return False
    reversed_half = 0
    while x > reversed_half:
        reversed_half = reversed_half * 10 + x % 10
        x //= 10
    return x == reversed_half or x == reversed_half // 10