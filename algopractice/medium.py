"""Two-pointer, binary-search and matrix puzzles."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter


def max_area(height: list[int]) -> int:
    """Return the largest water area held between two of the lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        width = right - left
        if height[left] < height[right]:
            best = max(best, height[left] * width)
            left += 1
        else:
            best = max(best, height[right] * width)
            right -= 1
    return best


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places in place.

    ``k`` must lie between 0 and ``len(nums)``.
    """
    if not 0 <= k <= len(nums):
        raise ValueError(f"rotation {k} out of range for length {len(nums)}")
    nums.reverse()
    nums[:k] = nums[:k][::-1]
    nums[k:] = nums[k:][::-1]


def min_sub_array_len(target: int, nums: list[int]) -> int:
    """Return the length of the shortest run summing to at least ``target``, or 0."""
    best = None
    left = 0
    total = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target:
            length = right + 1 - left
            best = length if best is None else min(best, length)
            total -= nums[left]
            left += 1
    if best is None:
        return 0
    return max(best, 0)


def min_sub_array_len2(target: int, nums: list[int]) -> int:
    """Same as :func:`min_sub_array_len`, growing and shrinking one window.

    ``nums`` must not be empty.
    """
    left = right = 0
    best = 0
    window = nums[0]
    while right < len(nums):
        if window >= target:
            length = right - left + 1
            best = length if best == 0 else min(best, length)
            window -= nums[left]
            left += 1
        else:
            right += 1
            if right < len(nums):
                window += nums[right]
    return best


def find_kth_largest(nums: list[int], k: int) -> int:
    """Return the k-th largest value; sorts ``nums`` in place."""
    if not 1 <= k <= len(nums):
        raise IndexError(f"k={k} out of range for {len(nums)} items")
    nums.sort()
    return nums[len(nums) - k]


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest ASCII substring without repeated characters."""
    counts: Counter[str] = Counter()
    left = 0
    best = 0
    for right, char in enumerate(s):
        if ord(char) >= 128:
            raise ValueError(f"non-ASCII character {char!r} at position {right}")
        counts[char] += 1
        while counts[char] > 1:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right + 1 - left)
    return best


def search_range(nums: list[int], target: int) -> list[int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def frequency_sort(s: str) -> str:
    """Order characters by descending frequency, ties by descending code point."""
    counts = Counter(s)
    return "".join(sorted(s, key=lambda char: (-counts[char], -ord(char))))


def can_jump(nums: list[int]) -> bool:
    """Tell whether the last index can be reached from the first."""
    reach = 0
    for index, step in enumerate(nums):
        if reach < index:
            return False
        reach = max(reach, index + step)
    return True


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0


def set_zeroes_constant_space(matrix: list[list[int]]) -> None:
    """Like :func:`set_zeroes`, keeping the markers in the first row and column."""
    first_col_zero = False
    cols = len(matrix[0])
    for row in matrix:
        if row[0] == 0:
            first_col_zero = True
        for j in range(1, cols):
            if row[j] == 0:
                matrix[0][j] = 0
                row[0] = 0

    for row in matrix[1:]:
        for j in range(1, cols):
            if row[0] == 0 or matrix[0][j] == 0:
                row[j] = 0

    if matrix[0][0] == 0:
        matrix[0][:] = [0] * cols

    if first_col_zero:
        for row in matrix:
            row[0] = 0


def _half_toward_zero(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def search_matrix(matrix: list[list[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows run on in sorted order."""
    for row in matrix:
        if row[-1] == target:
            return True
        if row[-1] > target:
            high, low = len(row) - 1, 0
            for _ in row:
                mid = _half_toward_zero(high + low)
                if row[mid] == target:
                    return True
                if row[mid] < target:
                    low = mid + 1
                elif row[mid] > target:
                    high = mid - 1
            return False
    return False