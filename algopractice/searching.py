"""Binary search over sorted integer lists."""

from __future__ import annotations


def _midpoint(up: int, down: int) -> int:
    total = up + down
    return total // 2 if total >= 0 else -((-total) // 2)


def binary_search(nums: list[int], val: int) -> int:
    """Return the index of ``val`` in sorted ``nums``, or -1 when it is absent."""
    up, down = len(nums) - 1, 0
    for _ in nums:
        mid = _midpoint(up, down)
        if nums[mid] == val:
            return mid
        if nums[mid] < val:
            down = mid + 1
        else:
            up = mid - 1
    return -1


def binary_search_recursive(
    nums: list[int], val: int, up: int | None = None, down: int = 0
) -> int:
    """Recursively search ``nums[down..up]`` for ``val``; return its index or -1."""
    if up is None:
        up = len(nums) - 1
    if up < down:
        return -1
    mid = _midpoint(up, down)
    if nums[mid] == val:
        return mid
    if nums[mid] < val:
        return binary_search_recursive(nums, val, up, mid + 1)
    return binary_search_recursive(nums, val, mid - 1, down)