"""Binary search over sorted data and over an answer range."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the sorted ``nums``, or -1 if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] > target:
            high = mid - 1
        elif nums[mid] < target:
            low = mid + 1
        else:
            return mid
    return -1


def can_eat_in_time(piles: Sequence[int], k: int, h: int) -> bool:
    """Return True if eating ``k`` bananas an hour clears every pile within ``h`` hours."""
    if k <= 0:
        raise ValueError(f"eating speed must be positive, got {k}")
    hours = sum(-(-pile // k) for pile in piles)
    return hours <= h


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the smallest speed that clears all piles within ``h`` hours.

    If no speed up to the largest pile suffices, one more than it is returned.
    """
    low, high = 1, max(piles, default=0)
    while low <= high:
        mid = low + (high - low) // 2
        if can_eat_in_time(piles, mid, h):
            high = mid - 1
        else:
            low = mid + 1
    return low