"""Array algorithms: prefix scans, counting, rotation and interval merging."""

from __future__ import annotations

import math
import operator
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate
from typing import MutableSequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest_so_far = accumulate(prices, min)
    return max(price - lowest for price, lowest in zip(prices, lowest_so_far))


def single_number(nums: Sequence[int]) -> int:
    """Return the element that appears once when every other appears twice."""
    if not nums:
        raise ValueError("nums must not be empty")
    return reduce(operator.xor, nums)


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """Return the 1-based positions of two entries of a sorted list summing to ``target``."""
    low, high = 0, len(numbers) - 1
    while low < high:
        total = numbers[low] + numbers[high]
        if total < target:
            low += 1
        elif total > target:
            high -= 1
        else:
            return low + 1, high + 1
    raise ValueError(f"no two numbers sum to {target}")


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Return True if ``nums`` is a non-decreasing sequence rotated by some amount."""
    if not nums:
        return True
    successors = [*nums[1:], nums[0]]
    drops = sum(1 for current, following in zip(nums, successors) if current > following)
    return drops <= 1


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` in place ``k`` steps to the right."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = [*nums[-k:], *nums[:-k]]


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if any value occurs more than once."""
    return len(set(nums)) != len(nums)


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Alternate non-negative and non-positive values, keeping their relative order.

    Even positions take values ``>= 0`` and odd positions values ``<= 0``, so a
    zero may be used by either side.
    """
    evens = (len(nums) + 1) // 2
    odds = len(nums) // 2
    non_negative = [x for x in nums if x >= 0]
    non_positive = [x for x in nums if x <= 0]
    if len(non_negative) < evens or len(non_positive) < odds:
        raise ValueError("nums does not hold enough values of each sign")
    result = [0] * len(nums)
    result[0::2] = non_negative[:evens]
    result[1::2] = non_positive[:odds]
    return result


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return the values occurring more than ``len(nums) // 3`` times.

    Values are listed in the order in which they cross the threshold.
    """
    threshold = len(nums) // 3 + 1
    counts: Counter[int] = Counter()
    result: list[int] = []
    for value in nums:
        counts[value] += 1
        if counts[value] == threshold:
            result.append(value)
    return result


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    zeros = nums.count(0) if isinstance(nums, list) else sum(1 for x in nums if x == 0)
    product = math.prod(x for x in nums if x != 0)
    if zeros == 0:
        return [product // x for x in nums]
    if zeros == 1:
        return [product if x == 0 else 0 for x in nums]
    return [0] * len(nums)


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of ``0..len(nums)`` absent from ``nums``."""
    return reduce(operator.xor, nums, 0) ^ reduce(operator.xor, range(len(nums) + 1), 0)


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the first value seen a second time while scanning ``nums``."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return value
        seen.add(value)
    raise ValueError("nums holds no duplicate")


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Return the values that occur exactly twice, in order of first appearance."""
    return [value for value, count in Counter(nums).items() if count == 2]


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    running = 0
    best = nums[0]
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals, sorted by start."""
    if not intervals:
        raise ValueError("intervals must not be empty")
    pairs = sorted((interval[0], interval[1]) for interval in intervals)
    merged = [list(pairs[0])]
    for start, end in pairs[1:]:
        last = merged[-1]
        if last[1] >= start:
            last[1] = max(last[1], end)
        else:
            merged.append([start, end])
    return merged


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place by counting.

    Any value other than 0 or 1 is counted, and written back, as 2.
    """
    counts = Counter(nums)
    zeros, ones = counts[0], counts[1]
    twos = len(nums) - zeros - ones
    nums[:] = [0] * zeros + [1] * ones + [2] * twos


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Copy the first ``n`` values of ``nums2`` into ``nums1`` after position ``m`` and sort it."""
    nums1[m : m + n] = nums2[:n]
    nums1.sort()