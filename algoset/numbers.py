"""Prime counting and greatest common divisors."""

from __future__ import annotations

import math
from collections.abc import Sequence


def count_primes(n: int) -> int:
    """Return how many primes are strictly less than ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n < 3:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def brute_gcd(a: int, b: int) -> int:
    """Return the largest divisor of ``a`` in ``1..a`` that also divides ``b``; 0 if none."""
    return max((d for d in range(1, a + 1) if a % d == 0 and b % d == 0), default=0)


def euclid_gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers.

    If either argument is zero the result is zero.
    """
    if a == 0 or b == 0:
        return 0
    if a < 0 or b < 0:
        raise ValueError("arguments must not be negative")
    return math.gcd(a, b)


def find_gcd(nums: Sequence[int]) -> int:
    """Return the gcd of the smallest and largest values of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    return euclid_gcd(min(nums), max(nums))