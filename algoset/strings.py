"""String algorithms: palindromes, windows, compression and the like."""

from __future__ import annotations

import string
from collections import Counter
from itertools import groupby
from typing import MutableSequence

_ALNUM = frozenset(string.ascii_letters + string.digits)


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def is_palindrome(s: str) -> bool:
    """Return True if the ASCII letters and digits of ``s`` form a palindrome, ignoring case."""
    filtered = [ch.lower() for ch in s if ch in _ALNUM]
    return filtered == filtered[::-1]


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the two words, then append what is left of the longer one."""
    shared = min(len(word1), len(word2))
    merged = "".join(a + b for a, b in zip(word1, word2))
    return merged + word1[shared:] + word2[shared:]


def remove_occurrences(s: str, part: str) -> str:
    """Remove the leftmost occurrence of ``part`` until none remains."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    window: set[str] = set()
    left = 0
    best = 0
    for right, ch in enumerate(s):
        while ch in window:
            window.discard(s[left])
            left += 1
        window.add(ch)
        best = max(best, right - left + 1)
    return best


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a mutable sequence of characters in place."""
    chars.reverse()


def first_unique_char(s: str) -> int:
    """Return the index of the first character that occurs once, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)


def compress(chars: MutableSequence[str]) -> int:
    """Run-length compress ``chars`` in place and return the compressed length.

    Each run becomes its character followed by the run length when it is
    longer than one. Elements past the returned length are left untouched.
    """
    out: list[str] = []
    for ch, run in groupby(list(chars)):
        count = sum(1 for _ in run)
        out.append(ch)
        if count > 1:
            out.extend(str(count))
    chars[: len(out)] = out
    return len(out)


def check_inclusion(s1: str, s2: str) -> bool:
    """Return True if some permutation of ``s1`` is a substring of ``s2``."""
    window = len(s1)
    if window > len(s2):
        return False
    target = Counter(s1)
    current = Counter(s2[:window])
    if current == target:
        return True
    for entering, leaving in zip(s2[window:], s2):
        current[entering] += 1
        current[leaving] -= 1
        if current[leaving] == 0:
            del current[leaving]
        if current == target:
            return True
    return False