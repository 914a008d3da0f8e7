"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

from collections.abc import Sequence


def failure_table(pattern: Sequence) -> list[int]:
    """For each prefix, the length of its longest proper prefix that is also a suffix."""
    fail = [0] * len(pattern)
    j = 0
    for i in range(1, len(pattern)):
        while j > 0 and pattern[i] != pattern[j]:
            j = fail[j - 1]
        if pattern[i] == pattern[j]:
            j += 1
            fail[i] = j
    return fail


def kmp_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Start indexes of every, possibly overlapping, occurrence of pattern in text."""
    if not pattern:
        return []
    fail = failure_table(pattern)
    matches: list[int] = []
    j = 0
    for i, item in enumerate(text):
        while j > 0 and item != pattern[j]:
            j = fail[j - 1]
        if item == pattern[j]:
            j += 1
            if j == len(pattern):
                matches.append(i - j + 1)
                j = fail[j - 1]
    return matches