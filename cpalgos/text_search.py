"""Pattern matching with KMP and longest common subsequence."""

from __future__ import annotations

from collections.abc import Sequence


def prefix_function(pattern: Sequence) -> list[int]:
    """For each position, the length of the longest proper border of the prefix ending there."""
    lps = [0] * len(pattern)
    length = 0
    for i in range(1, len(pattern)):
        while length and pattern[i] != pattern[length]:
            length = lps[length - 1]
        if pattern[i] == pattern[length]:
            length += 1
        lps[i] = length
    return lps


def kmp_search(pattern: Sequence, text: Sequence) -> list[int]:
    """Start positions of every (possibly overlapping) occurrence of ``pattern`` in ``text``."""
    if len(pattern) == 0:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    matches = []
    j = 0
    for i, item in enumerate(text):
        while j and item != pattern[j]:
            j = lps[j - 1]
        if item == pattern[j]:
            j += 1
            if j == len(pattern):
                matches.append(i - j + 1)
                j = lps[j - 1]
    return matches


def lcs_length(first: Sequence, second: Sequence) -> int:
    """Length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]