"""Pattern matching and subsequence comparison on strings."""

from __future__ import annotations


def build_lps(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table of ``pattern``.

    Entry ``i`` is the length of the longest proper prefix of
    ``pattern[:i + 1]`` that is also a suffix of it.
    """
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text``, overlaps included.

    Raises ValueError for an empty pattern.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = build_lps(pattern)
    matches: list[int] = []
    j = 0
    for i, char in enumerate(text):
        while j and char != pattern[j]:
            j = lps[j - 1]
        if char == pattern[j]:
            j += 1
            if j == len(pattern):
                matches.append(i + 1 - j)
                j = lps[j - 1]
    return matches


def longest_common_subsequence(first: str, second: str) -> int:
    """Return the length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for a in reversed(first):
        current = [0] * (len(second) + 1)
        for j in range(len(second) - 1, -1, -1):
            if a == second[j]:
                current[j] = 1 + previous[j + 1]
            else:
                current[j] = max(previous[j], current[j + 1])
        previous = current
    return previous[0]