"""Permutation and rotation helpers on sequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any


def next_permutation(seq: Sequence[Any]) -> list:
    """Return the lexicographically next arrangement of ``seq`` as a new list.

    When ``seq`` is already the last arrangement (non-increasing), the
    result wraps around to the first one, the ascending order.
    """
    items = list(seq)
    pivot = len(items) - 2
    while pivot >= 0 and not items[pivot] < items[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        items.reverse()
        return items
    successor = len(items) - 1
    while not items[pivot] < items[successor]:
        successor -= 1
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items


def rotate(seq: Sequence[Any], k: int) -> list:
    """Rotate left so that the item at index ``k`` comes first.

    Raises ValueError unless ``0 <= k <= len(seq)``.
    """
    items = list(seq)
    if not 0 <= k <= len(items):
        raise ValueError(f"rotation point {k} outside 0..{len(items)}")
    return items[k:] + items[:k]


def _arrangements(text: str) -> Iterator[str]:
    first = sorted(text)
    current = first
    while True:
        yield "".join(current)
        current = next_permutation(current)
        if current == first:
            return


def distinct_permutations(text: str) -> list[str]:
    """Return every distinct rearrangement of ``text`` in lexicographic order."""
    return list(_arrangements(text))