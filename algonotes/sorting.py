"""Classic comparison sorts and a few ordering helpers.

Every sort returns a new list and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Optional


def bubble_sort(
    items: Iterable[Any],
    key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False,
) -> list:
    """Sort with bubble sort; stable, with optional ``key`` and ``reverse``."""
    result = list(items)
    keyed = [key(item) for item in result] if key else list(result)

    def out_of_order(a: Any, b: Any) -> bool:
        return a < b if reverse else a > b

    for done in range(len(result)):
        swapped = False
        for j in range(len(result) - 1 - done):
            if out_of_order(keyed[j], keyed[j + 1]):
                keyed[j], keyed[j + 1] = keyed[j + 1], keyed[j]
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list:
    """Sort ascending with insertion sort."""
    result: list = []
    for current in items:
        position = len(result)
        while position and current < result[position - 1]:
            position -= 1
        result.insert(position, current)
    return result


def _merge(left: list, right: list) -> list:
    merged: list = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list:
    """Sort ascending with top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _sift_down(heap: list, size: int, index: int) -> None:
    while True:
        greatest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and heap[child] > heap[greatest]:
                greatest = child
        if greatest == index:
            return
        heap[index], heap[greatest] = heap[greatest], heap[index]
        index = greatest


def heap_sort(items: Iterable[Any]) -> list:
    """Sort ascending with an in-place max-heap on a copy of ``items``."""
    heap = list(items)
    for index in range((len(heap) - 2) // 2, -1, -1):
        _sift_down(heap, len(heap), index)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def sort_by_length_desc(strings: Iterable[str]) -> list[str]:
    """Order strings longest first, equal lengths in lexicographic order."""
    return sorted(strings, key=lambda s: (-len(s), s))


def sort_by_distance(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Order points by squared distance from the origin, ties by x."""
    return sorted(points, key=lambda p: (p[0] * p[0] + p[1] * p[1], p[0]))