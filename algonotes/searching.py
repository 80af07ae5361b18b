"""Linear and binary search helpers."""

from __future__ import annotations

import bisect
import operator
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Book:
    """A library book with a title and a price."""

    name: str
    price: int


def same_title(first: Book, second: Book) -> bool:
    """Return True when two books share a title, whatever their prices."""
    return first.name == second.name


def linear_search(
    items: Iterable[Any],
    key: Any,
    matches: Callable[[Any, Any], bool] = operator.eq,
) -> Optional[int]:
    """Return the index of the first item for which ``matches(item, key)`` holds.

    Returns None when no item matches.
    """
    return next(
        (index for index, item in enumerate(items) if matches(item, key)), None
    )


def lower_bound(sorted_items: Sequence[Any], key: Any) -> int:
    """Return the first index whose item is not less than ``key``."""
    return bisect.bisect_left(sorted_items, key)


def upper_bound(sorted_items: Sequence[Any], key: Any) -> int:
    """Return the first index whose item is greater than ``key``."""
    return bisect.bisect_right(sorted_items, key)


def contains(sorted_items: Sequence[Any], key: Any) -> bool:
    """Return True if ``key`` occurs in the sorted sequence."""
    index = lower_bound(sorted_items, key)
    return index < len(sorted_items) and not key < sorted_items[index]


def count_sorted(sorted_items: Sequence[Any], key: Any) -> int:
    """Return how many times ``key`` occurs in the sorted sequence."""
    return upper_bound(sorted_items, key) - lower_bound(sorted_items, key)