"""Priority-queue based selections."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass
class Person:
    """A person with a name and an age."""

    name: str
    age: int


def youngest(people: Iterable[Person], k: int = 3) -> list[Person]:
    """Return the ``k`` youngest people, youngest first.

    Raises ValueError when ``k`` is negative or exceeds the number of people.
    """
    crowd = list(people)
    if not 0 <= k <= len(crowd):
        raise ValueError(f"cannot take {k} of {len(crowd)} people")
    return heapq.nsmallest(k, crowd, key=lambda person: person.age)


def drain_min(values: Iterable[Any]) -> list:
    """Pop every value from a min-heap, smallest first."""
    heap = list(values)
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]


def drain_max(values: Iterable[Any]) -> list:
    """Pop every value from a max-heap, largest first."""
    heap = [_Reversed(value) for value in values]
    heapq.heapify(heap)
    return [heapq.heappop(heap).value for _ in range(len(heap))]


@dataclass(frozen=True)
class _Reversed:
    value: Any

    def __lt__(self, other: _Reversed) -> bool:
        return other.value < self.value