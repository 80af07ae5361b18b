"""An undirected weighted graph kept as adjacency lists."""

from __future__ import annotations


class WeightedGraph:
    """Undirected graph on nodes ``0 .. size - 1`` with weighted edges."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("graph size must not be negative")
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"node {node} outside 0..{len(self._adjacency) - 1}")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` in both directions with ``weight``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def neighbours(self, node: int) -> list[tuple[int, int]]:
        """Return ``(neighbour, weight)`` pairs in insertion order."""
        self._check(node)
        return list(self._adjacency[node])

    def format(self) -> str:
        """Render one adjacency line per node."""
        return "".join(
            f"Linked list {node} -> "
            + "".join(f"({other},{weight})," for other, weight in edges)
            + "\n"
            for node, edges in enumerate(self._adjacency)
        )