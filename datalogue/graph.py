"""Directed graph of rule dependencies."""

from __future__ import annotations

from collections.abc import Iterator


class Graph:
    """A directed graph whose nodes are integer ids, each printed as R<id>."""

    def __init__(self, size: int) -> None:
        self._edges: dict[int, set[int]] = {node: set() for node in range(size)}

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge from source to target, creating source if absent."""
        self._edges.setdefault(source, set()).add(target)

    def neighbours(self, node: int) -> list[int]:
        """The nodes that node has edges to, in ascending order."""
        return sorted(self._edges[node])

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._edges))

    def __str__(self) -> str:
        return "".join(
            f"R{node}:" + ",".join(f"R{n}" for n in self.neighbours(node)) + "\n"
            for node in self
        )