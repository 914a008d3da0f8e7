"""Adjacency-list graphs and their breadth- and depth-first traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _walk_depth_first(
    adjacency: Sequence[Iterable[int]], start: int, visited: set[int], order: list[int]
) -> None:
    stack = [iter(adjacency[start])]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(iter(adjacency[nxt]))
                break
        else:
            stack.pop()


def bfs_from(adjacency: Sequence[Iterable[int]], start: int) -> list[int]:
    """Vertices reachable from start, in breadth-first order."""
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        current = queue.popleft()
        order.append(current)
        for nxt in adjacency[current]:
            if nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)
    return order


def dfs_from(adjacency: Sequence[Iterable[int]], start: int) -> list[int]:
    """Vertices reachable from start, in depth-first order."""
    order = [start]
    _walk_depth_first(adjacency, start, {start}, order)
    return order


class AdjacencyList:
    """A directed graph on vertices 0..size-1, edges kept in insertion order."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._edges: list[list[int]] = [[] for _ in range(size)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._edges):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, vertex: int, target: int) -> None:
        """Append an edge from vertex to target."""
        self._check(vertex)
        self._check(target)
        self._edges[vertex].append(target)

    def __len__(self) -> int:
        return len(self._edges)

    def __getitem__(self, vertex: int) -> tuple[int, ...]:
        self._check(vertex)
        return tuple(self._edges[vertex])

    def __str__(self) -> str:
        return "\n".join(
            f"V({vertex}) {{ " + "".join(f"[{t}] -> " for t in targets) + "NULL }"
            for vertex, targets in enumerate(self._edges)
        )

    def dfs(self) -> list[int]:
        """Depth-first order over every vertex, starting new trees in vertex order."""
        visited: set[int] = set()
        order: list[int] = []
        for vertex in range(len(self._edges)):
            if vertex not in visited:
                visited.add(vertex)
                order.append(vertex)
                _walk_depth_first(self._edges, vertex, visited, order)
        return order

    def bfs(self) -> list[int]:
        """Breadth-first order over every vertex.

        Each step queues the next unvisited vertex number and then expands one
        queued vertex, so new starting points join the same queue.
        """
        visited: set[int] = set()
        queue: deque[int] = deque()
        order: list[int] = []
        for vertex in range(len(self._edges)):
            if vertex not in visited:
                visited.add(vertex)
                queue.append(vertex)
            if queue:
                current = queue.popleft()
                order.append(current)
                for nxt in self._edges[current]:
                    if nxt not in visited:
                        visited.add(nxt)
                        queue.append(nxt)
        return order