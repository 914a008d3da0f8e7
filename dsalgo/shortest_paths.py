"""Shortest paths and minimum spanning trees on weighted graphs."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

Adjacency = Sequence[Iterable[tuple[int, float]]]


class NegativeCycleError(ValueError):
    """Raised when a reachable negative-weight cycle makes distances undefined."""


def dijkstra(adjacency: Adjacency, start: int, end: int) -> float:
    """Shortest distance from start to end; math.inf when end is unreachable.

    adjacency[v] lists (neighbour, weight) pairs with non-negative weights.
    """
    visited: set[int] = set()
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        distance, vertex = heapq.heappop(heap)
        if vertex == end:
            return distance
        if vertex in visited:
            continue
        visited.add(vertex)
        for neighbour, weight in adjacency[vertex]:
            if neighbour not in visited:
                heapq.heappush(heap, (distance + weight, neighbour))
    return math.inf


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from an adjacency matrix.

    A zero entry means there is no edge and becomes math.inf. Diagonal
    entries are never relaxed.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    dist = [[math.inf if weight == 0 else weight for weight in row] for row in matrix]
    for k in range(size):
        for i in range(size):
            for j in range(size):
                if i != j and dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
    return dist


def bellman_ford(
    edges: Iterable[tuple[int, int, float]], node_count: int, start: int, target: int
) -> float:
    """Shortest distance over (from, to, weight) edges; math.inf if unreachable.

    Raises NegativeCycleError if a distance still shrinks on the last pass.
    """
    for vertex in (start, target):
        if not 0 <= vertex < node_count:
            raise IndexError(f"vertex {vertex} out of range")
    edge_list = list(edges)
    dist = [math.inf] * node_count
    dist[start] = 0
    has_cycle = False
    for round_index in range(node_count):
        for source, dest, weight in edge_list:
            if dist[source] != math.inf and dist[dest] > dist[source] + weight:
                if round_index == node_count - 1:
                    has_cycle = True
                dist[dest] = dist[source] + weight
    if has_cycle:
        raise NegativeCycleError("graph has a negative cycle")
    return dist[target]


def prim(adjacency: Adjacency, start: int) -> float:
    """Total weight of a minimum spanning tree of start's component.

    adjacency[v] lists (neighbour, weight) pairs of an undirected graph.
    """
    size = len(adjacency)
    visited: set[int] = set()
    total: float = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap and len(visited) < size:
        weight, vertex = heapq.heappop(heap)
        if vertex in visited:
            continue
        visited.add(vertex)
        total += weight
        for neighbour, edge_weight in adjacency[vertex]:
            if neighbour not in visited:
                heapq.heappush(heap, (edge_weight, neighbour))
    return total