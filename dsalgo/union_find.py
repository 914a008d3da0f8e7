"""Disjoint-set forest with path compression."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over 0..size-1; the smaller root becomes the representative."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parents = list(range(size))

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parents):
            raise IndexError(f"node {node} out of range")

    def find(self, target: int) -> int:
        """Representative of target's set, compressing the path on the way."""
        self._check(target)
        parents = self._parents
        root = target
        while parents[root] != root:
            root = parents[root]
        while parents[target] != root:
            parents[target], target = root, parents[target]
        return root

    def union(self, a: int, b: int) -> None:
        """Join the sets of a and b under the smaller of their roots."""
        a_root, b_root = self.find(a), self.find(b)
        if a_root < b_root:
            self._parents[b_root] = a_root
        else:
            self._parents[a_root] = b_root