"""Union-Find data structure backing line grouping.

Elements are dense integer ids (Line Record positions), so parents and
ranks live in two flat lists rather than a node graph.
"""

from __future__ import annotations


class UnionFind:
    """Union-Find (disjoint set) with path compression and union by rank."""

    __slots__ = ("_parent", "_rank")

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Find root with full path compression.

        Every node visited on the way up ends pointing directly at the root.
        """
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> None:
        """Merge sets containing a and b.

        The lower-rank root goes under the higher-rank one. On equal rank,
        b's root goes under a's root and a's root rank grows by one.
        """
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return
        if self._rank[ra] < self._rank[rb]:
            self._parent[ra] = rb
        elif self._rank[ra] > self._rank[rb]:
            self._parent[rb] = ra
        else:
            self._parent[rb] = ra
            self._rank[ra] += 1

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def groups(self) -> dict[int, list[int]]:
        """Return all groups as root -> member indices.

        Groups appear in order of their lowest member index and members
        keep ascending order.
        """
        result: dict[int, list[int]] = {}
        for i in range(len(self._parent)):
            root = self.find(i)
            result.setdefault(root, []).append(i)
        return result
