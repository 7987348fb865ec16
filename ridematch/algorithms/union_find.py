"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable


class UnionFind:
    """Tracks a partition of node ids into disjoint components.

    Ids never registered before are added lazily as singleton components on
    first lookup, so callers may pass edges that reference unknown nodes.

    Example:
        uf = UnionFind(["A", "B", "C"])
        uf.union("A", "B")   # True
        uf.union("B", "A")   # False, already joined
        uf.find("A") == uf.find("B")
    """

    def __init__(self, nodes: Iterable[Hashable] = ()) -> None:
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}
        self._components = 0
        for node in nodes:
            self.add(node)

    def add(self, node: Hashable) -> None:
        """Register ``node`` as its own component if not yet known."""
        if node not in self.parent:
            self.parent[node] = node
            self.rank[node] = 0
            self._components += 1

    def find(self, node: Hashable) -> Hashable:
        """Return the representative of ``node``'s component.

        Every node visited on the way to the root is re-pointed directly at it.
        """
        self.add(node)

        root = node
        while self.parent[root] != root:
            root = self.parent[root]

        while node != root:
            next_node = self.parent[node]
            self.parent[node] = root
            node = next_node

        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the components of ``a`` and ``b``.

        Returns:
            True if two components were merged, False if already joined.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        elif self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1

        self._components -= 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    @property
    def component_count(self) -> int:
        """Number of disjoint components among registered ids."""
        return self._components

    def __contains__(self, node: object) -> bool:
        return node in self.parent

    def __len__(self) -> int:
        return len(self.parent)
