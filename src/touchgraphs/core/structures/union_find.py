"""
Disjoint-set forest with union by rank and path compression.

Used by the spanning tree and connected components algorithms, which both work
over an explicit finite node set. Nodes are mapped once to contiguous indices,
and the forest is stored as two parallel arrays.
"""

from typing import Dict, Generic, Hashable, Iterable, Iterator, List, TypeVar

N = TypeVar("N", bound=Hashable)


class DisjointSet(Generic[N]):
    """
    Index-based union-find over a fixed set of nodes.

    Following parent links from any element reaches a root whose parent is
    itself. Two nodes are in the same set iff they share a root.

    Example:
        >>> forest = DisjointSet(["A", "B", "C"])
        >>> forest.union("A", "B")
        True
        >>> forest.connected("A", "B"), forest.connected("A", "C")
        (True, False)
    """

    def __init__(self, nodes: Iterable[N]):
        """Initialize one singleton set per distinct node."""
        self._index: Dict[N, int] = {}
        self._nodes: List[N] = []
        for node in nodes:
            if node not in self._index:
                self._index[node] = len(self._nodes)
                self._nodes.append(node)
        self._parent: List[int] = list(range(len(self._nodes)))
        self._rank: List[int] = [0] * len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[N]:
        return iter(self._nodes)

    def _find_index(self, index: int) -> int:
        root = index
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[index] != root:
            self._parent[index], index = root, self._parent[index]
        return root

    def find(self, node: N) -> N:
        """
        Get the representative node of a node's set.

        Raises:
            KeyError: If the node is not part of the forest
        """
        return self._nodes[self._find_index(self._index[node])]

    def union(self, a: N, b: N) -> bool:
        """
        Merge the sets of two nodes.

        Returns:
            True if the nodes were in different sets, False if already joined

        Raises:
            KeyError: If either node is not part of the forest
        """
        root_a = self._find_index(self._index[a])
        root_b = self._find_index(self._index[b])
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True

    def connected(self, a: N, b: N) -> bool:
        """Check whether two nodes share a set."""
        return self._find_index(self._index[a]) == self._find_index(self._index[b])

    def groups(self) -> List[List[N]]:
        """Group the nodes by root, in first-seen order."""
        by_root: Dict[int, List[N]] = {}
        for i, node in enumerate(self._nodes):
            by_root.setdefault(self._find_index(i), []).append(node)
        return list(by_root.values())
