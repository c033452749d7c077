"""
Path model.

A path is an immutable sequence of one or more nodes. It can be decomposed
into edges, measured against a graph, and reduced to a simple path.

Example:
    >>> path = Path([1, 3, 6, 5])
    >>> path.edges()
    [Edge(tail=1, head=3), Edge(tail=3, head=6), Edge(tail=6, head=5)]
    >>> path.length(graph)
    20.0
"""

from typing import (
    TYPE_CHECKING,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Sequence,
    Tuple,
    TypeVar,
    overload,
)

from ..exceptions import PathIndexError
from .edge import Edge

if TYPE_CHECKING:
    from ..graph import Graph
    from ..graph_paths.models import ShortestPathEntry

N = TypeVar("N", bound=Hashable)


class Path(Sequence[N]):
    """
    Immutable node sequence through a graph.

    Paths are produced by the shortest-path and A* finders. They behave as
    read-only sequences and compare equal to other paths with the same nodes.
    """

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Iterable[N]):
        """
        Initialize a path from its nodes.

        Args:
            nodes: Nodes in order of traversal

        Raises:
            ValueError: If no node is given
        """
        self._nodes: Tuple[N, ...] = tuple(nodes)
        if not self._nodes:
            raise ValueError("a path must contain at least one node")

    @classmethod
    def from_edges(cls, edges: Sequence[Edge[N]]) -> "Path[N]":
        """
        Build a path from consecutive edges.

        The path holds every edge tail followed by the last edge head. Edges
        are not checked for continuity.

        Raises:
            ValueError: If no edge is given
        """
        if not edges:
            raise ValueError("a path must contain at least one edge")
        return cls([edge.tail for edge in edges] + [edges[-1].head])

    @classmethod
    def compile(
        cls, mapping: Dict[N, "ShortestPathEntry[N]"], origin: N, destination: N
    ) -> "Path[N]":
        """
        Reconstruct a path from a shortest-path mapping.

        Walks predecessor links from the destination back to the origin, then
        reverses the collected nodes.

        Args:
            mapping: Node to (distance, predecessor) mapping rooted at origin
            origin: Root of the mapping
            destination: Node to reach, must be a key of the mapping
        """
        nodes = []
        current = destination
        while current != origin:
            nodes.append(current)
            current = mapping[current].predecessor
        nodes.append(origin)
        nodes.reverse()
        return cls(nodes)

    @property
    def origin(self) -> N:
        """First node of the path."""
        return self._nodes[0]

    @property
    def destination(self) -> N:
        """Last node of the path."""
        return self._nodes[-1]

    def node(self, index: int) -> N:
        """
        Get the node at a position.

        Raises:
            PathIndexError: If index is not in 0..len-1
        """
        if not 0 <= index < len(self._nodes):
            raise PathIndexError(
                f"Index out of range : {index} not in 0..{len(self._nodes) - 1}"
            )
        return self._nodes[index]

    def edge(self, index: int) -> Edge[N]:
        """
        Get the edge leaving the node at a position.

        Raises:
            PathIndexError: If index is not in 0..len-2
        """
        if not 0 <= index < len(self._nodes) - 1:
            raise PathIndexError(
                f"Index out of range : {index} not in 0..{len(self._nodes) - 2}"
            )
        return Edge(self._nodes[index], self._nodes[index + 1])

    def edges(self) -> List[Edge[N]]:
        """Get the consecutive node pairs of the path."""
        return [Edge(tail, head) for tail, head in zip(self._nodes, self._nodes[1:])]

    def length(self, graph: "Graph[N]") -> float:
        """
        Sum the weights of the path's edges in a graph.

        Raises:
            EdgeNotFoundError: If an edge of the path is missing from the graph
        """
        return sum((graph.edge_weight(e.tail, e.head) for e in self.edges()), 0.0)

    def to_simple_path(self) -> "Path[N]":
        """
        Remove the loops of the path.

        Scanning forward, every node jumps to its last occurrence in the path,
        which skips the loop between the two occurrences. The result keeps the
        same first and last node and repeats no node.
        """
        last_index = {node: i for i, node in enumerate(self._nodes)}
        simple = []
        i = 0
        while i < len(self._nodes):
            node = self._nodes[i]
            simple.append(node)
            i = last_index[node] + 1
        return Path(simple)

    @overload
    def __getitem__(self, index: int) -> N: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[N, ...]: ...

    def __getitem__(self, index):
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[N]:
        return iter(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._nodes == other._nodes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._nodes)

    def __repr__(self) -> str:
        return f"Path({list(self._nodes)!r})"

    def __str__(self) -> str:
        return str(list(self._nodes))
