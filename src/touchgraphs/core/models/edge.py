"""
Edge model.

An edge is a plain directed pair of nodes. The graph itself never stores edges;
they are only produced as results (spanning trees, path decompositions).
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Hashable, TypeVar

if TYPE_CHECKING:
    from ..graph import Graph

N = TypeVar("N", bound=Hashable)


@dataclass(frozen=True)
class Edge(Generic[N]):
    """
    Directed node pair.

    Two edges are equal iff they have the same tail and the same head, so
    ``Edge(a, b) != Edge(b, a)`` unless ``a == b``.

    Attributes:
        tail (N): Origin node of the edge
        head (N): Destination node of the edge

    Example:
        >>> edge = Edge(1, 2)
        >>> edge.weight(graph)
        7.0
    """

    tail: N
    head: N

    def weight(self, graph: "Graph[N]") -> float:
        """
        Get the weight of this edge in a graph.

        Raises:
            EdgeNotFoundError: If the graph holds no such edge
        """
        return graph.edge_weight(self.tail, self.head)

    def reversed(self) -> "Edge[N]":
        """Return the edge with tail and head swapped."""
        return Edge(self.head, self.tail)

    def __str__(self) -> str:
        return f"({self.tail}, {self.head})"
