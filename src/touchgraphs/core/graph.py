"""
Graph capability.

A graph is defined solely by three queries: successor enumeration, adjacency
test and edge weight. Nodes and edges are never stored, so the vertex space can
be lazy or infinite. Algorithms that need a closed domain take an explicit
finite node set instead of enumerating the graph.

Only ``successors`` is required; ``are_joined`` and ``edge_weight`` have
defaults derived from it and can be overridden for constant-time lookups.

Example:
    >>> class Syracuse(Graph[int]):
    ...     def successors(self, node: int) -> Set[int]:
    ...         return {node // 2} if node % 2 == 0 else {3 * node + 1}
    >>> list(Syracuse().breadth_first_search(6))
    [6, 3, 10, 5, 16, 8, 4, 2, 1]
"""

from abc import ABC, abstractmethod
from typing import (
    TYPE_CHECKING,
    AbstractSet,
    Callable,
    Dict,
    FrozenSet,
    Generic,
    Hashable,
    Iterable,
    Optional,
    Protocol,
    Set,
    TypeVar,
)

from .config import DEFAULT_MAXIMUM_SEARCH_COUNT
from .exceptions import EdgeNotFoundError

if TYPE_CHECKING:
    from .graph_paths.models import ShortestPathEntry
    from .graph_traversal import GraphIterator
    from .models import Edge, Path

N = TypeVar("N", bound=Hashable)

# Type aliases for the callables accepted by graph_of
SuccessorsFunc = Callable[[N], AbstractSet[N]]
AdjacencyFunc = Callable[[N, N], bool]
EdgeWeightFunc = Callable[[N, N], float]
HeuristicFunc = Callable[[N], float]


class GraphProtocol(Protocol[N]):
    """Protocol defining the queries every algorithm consumes."""

    def successors(self, node: N) -> AbstractSet[N]:
        """Get all nodes n with an edge (node, n)."""
        ...

    def are_joined(self, tail: N, head: N) -> bool:
        """Check if the edge (tail, head) exists."""
        ...

    def edge_weight(self, tail: N, head: N) -> float:
        """Get the weight of the edge (tail, head)."""
        ...


class Graph(ABC, Generic[N]):
    """
    Graph defined by its adjacency rule.

    Subclasses implement ``successors``. Instances must not change while an
    algorithm runs on them; algorithms treat the graph as read-only and keep
    all of their working state call-local.
    """

    @abstractmethod
    def successors(self, node: N) -> AbstractSet[N]:
        """
        Tally all successors of a node.

        A successor of ``node`` is any ``n`` such that the edge (node, n)
        exists. The result must be finite even if the graph is not.

        Args:
            node: Node to get the successors of

        Returns:
            Set of all successor nodes
        """

    def are_joined(self, tail: N, head: N) -> bool:
        """
        Check if the edge (tail, head) exists.

        Override this with a constant time implementation when possible.
        """
        return head in self.successors(tail)

    def edge_weight(self, tail: N, head: N) -> float:
        """
        Get the weight of the edge (tail, head), ``1.0`` for every existing edge.

        Raises:
            EdgeNotFoundError: If the edge doesn't exist
        """
        if not self.are_joined(tail, head):
            raise EdgeNotFoundError(tail, head)
        return 1.0

    # Algorithm entry points

    def breadth_first_search(
        self, origin: N, maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT
    ) -> "GraphIterator[N]":
        """Iterate over nodes reachable from origin, closest first."""
        from .graph_traversal import BFSIterator

        return BFSIterator(self, origin, maximum_search_count)

    def depth_first_search(
        self, origin: N, maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT
    ) -> "GraphIterator[N]":
        """Iterate over nodes reachable from origin, most recently discovered first."""
        from .graph_traversal import DFSIterator

        return DFSIterator(self, origin, maximum_search_count)

    def shortest_path_mapping(
        self,
        origin: N,
        break_nodes: Iterable[N] = (),
        maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
    ) -> Dict[N, "ShortestPathEntry[N]"]:
        """Map every node reached from origin to its (distance, predecessor)."""
        from .graph_paths import shortest_path_mapping

        return shortest_path_mapping(self, origin, break_nodes, maximum_search_count)

    def shortest_path(
        self,
        origin: N,
        destination: N,
        maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
    ) -> "Optional[Path[N]]":
        """Find a shortest path between two nodes, ``None`` if none within budget."""
        from .graph_paths import shortest_path

        return shortest_path(self, origin, destination, maximum_search_count)

    def shortest_paths(
        self, origin: N, maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT
    ) -> "Dict[N, Path[N]]":
        """Find a shortest path from origin to every node reached within budget."""
        from .graph_paths import shortest_paths

        return shortest_paths(self, origin, maximum_search_count)

    def find_path(
        self,
        origin: N,
        destination: N,
        heuristic: Optional[HeuristicFunc] = None,
        maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
    ) -> "Optional[Path[N]]":
        """Find a path with A*, ``None`` if none within budget."""
        from .graph_paths import find_path

        return find_path(self, origin, destination, heuristic, maximum_search_count)

    def strongly_connected_components(self, nodes: Iterable[N]) -> Set[FrozenSet[N]]:
        """Partition nodes into strongly connected components."""
        from .graph_operations.components import ComponentAnalysis

        return ComponentAnalysis.find_strongly_connected_components(self, nodes)

    def connected_components(self, nodes: Iterable[N]) -> Set[FrozenSet[N]]:
        """Partition nodes into weakly connected components."""
        from .graph_operations.components import ComponentAnalysis

        return ComponentAnalysis.find_components(self, nodes)

    def minimum_spanning_tree(self, nodes: Iterable[N]) -> "Set[Edge[N]]":
        """Compute a minimum spanning tree (forest) of the induced subgraph."""
        from .graph_operations.spanning_tree import minimum_spanning_tree

        return minimum_spanning_tree(self, nodes)

    def maximal_cliques(self, nodes: Iterable[N]) -> Set[FrozenSet[N]]:
        """Enumerate the maximal cliques of the induced undirected subgraph."""
        from .graph_operations.cliques import maximal_cliques

        return maximal_cliques(self, nodes)


class _FunctionGraph(Graph[N]):
    """Graph backed by plain callables."""

    def __init__(
        self,
        successors: SuccessorsFunc,
        are_joined: Optional[AdjacencyFunc] = None,
        edge_weight: Optional[EdgeWeightFunc] = None,
    ):
        self._successors = successors
        self._are_joined = are_joined
        self._edge_weight = edge_weight

    def successors(self, node: N) -> AbstractSet[N]:
        return self._successors(node)

    def are_joined(self, tail: N, head: N) -> bool:
        if self._are_joined is None:
            return super().are_joined(tail, head)
        return self._are_joined(tail, head)

    def edge_weight(self, tail: N, head: N) -> float:
        if self._edge_weight is None:
            return super().edge_weight(tail, head)
        return self._edge_weight(tail, head)


def graph_of(
    successors: SuccessorsFunc,
    are_joined: Optional[AdjacencyFunc] = None,
    edge_weight: Optional[EdgeWeightFunc] = None,
) -> Graph:
    """
    Create a graph from its query functions.

    Args:
        successors: Function tallying the successors of a node
        are_joined: Optional adjacency test, derived from successors by default
        edge_weight: Optional weight function, ``1.0`` for existing edges by default

    Returns:
        A graph answering its queries with the given functions

    Example:
        >>> syracuse = graph_of(lambda n: {n // 2} if n % 2 == 0 else {3 * n + 1})
        >>> syracuse.are_joined(5, 16)
        True
    """
    if not callable(successors):
        raise TypeError("successors must be callable")
    return _FunctionGraph(successors, are_joined, edge_weight)
