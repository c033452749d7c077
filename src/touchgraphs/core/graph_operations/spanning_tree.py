"""
Minimum spanning tree with Kruskal's algorithm.

Candidate edges are found with a full pairwise ``are_joined`` scan of the node
set, which is quadratic in its size. Edges are then taken by increasing weight
whenever they join two different trees of a disjoint-set forest.
"""

import logging
from typing import Hashable, Iterable, List, Set, Tuple, TypeVar

from ..graph import GraphProtocol
from ..models import Edge
from ..structures import DisjointSet

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


def minimum_spanning_tree(graph: GraphProtocol[N], nodes: Iterable[N]) -> Set[Edge[N]]:
    """
    Compute a minimum spanning tree of the subgraph induced by nodes.

    Edge direction is kept in the result, but either direction of a pair may
    be chosen. Among equal weights the choice is unspecified, so any
    weight-minimal tree may be returned.

    Args:
        graph: Graph to span
        nodes: Finite set of nodes to span

    Returns:
        ``len(nodes) - 1`` edges when the induced subgraph is connected, a
        minimum spanning forest otherwise

    Raises:
        EdgeNotFoundError: If the graph reports a joined pair as having no weight
    """
    forest = DisjointSet(nodes)

    candidates: List[Tuple[float, Edge[N]]] = [
        (graph.edge_weight(tail, head), Edge(tail, head))
        for tail in forest
        for head in forest
        if graph.are_joined(tail, head)
    ]
    candidates.sort(key=lambda candidate: candidate[0])

    tree: Set[Edge[N]] = set()
    for _, edge in candidates:
        if forest.union(edge.tail, edge.head):
            tree.add(edge)

    logger.debug(
        "Spanning tree of %d nodes built from %d candidate edges", len(forest), len(candidates)
    )
    return tree
