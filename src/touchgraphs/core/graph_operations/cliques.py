"""
Maximal clique enumeration with the pivoted Bron-Kerbosch algorithm.

Adjacency is assumed symmetric: on a directed graph the result is only
meaningful for the undirected graph the successor sets describe.
"""

import logging
from typing import AbstractSet, Dict, FrozenSet, Hashable, Iterable, Set, TypeVar

from ..graph import GraphProtocol

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


def maximal_cliques(graph: GraphProtocol[N], nodes: Iterable[N]) -> Set[FrozenSet[N]]:
    """
    Enumerate the maximal cliques of the subgraph induced by nodes.

    The search keeps a current clique R, the candidates P that can extend it
    and the nodes X already excluded in this branch. A pivot maximizing its
    successor count is taken from P | X, and only the candidates that are not
    neighbors of the pivot are branched on.

    Args:
        graph: Undirected graph to search
        nodes: Finite set of nodes to search

    Returns:
        Every maximal clique; an empty node set yields the empty clique

    Example:
        >>> triangle = graph_of(lambda n: {0, 1, 2} - {n})
        >>> maximal_cliques(triangle, {0, 1, 2})
        {frozenset({0, 1, 2})}
    """
    neighbors_cache: Dict[N, FrozenSet[N]] = {}

    def neighbors(node: N) -> FrozenSet[N]:
        # Self-loops are not clique edges
        if node not in neighbors_cache:
            neighbors_cache[node] = frozenset(graph.successors(node)) - {node}
        return neighbors_cache[node]

    cliques: Set[FrozenSet[N]] = set()

    def bron_kerbosch(r: FrozenSet[N], p: Set[N], x: Set[N]) -> None:
        if not p and not x:
            cliques.add(r)
            return

        pivot = max(p | x, key=lambda node: len(graph.successors(node)))
        for v in list(p - neighbors(pivot)):
            v_neighbors: AbstractSet[N] = neighbors(v)
            bron_kerbosch(r | {v}, p & v_neighbors, x & v_neighbors)
            p.remove(v)
            x.add(v)

    bron_kerbosch(frozenset(), set(nodes), set())
    logger.debug("Found %d maximal cliques", len(cliques))
    return cliques
