"""Connected component analysis over an explicit node set.

This module provides functionality for partitioning a finite set of nodes of a
possibly infinite graph:
- Finding strongly connected components (nodes mutually reachable following
  edge direction), with Tarjan's algorithm
- Finding weakly connected components (nodes reachable ignoring edge
  direction), with a disjoint-set forest

Both analyses only follow edges whose endpoints are in the given node set, so
they terminate whatever the size of the graph.
"""

import logging
from typing import Dict, FrozenSet, Hashable, Iterable, Iterator, List, Set, Tuple, TypeVar

from ..graph import GraphProtocol
from ..structures import DisjointSet

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


class ComponentAnalysis:
    """Connected component analysis for implicit graphs.

    The analysis methods are implemented as static methods to provide
    utility-style functionality that can be used with any graph without
    maintaining state between calls.
    """

    @staticmethod
    def find_strongly_connected_components(
        graph: GraphProtocol[N], nodes: Iterable[N]
    ) -> Set[FrozenSet[N]]:
        """Find the strongly connected components of the subgraph induced by nodes.

        A strongly connected component (SCC) is a maximal set of nodes where
        every node is reachable from every other node following the direction
        of edges. This method runs Tarjan's algorithm with an explicit work
        stack instead of recursion, so its depth is not bounded by the
        interpreter's recursion limit.

        Args:
            graph: The graph to analyze.
            nodes: Finite set of nodes to partition.

        Returns:
            Set of components; every node of ``nodes`` is in exactly one.

        Example:
            >>> graph = graph_of(lambda n: {"A": {"B"}, "B": {"A", "C"}, "C": set()}[n])
            >>> ComponentAnalysis.find_strongly_connected_components(graph, "ABC")
            {frozenset({'A', 'B'}), frozenset({'C'})}
        """
        domain: Dict[N, None] = dict.fromkeys(nodes)
        indices: Dict[N, int] = {}
        lowlinks: Dict[N, int] = {}
        stack: List[N] = []
        on_stack: Set[N] = set()
        components: Set[FrozenSet[N]] = set()

        def discover(node: N) -> Tuple[N, Iterator[N]]:
            indices[node] = len(indices)
            lowlinks[node] = indices[node]
            stack.append(node)
            on_stack.add(node)
            return node, iter(graph.successors(node))

        for root in domain:
            if root in indices:
                continue

            # Each frame resumes the successor iteration of its node
            work = [discover(root)]
            while work:
                node, successors = work[-1]
                descended = False
                for successor in successors:
                    if successor not in domain:
                        continue
                    if successor not in indices:
                        work.append(discover(successor))
                        descended = True
                        break
                    if successor in on_stack:
                        lowlinks[node] = min(lowlinks[node], indices[successor])
                if descended:
                    continue

                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlinks[parent] = min(lowlinks[parent], lowlinks[node])

                if lowlinks[node] == indices[node]:
                    component = set()
                    while True:
                        member = stack.pop()
                        on_stack.remove(member)
                        component.add(member)
                        if member == node:
                            break
                    components.add(frozenset(component))

        logger.debug(
            "Found %d strongly connected components over %d nodes", len(components), len(domain)
        )
        return components

    @staticmethod
    def find_components(graph: GraphProtocol[N], nodes: Iterable[N]) -> Set[FrozenSet[N]]:
        """Find the weakly connected components of the subgraph induced by nodes.

        A weakly connected component is a maximal set of nodes where every
        pair is linked by a path when ignoring edge directions. Every node is
        united with each of its successors inside ``nodes``; successors
        outside the set are ignored.

        Args:
            graph: The graph to analyze.
            nodes: Finite set of nodes to partition.

        Returns:
            Set of components whose union is exactly ``nodes``.
        """
        forest = DisjointSet(nodes)
        for node in forest:
            for successor in graph.successors(node):
                if successor in forest:
                    forest.union(node, successor)

        components = {frozenset(group) for group in forest.groups()}
        logger.debug("Found %d connected components over %d nodes", len(components), len(forest))
        return components
