"""
A* path finding over implicit graphs.

Frontier mechanics are those of Dijkstra, but entries are ordered by accumulated
distance plus a heuristic estimate of the remaining distance, and the search
halts as soon as the destination is popped. With an admissible, non-negative
heuristic the returned path is a shortest one; admissibility is not checked.
"""

import logging
from typing import Callable, Dict, Hashable, NamedTuple, Optional, TypeVar

from ...config import SearchConfig
from ...graph import GraphProtocol
from ...models import Path
from ...structures import BinaryHeap
from ..base import PathFinder
from ..models import ShortestPathEntry
from ..utils import checked_edge_weight, zero_heuristic

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


class _Candidate(NamedTuple):
    node: Hashable
    priority: float
    distance: float
    predecessor: Hashable


def _more_promising(a: _Candidate, b: _Candidate) -> bool:
    return a.priority < b.priority


class AStarFinder(PathFinder[N]):
    """
    A* implementation guided by a caller-supplied heuristic.

    Attributes:
        heuristic: Estimate of the remaining distance from a node to the
            destination. Defaults to 0, which degrades to Dijkstra.
    """

    def __init__(
        self,
        graph: GraphProtocol[N],
        config: Optional[SearchConfig] = None,
        heuristic: Optional[Callable[[N], float]] = None,
    ):
        super().__init__(graph, config)
        self.heuristic = heuristic or zero_heuristic

    def find_path(self, origin: N, destination: N) -> Optional[Path[N]]:
        """
        Find a path between two nodes.

        Returns:
            The path, or None if the frontier emptied or the budget ran out
            before the destination was popped

        Raises:
            NegativeWeightError: If a negative edge weight is found
        """
        budget = self.config.maximum_search_count
        mapping: Dict[N, ShortestPathEntry[N]] = {}

        heap: BinaryHeap[_Candidate] = BinaryHeap(_more_promising)
        heap.insert(_Candidate(origin, self.heuristic(origin), 0.0, origin))

        found = False
        logger.debug("Starting A* from %r to %r", origin, destination)
        with self._search_context("find_path") as memory_manager:
            while heap and len(mapping) < budget:
                memory_manager.check_memory()

                current = heap.pop()
                if current.node in mapping:
                    continue

                mapping[current.node] = ShortestPathEntry(current.distance, current.predecessor)
                if current.node == destination:
                    found = True
                    break

                for successor in self.graph.successors(current.node):
                    weight = checked_edge_weight(self.graph, current.node, successor)
                    distance = current.distance + weight
                    heap.insert(
                        _Candidate(
                            successor, distance + self.heuristic(successor), distance, current.node
                        )
                    )

            self.metrics.nodes_explored = len(mapping)

        if not found:
            logger.debug("No path found from %r to %r", origin, destination)
            return None
        return Path.compile(mapping, origin, destination)
