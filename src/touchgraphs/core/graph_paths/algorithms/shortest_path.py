"""
Dijkstra's shortest path algorithm over implicit graphs.
"""

import logging
from typing import AbstractSet, Dict, Hashable, Iterable, Optional, Tuple, TypeVar

from ...models import Path
from ...structures import BinaryHeap
from ..base import PathFinder
from ..models import ShortestPathEntry
from ..utils import checked_edge_weight

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)

# Frontier entry: (node, tentative distance, predecessor)
_Tile = Tuple[N, float, N]


def _closer(a: _Tile, b: _Tile) -> bool:
    return a[1] < b[1]


class DijkstraFinder(PathFinder[N]):
    """
    Dijkstra shortest path implementation.

    The frontier holds one entry per relaxation; entries for nodes that are
    already finalized are discarded when popped. The search finalizes at most
    ``config.maximum_search_count`` nodes.

    Example:
        >>> finder = DijkstraFinder(graph, SearchConfig(maximum_search_count=100))
        >>> finder.find_path(1, 5)
        Path([1, 3, 6, 5])
    """

    def mapping(
        self, origin: N, break_nodes: Iterable[N] = ()
    ) -> Dict[N, ShortestPathEntry[N]]:
        """
        Compute distance and predecessor of every node reached from origin.

        Args:
            origin: Node the search starts from
            break_nodes: The search stops as soon as one of these is finalized

        Returns:
            Mapping of finalized nodes to their shortest path entry; the origin
            maps to ``(0.0, origin)``

        Raises:
            NegativeWeightError: If a negative edge weight is found
        """
        stop_at: AbstractSet[N] = frozenset(break_nodes)
        budget = self.config.maximum_search_count
        mapping: Dict[N, ShortestPathEntry[N]] = {}

        heap: BinaryHeap[_Tile] = BinaryHeap(_closer)
        heap.insert((origin, 0.0, origin))

        logger.debug("Starting Dijkstra's algorithm from %r", origin)
        with self._search_context("shortest_path_mapping") as memory_manager:
            while heap and len(mapping) < budget:
                memory_manager.check_memory()

                current_node, current_distance, predecessor = heap.pop()
                if current_node in mapping:
                    continue

                mapping[current_node] = ShortestPathEntry(current_distance, predecessor)
                if current_node in stop_at:
                    logger.debug("Reached break node %r", current_node)
                    break

                for successor in self.graph.successors(current_node):
                    weight = checked_edge_weight(self.graph, current_node, successor)
                    heap.insert((successor, current_distance + weight, current_node))
            else:
                if heap:
                    logger.debug("Search budget of %d nodes exhausted", budget)

            self.metrics.nodes_explored = len(mapping)

        return mapping

    def find_path(self, origin: N, destination: N) -> Optional[Path[N]]:
        """
        Find a shortest path between two nodes.

        Returns:
            The path, or None if the destination was not reached within budget
        """
        mapping = self.mapping(origin, (destination,))
        if destination not in mapping:
            return None
        return Path.compile(mapping, origin, destination)

    def find_paths(self, origin: N) -> Dict[N, Path[N]]:
        """Find a shortest path from origin to every node reached within budget."""
        mapping = self.mapping(origin)
        return {
            destination: Path.compile(mapping, origin, destination) for destination in mapping
        }
