"""Graph path finding functionality."""

from typing import Callable, Dict, Hashable, Iterable, Optional, TypeVar

from ..config import DEFAULT_MAXIMUM_SEARCH_COUNT, SearchConfig
from ..graph import GraphProtocol
from ..models import Path
from .algorithms import AStarFinder, DijkstraFinder
from .base import PathFinder
from .models import PerformanceMetrics, ShortestPathEntry

N = TypeVar("N", bound=Hashable)

__all__ = [
    "AStarFinder",
    "DijkstraFinder",
    "PathFinder",
    "PerformanceMetrics",
    "ShortestPathEntry",
    "find_path",
    "shortest_path",
    "shortest_path_mapping",
    "shortest_paths",
]


def shortest_path_mapping(
    graph: GraphProtocol[N],
    origin: N,
    break_nodes: Iterable[N] = (),
    maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
) -> Dict[N, ShortestPathEntry[N]]:
    """
    Map every node reached from origin to its (distance, predecessor).

    Args:
        graph: Graph to search
        origin: Node the search starts from
        break_nodes: The search stops at the first of these it finalizes
        maximum_search_count: Maximum number of finalized nodes

    Raises:
        NegativeWeightError: If a negative edge weight is found
    """
    finder = DijkstraFinder(graph, SearchConfig.from_count(maximum_search_count))
    return finder.mapping(origin, break_nodes)


def shortest_path(
    graph: GraphProtocol[N],
    origin: N,
    destination: N,
    maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
) -> Optional[Path[N]]:
    """Find a shortest path between two nodes, ``None`` if none within budget."""
    finder = DijkstraFinder(graph, SearchConfig.from_count(maximum_search_count))
    return finder.find_path(origin, destination)


def shortest_paths(
    graph: GraphProtocol[N],
    origin: N,
    maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
) -> Dict[N, Path[N]]:
    """Find a shortest path from origin to every node reached within budget."""
    finder = DijkstraFinder(graph, SearchConfig.from_count(maximum_search_count))
    return finder.find_paths(origin)


def find_path(
    graph: GraphProtocol[N],
    origin: N,
    destination: N,
    heuristic: Optional[Callable[[N], float]] = None,
    maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
) -> Optional[Path[N]]:
    """
    Find a path between two nodes with A*.

    Args:
        graph: Graph to search
        origin: Node the search starts from
        destination: Node to reach
        heuristic: Admissible estimate of the remaining distance, 0 by default
        maximum_search_count: Maximum number of finalized nodes

    Returns:
        The path, or None if the destination was not reached within budget
    """
    finder = AStarFinder(graph, SearchConfig.from_count(maximum_search_count), heuristic)
    return finder.find_path(origin, destination)
