"""Core graph functionality."""

from .config import DEFAULT_MAXIMUM_SEARCH_COUNT, SearchConfig
from .exceptions import (
    EdgeNotFoundError,
    GraphOperationError,
    NegativeWeightError,
    PathIndexError,
)
from .graph import Graph, GraphProtocol, graph_of
from .graph_operations import ComponentAnalysis, maximal_cliques, minimum_spanning_tree
from .graph_paths import (
    AStarFinder,
    DijkstraFinder,
    ShortestPathEntry,
    find_path,
    shortest_path,
    shortest_path_mapping,
    shortest_paths,
)
from .graph_traversal import BFSIterator, DFSIterator, breadth_first_search, depth_first_search
from .models import Edge, Path
from .structures import BinaryHeap, DisjointSet

__all__ = [
    "AStarFinder",
    "BFSIterator",
    "BinaryHeap",
    "ComponentAnalysis",
    "DEFAULT_MAXIMUM_SEARCH_COUNT",
    "DFSIterator",
    "DijkstraFinder",
    "DisjointSet",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphOperationError",
    "GraphProtocol",
    "NegativeWeightError",
    "Path",
    "PathIndexError",
    "SearchConfig",
    "ShortestPathEntry",
    "breadth_first_search",
    "depth_first_search",
    "find_path",
    "graph_of",
    "maximal_cliques",
    "minimum_spanning_tree",
    "shortest_path",
    "shortest_path_mapping",
    "shortest_paths",
]
