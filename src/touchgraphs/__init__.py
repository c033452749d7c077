"""
TouchGraphs - Graph algorithms over implicit graphs

This package runs the classical graph-theory algorithms against a graph that is
only described by its adjacency rule, so nodes and edges never have to be
materialized. It includes:

- Breadth-first and depth-first traversal
- Dijkstra shortest paths and A* path finding
- Tarjan strongly connected components and weakly connected components
- Kruskal minimum spanning tree
- Bron-Kerbosch maximal cliques

Searches over possibly infinite graphs run under a node budget; algorithms over
a closed domain take an explicit finite node set.
"""

__version__ = "0.1.0"
__author__ = "TouchGraphs Team"
__license__ = "MIT"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("TouchGraphs requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.exceptions import (
    EdgeNotFoundError,
    GraphOperationError,
    NegativeWeightError,
    PathIndexError,
)
from .core.graph import Graph, graph_of
from .core.models import Edge, Path

__all__ = [
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphOperationError",
    "NegativeWeightError",
    "Path",
    "PathIndexError",
    "graph_of",
]
