"""
Data models for graph path finding.

This module provides the result and bookkeeping structures shared by the path
finding algorithms:
- ShortestPathEntry: Distance and predecessor of a finalized node
- PerformanceMetrics: Container for algorithm performance metrics

Example:
    >>> mapping = graph.shortest_path_mapping(1)
    >>> mapping[5]
    ShortestPathEntry(distance=20.0, predecessor=6)
"""

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, NamedTuple, Optional, TypeVar, Union

N = TypeVar("N", bound=Hashable)


class ShortestPathEntry(NamedTuple, Generic[N]):
    """
    Shortest known way of reaching a node from a search origin.

    Attributes:
        distance: Minimum total edge weight from the origin
        predecessor: Previous node on a shortest path; the origin is its own
            predecessor
    """

    distance: float
    predecessor: N


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of nodes finalized during the search
        max_memory_used: Peak process memory seen during the search (bytes),
            only tracked when a memory ceiling is configured

    Example:
        >>> finder = DijkstraFinder(graph)
        >>> finder.mapping(1)
        >>> print(f"Explored {finder.metrics.nodes_explored} nodes")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if not isinstance(self.end_time, (int, float)):
            raise TypeError("end_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

        if self.nodes_explored is not None and self.nodes_explored < 0:
            raise ValueError("nodes_explored cannot be negative")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds, 0.0 while still running."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }
