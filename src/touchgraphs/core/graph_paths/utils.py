"""
Utility functions for path finding operations.
"""

import logging
import os
import time
from typing import Hashable, Optional, TypeVar

import psutil

from ..exceptions import NegativeWeightError
from ..graph import GraphProtocol

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)

# Constants
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between two resident memory samples


def checked_edge_weight(graph: GraphProtocol[N], tail: N, head: N) -> float:
    """
    Get the weight of an edge, rejecting negative weights.

    Raises:
        NegativeWeightError: If the weight is negative
        EdgeNotFoundError: If the graph reports the edge as missing
    """
    weight = graph.edge_weight(tail, head)
    if weight < 0:
        raise NegativeWeightError(tail, head, weight)
    return float(weight)


def zero_heuristic(node: Hashable) -> float:
    """Heuristic that turns A* into Dijkstra."""
    return 0.0


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


class MemoryManager:
    """
    Memory guard for long searches.

    Samples resident memory at most every ``MEMORY_CHECK_INTERVAL`` seconds
    and raises once growth since the start of the search passes the ceiling.
    Without a ceiling every check is a no-op.
    """

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._peak_memory = self.start_memory
        self._last_check = time.monotonic()

    def check_memory(self) -> None:
        """
        Check if memory usage exceeds limit.

        Raises:
            MemoryError: If memory grew past the ceiling since the search started
        """
        if not self.max_memory:
            return

        current_time = time.monotonic()
        if current_time - self._last_check < MEMORY_CHECK_INTERVAL:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        if current - self.start_memory > self.max_memory:
            logger.warning("Search aborted, memory ceiling of %d bytes passed", self.max_memory)
            raise MemoryError(
                f"Memory usage {current/1024/1024:.1f}MB exceeds "
                f"limit of {self.max_memory/1024/1024:.1f}MB"
            )

    @property
    def peak_memory(self) -> Optional[int]:
        """Peak memory seen in bytes, ``None`` when no ceiling is set."""
        return self._peak_memory if self.max_memory else None
