from abc import ABC
from contextlib import contextmanager
from time import time
from typing import Generic, Hashable, Iterator, Optional, TypeVar

from ..config import SearchConfig
from ..graph import GraphProtocol
from .models import PerformanceMetrics
from .utils import MemoryManager

N = TypeVar("N", bound=Hashable)


class PathFinder(ABC, Generic[N]):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: GraphProtocol[N], config: Optional[SearchConfig] = None):
        """Initialize finder with graph and search budget."""
        self.graph = graph
        self.config = config or SearchConfig()
        self.metrics: Optional[PerformanceMetrics] = None

    @contextmanager
    def _search_context(self, operation: str) -> Iterator[MemoryManager]:
        """Record metrics for one search, even when it fails."""
        memory_manager = MemoryManager(self.config.max_memory_mb)
        self.metrics = PerformanceMetrics(operation=operation, start_time=time())
        try:
            yield memory_manager
        finally:
            self.metrics.end_time = time()
            self.metrics.max_memory_used = memory_manager.peak_memory
