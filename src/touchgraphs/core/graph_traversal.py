"""
Graph traversal using the iterator pattern.

Traversals are lazy and pull-based: each ``next()`` produces one node and
queries the graph for that node's successors only. They are single-use and not
restartable, and they stop silently once the frontier is empty or the node
budget is spent, which guarantees termination on infinite graphs.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Generic, Hashable, Iterator, List, Set, TypeVar

from .config import DEFAULT_MAXIMUM_SEARCH_COUNT, validate_search_count
from .graph import GraphProtocol

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


class GraphIterator(ABC, Generic[N]):
    """
    Base class for graph traversal iterators.

    Attributes:
        graph: The graph to traverse
        origin: Starting node for traversal
        maximum_search_count: Maximum number of nodes produced
        visited: Nodes produced so far
    """

    def __init__(
        self,
        graph: GraphProtocol[N],
        origin: N,
        maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
    ):
        """
        Initialize iterator.

        Args:
            graph: The graph to traverse
            origin: Starting node for traversal
            maximum_search_count: Maximum number of nodes produced

        Raises:
            TypeError: If maximum_search_count is not an integer
            ValueError: If maximum_search_count is not positive
        """
        validate_search_count(maximum_search_count)
        self.graph = graph
        self.origin = origin
        self.maximum_search_count = maximum_search_count
        self.visited: Set[N] = set()
        # Frontier plus visited nodes, so that nothing is enqueued twice
        self._discovered: Set[N] = {origin}
        self._budget_logged = False
        self._push(origin)

    @abstractmethod
    def _push(self, node: N) -> None:
        """Add a node to the frontier."""

    @abstractmethod
    def _pop(self) -> N:
        """Remove the next node from the frontier."""

    @abstractmethod
    def _frontier_size(self) -> int:
        """Number of discovered nodes not produced yet."""

    def has_next(self) -> bool:
        """Check whether another node can be produced."""
        if self._frontier_size() == 0:
            return False
        if len(self.visited) >= self.maximum_search_count:
            if not self._budget_logged:
                logger.debug(
                    "Traversal from %r stopped after %d nodes", self.origin, len(self.visited)
                )
                self._budget_logged = True
            return False
        return True

    def __iter__(self) -> Iterator[N]:
        return self

    def __next__(self) -> N:
        if not self.has_next():
            raise StopIteration

        node = self._pop()
        self.visited.add(node)
        for successor in self.graph.successors(node):
            if successor not in self._discovered:
                self._discovered.add(successor)
                self._push(successor)
        return node


class BFSIterator(GraphIterator[N]):
    """Breadth-first traversal iterator (FIFO frontier)."""

    def __init__(
        self,
        graph: GraphProtocol[N],
        origin: N,
        maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
    ):
        self._queue: Deque[N] = deque()
        super().__init__(graph, origin, maximum_search_count)

    def _push(self, node: N) -> None:
        self._queue.append(node)

    def _pop(self) -> N:
        return self._queue.popleft()

    def _frontier_size(self) -> int:
        return len(self._queue)


class DFSIterator(GraphIterator[N]):
    """Depth-first traversal iterator (LIFO frontier)."""

    def __init__(
        self,
        graph: GraphProtocol[N],
        origin: N,
        maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
    ):
        self._stack: List[N] = []
        super().__init__(graph, origin, maximum_search_count)

    def _push(self, node: N) -> None:
        self._stack.append(node)

    def _pop(self) -> N:
        return self._stack.pop()

    def _frontier_size(self) -> int:
        return len(self._stack)


def breadth_first_search(
    graph: GraphProtocol[N],
    origin: N,
    maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
) -> BFSIterator[N]:
    """Iterate over the nodes reachable from origin, closest first."""
    return BFSIterator(graph, origin, maximum_search_count)


def depth_first_search(
    graph: GraphProtocol[N],
    origin: N,
    maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT,
) -> DFSIterator[N]:
    """Iterate over the nodes reachable from origin, most recently discovered first."""
    return DFSIterator(graph, origin, maximum_search_count)
