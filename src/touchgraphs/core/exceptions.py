"""
Custom exceptions for the graph algorithms engine.

This module defines the hierarchy of exceptions raised by the algorithm suite.
Every exception surfaces synchronously to the direct caller of the entry point
that raised it; no algorithm retries internally or returns a partial result
after an error.

An unreachable destination or an empty graph is not an error: those cases are
reported as ``None`` or an empty container by the algorithms themselves.
"""


class GraphOperationError(Exception):
    """
    Raised when a graph operation fails.

    This is the base class of every error raised by the package, so callers
    can catch a single type around any algorithm call.

    Examples:
        * Weight query on a missing edge
        * Negative edge weight found during a shortest-path search
        * Path access outside its valid range
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class EdgeNotFoundError(GraphOperationError, LookupError):
    """
    Raised when the weight of a non-existent edge is requested.

    The error is recoverable: callers can check ``are_joined`` before asking
    for a weight.

    Examples:
        * ``edge_weight(tail, head)`` with no edge (tail, head)
        * ``Edge.weight(graph)`` on an edge the graph does not hold
    """

    def __init__(self, tail, head):
        super().__init__(f"The edge ({tail}, {head}) doesn't exist.")
        self.tail = tail
        self.head = head


class PathIndexError(GraphOperationError, IndexError):
    """
    Raised when a path node or edge is accessed outside its valid range.

    Examples:
        * ``path.node(len(path))``
        * ``path.edge(len(path) - 1)``
    """


class NegativeWeightError(GraphOperationError):
    """
    Raised when a negative edge weight is found during Dijkstra or A* relaxation.

    The error is fatal to the running search: no partial mapping or path is
    returned.
    """

    def __init__(self, tail, head, weight: float):
        super().__init__(f"Found an edge of negative length : |({tail}, {head})| = {weight}")
        self.tail = tail
        self.head = head
        self.weight = weight
