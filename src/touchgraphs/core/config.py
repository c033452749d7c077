"""
Search configuration.

Every search over an implicit graph runs under a budget, since the vertex space
may be infinite. This module holds the package-wide defaults and the
``SearchConfig`` container that finders and iterators accept.

Example:
    >>> config = SearchConfig(maximum_search_count=50)
    >>> finder = DijkstraFinder(graph, config)
"""

from dataclasses import dataclass
from typing import Optional

# Constants
DEFAULT_MAXIMUM_SEARCH_COUNT = 1_000  # Nodes finalized before a search gives up


def validate_search_count(maximum_search_count: int) -> None:
    """Validate a node budget."""
    if isinstance(maximum_search_count, bool) or not isinstance(maximum_search_count, int):
        raise TypeError("maximum_search_count must be an integer")
    if maximum_search_count <= 0:
        raise ValueError("maximum_search_count must be positive")


@dataclass(frozen=True)
class SearchConfig:
    """
    Budget settings for a single search.

    Attributes:
        maximum_search_count: Maximum number of nodes a search visits or
            finalizes before stopping. Exhausting it ends the search silently.
        max_memory_mb: Optional ceiling on memory growth during a search, in MB.
            ``None`` disables the check.
    """

    maximum_search_count: int = DEFAULT_MAXIMUM_SEARCH_COUNT
    max_memory_mb: Optional[float] = None

    def __post_init__(self):
        """Validate settings after initialization."""
        validate_search_count(self.maximum_search_count)

        if self.max_memory_mb is not None:
            if isinstance(self.max_memory_mb, bool) or not isinstance(
                self.max_memory_mb, (int, float)
            ):
                raise TypeError("max_memory_mb must be a numeric value")
            if self.max_memory_mb <= 0:
                raise ValueError("max_memory_mb must be positive")

    @classmethod
    def from_count(cls, maximum_search_count: Optional[int]) -> "SearchConfig":
        """Build a config from a bare node budget, ``None`` meaning the default."""
        if maximum_search_count is None:
            return cls()
        return cls(maximum_search_count=maximum_search_count)
