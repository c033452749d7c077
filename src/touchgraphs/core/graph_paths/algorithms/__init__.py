"""Path finding algorithm implementations."""

from .a_star import AStarFinder
from .shortest_path import DijkstraFinder

__all__ = ["AStarFinder", "DijkstraFinder"]
