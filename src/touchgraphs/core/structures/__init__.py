"""Working structures owned by a single algorithm call."""

from .heap import BinaryHeap
from .union_find import DisjointSet

__all__ = ["BinaryHeap", "DisjointSet"]
