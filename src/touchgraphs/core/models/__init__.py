"""Value models produced by the algorithm suite."""

from .edge import Edge
from .path import Path

__all__ = ["Edge", "Path"]
