"""Algorithms over an explicit finite node set."""

from .cliques import maximal_cliques
from .components import ComponentAnalysis
from .spanning_tree import minimum_spanning_tree

__all__ = ["ComponentAnalysis", "maximal_cliques", "minimum_spanning_tree"]
