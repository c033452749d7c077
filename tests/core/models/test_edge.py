"""
Tests for edge models.
"""

import dataclasses

import pytest

from touchgraphs.core.exceptions import EdgeNotFoundError
from touchgraphs.core.models import Edge


def test_edge_creation():
    """Test basic edge creation and properties."""
    edge = Edge("node1", "node2")

    assert edge.tail == "node1"
    assert edge.head == "node2"
    assert str(edge) == "(node1, node2)"


def test_edge_equality_is_directed():
    """Test that equality depends on tail and head order."""
    assert Edge(1, 2) == Edge(1, 2)
    assert Edge(1, 2) != Edge(2, 1)
    assert Edge(3, 3) == Edge(3, 3)
    assert hash(Edge(1, 2)) == hash(Edge(1, 2))
    assert len({Edge(1, 2), Edge(1, 2), Edge(2, 1)}) == 2


def test_edge_is_immutable():
    """Test that edges cannot be modified."""
    edge = Edge(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        edge.tail = 3  # type: ignore[misc]


def test_edge_reversed():
    """Test reversing an edge."""
    assert Edge(1, 2).reversed() == Edge(2, 1)


def test_edge_weight(dijkstra_graph):
    """Test weight lookup through the graph."""
    assert Edge(1, 2).weight(dijkstra_graph) == 7.0
    assert Edge(3, 6).weight(dijkstra_graph) == 2.0
    with pytest.raises(EdgeNotFoundError):
        Edge(1, 5).weight(dijkstra_graph)
