"""
Tests for path models.
"""

import pytest

from touchgraphs.core.exceptions import EdgeNotFoundError, PathIndexError
from touchgraphs.core.graph_paths.models import ShortestPathEntry
from touchgraphs.core.models import Edge, Path


def test_path_creation():
    """Test basic path creation and sequence behaviour."""
    path = Path([1, 3, 6, 5])

    assert len(path) == 4
    assert list(path) == [1, 3, 6, 5]
    assert path[0] == 1
    assert path[-1] == 5
    assert path[1:3] == (3, 6)
    assert 6 in path
    assert 2 not in path
    assert path.index(6) == 2
    assert path.origin == 1
    assert path.destination == 5
    assert str(path) == "[1, 3, 6, 5]"


def test_empty_path_rejected():
    """Test that a path needs at least one node."""
    with pytest.raises(ValueError, match="at least one node"):
        Path([])


def test_path_equality():
    """Test paths compare by node sequence."""
    assert Path([1, 2]) == Path((1, 2))
    assert Path([1, 2]) != Path([2, 1])
    assert hash(Path([1, 2])) == hash(Path([1, 2]))
    assert Path([1, 2]) != [1, 2]


def test_node_access():
    """Test bounded node access."""
    path = Path(["a", "b", "c"])

    assert path.node(0) == "a"
    assert path.node(2) == "c"
    with pytest.raises(PathIndexError, match="Index out of range"):
        path.node(3)
    with pytest.raises(IndexError):
        path.node(-1)


def test_edge_access():
    """Test bounded edge access."""
    path = Path(["a", "b", "c"])

    assert path.edge(0) == Edge("a", "b")
    assert path.edge(1) == Edge("b", "c")
    with pytest.raises(PathIndexError):
        path.edge(2)
    with pytest.raises(PathIndexError):
        Path(["a"]).edge(0)


def test_edges():
    """Test decomposition into consecutive pairs."""
    assert Path([1, 2, 3]).edges() == [Edge(1, 2), Edge(2, 3)]
    assert Path([1]).edges() == []


def test_from_edges():
    """Test building a path from its edges."""
    path = Path.from_edges([Edge(1, 2), Edge(2, 3), Edge(3, 4)])
    assert list(path) == [1, 2, 3, 4]

    with pytest.raises(ValueError):
        Path.from_edges([])


def test_length(dijkstra_graph):
    """Test path length summed through the graph."""
    assert Path([1, 3, 6, 5]).length(dijkstra_graph) == 20.0
    assert Path([1]).length(dijkstra_graph) == 0.0
    with pytest.raises(EdgeNotFoundError):
        Path([1, 5]).length(dijkstra_graph)


@pytest.mark.parametrize(
    "nodes, expected",
    [
        ([1], [1]),
        ([1, 2, 3], [1, 2, 3]),
        ([1, 2, 3, 2, 4], [1, 2, 4]),
        ([1, 2, 1, 3], [1, 3]),
        ([1, 2, 3, 1], [1]),
        (["a", "b", "c", "b", "d", "c", "e"], ["a", "b", "d", "c", "e"]),
    ],
)
def test_to_simple_path(nodes, expected):
    """Test loop removal."""
    simple = Path(nodes).to_simple_path()

    assert list(simple) == expected
    assert simple.origin == nodes[0]
    assert simple.destination == nodes[-1]
    assert len(set(simple)) == len(simple)


def test_compile_from_mapping():
    """Test path reconstruction from predecessor links."""
    mapping = {
        1: ShortestPathEntry(0.0, 1),
        3: ShortestPathEntry(9.0, 1),
        6: ShortestPathEntry(11.0, 3),
        5: ShortestPathEntry(20.0, 6),
    }

    assert list(Path.compile(mapping, 1, 5)) == [1, 3, 6, 5]
    assert list(Path.compile(mapping, 1, 1)) == [1]
