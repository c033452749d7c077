"""Tests for graph traversal operations."""

import logging
from itertools import islice

import pytest

from touchgraphs.core.graph import graph_of
from touchgraphs.core.graph_traversal import (
    BFSIterator,
    DFSIterator,
    breadth_first_search,
    depth_first_search,
)


def test_bfs_order(dijkstra_graph):
    """Test breadth-first visitation order on the weighted example graph."""
    assert list(breadth_first_search(dijkstra_graph, 1)) == [1, 2, 3, 6, 4, 5]


def test_bfs_is_closest_first():
    """Test that BFS produces nodes by increasing hop count."""
    tree = {0: {1, 2}, 1: {3}, 2: {4}, 3: {5}, 4: set(), 5: set()}
    graph = graph_of(lambda n: tree[n])

    order = list(breadth_first_search(graph, 0))
    assert order[0] == 0
    assert set(order[1:3]) == {1, 2}
    assert set(order[3:5]) == {3, 4}
    assert order[5] == 5


def test_dfs_is_most_recent_first():
    """Test that DFS follows the most recently discovered node."""
    chain = {0: {1}, 1: {2}, 2: {3}, 3: set()}
    graph = graph_of(lambda n: chain[n])

    assert list(depth_first_search(graph, 0)) == [0, 1, 2, 3]


def test_dfs_branches_last_discovered_first():
    """Test that DFS leaves earlier siblings until a later branch is exhausted."""
    tree = {0: {1, 2}, 1: {3}, 2: {4}, 3: set(), 4: set()}
    graph = graph_of(lambda n: tree[n])

    assert list(depth_first_search(graph, 0)) == [0, 2, 4, 1, 3]
    assert list(breadth_first_search(graph, 0)) == [0, 1, 2, 3, 4]


def test_dfs_visits_every_reachable_node_once(tarjan_graph):
    """Test DFS coverage without repetition."""
    order = list(depth_first_search(tarjan_graph, "H"))

    assert order[0] == "H"
    assert len(order) == len(set(order))
    assert set(order) == set("ABCDEFGH")


def test_traversal_with_cycles():
    """Test that cycles don't cause repeated visits."""
    cycle = {"A": {"B"}, "B": {"C"}, "C": {"A"}}
    graph = graph_of(lambda n: cycle[n])

    assert list(breadth_first_search(graph, "A")) == ["A", "B", "C"]
    assert list(depth_first_search(graph, "A")) == ["A", "B", "C"]


def test_traversal_isolated_origin(empty_graph):
    """Test traversal from a node without successors."""
    assert list(breadth_first_search(empty_graph, 8)) == [8]
    assert list(depth_first_search(empty_graph, 8)) == [8]


@pytest.mark.parametrize("iterator_class", [BFSIterator, DFSIterator])
def test_budget_ends_infinite_traversal(integer_line, iterator_class):
    """Test that the node budget ends traversal of an infinite graph."""
    nodes = list(iterator_class(integer_line, 0, maximum_search_count=25))

    assert len(nodes) == 25
    assert len(set(nodes)) == 25


def test_default_budget(integer_line):
    """Test the default budget of 1000 nodes."""
    assert len(list(breadth_first_search(integer_line, 0))) == 1000


def test_bfs_on_infinite_graph_is_lazy(syracuse_graph):
    """Test pulling a prefix from an infinite traversal."""
    iterator = breadth_first_search(syracuse_graph, 6)

    assert list(islice(iterator, 4)) == [6, 3, 10, 5]
    assert list(iterator) == [16, 8, 4, 2, 1]


def test_iterator_is_single_use(dijkstra_graph):
    """Test that an exhausted iterator stays exhausted."""
    iterator = breadth_first_search(dijkstra_graph, 1)
    assert iter(iterator) is iterator

    list(iterator)
    assert not iterator.has_next()
    assert list(iterator) == []
    with pytest.raises(StopIteration):
        next(iterator)


def test_has_next_does_not_consume(dijkstra_graph):
    """Test the has-next / next contract."""
    iterator = breadth_first_search(dijkstra_graph, 1)

    assert iterator.has_next()
    assert iterator.has_next()
    assert next(iterator) == 1
    assert iterator.visited == {1}


@pytest.mark.parametrize("budget, error", [(0, ValueError), (-3, ValueError), (2.5, TypeError)])
def test_invalid_budget(dijkstra_graph, budget, error):
    """Test budget validation."""
    with pytest.raises(error):
        breadth_first_search(dijkstra_graph, 1, maximum_search_count=budget)


def test_budget_stop_logged_once(integer_line, caplog):
    """Test that an exhausted budget is reported a single time."""
    iterator = breadth_first_search(integer_line, 0, maximum_search_count=3)

    with caplog.at_level(logging.DEBUG, logger="touchgraphs.core.graph_traversal"):
        assert len(list(iterator)) == 3
        assert not iterator.has_next()
        assert list(iterator) == []

    stops = [record for record in caplog.records if "stopped after" in record.getMessage()]
    assert len(stops) == 1
