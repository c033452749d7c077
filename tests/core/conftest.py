"""Shared test fixtures."""

from typing import Dict, Set, Tuple

import pytest

from touchgraphs.core.graph import Graph, graph_of


class WeightedGraph(Graph[int]):
    """Graph backed by an explicit weighted edge table."""

    def __init__(self, edges: Dict[Tuple[int, int], float]):
        self.edges = edges

    def successors(self, node: int) -> Set[int]:
        return {head for tail, head in self.edges if tail == node}

    def are_joined(self, tail: int, head: int) -> bool:
        return (tail, head) in self.edges

    def edge_weight(self, tail: int, head: int) -> float:
        if (tail, head) not in self.edges:
            return super().edge_weight(tail, head)
        return self.edges[(tail, head)]


def symmetric(edges: Dict[Tuple[int, int], float]) -> Dict[Tuple[int, int], float]:
    """Add the reverse of every edge."""
    result = dict(edges)
    result.update({(head, tail): weight for (tail, head), weight in edges.items()})
    return result


@pytest.fixture
def empty_graph() -> Graph:
    """Fixture providing a graph where no node has successors."""
    return graph_of(lambda node: set())


@pytest.fixture
def dijkstra_graph() -> WeightedGraph:
    """
    Fixture providing the classical 6-node Dijkstra illustration (undirected):

    1-2: 7, 1-3: 9, 1-6: 14, 2-3: 10, 2-4: 15, 3-4: 11, 3-6: 2, 4-5: 6, 5-6: 9
    """
    return WeightedGraph(
        symmetric(
            {
                (1, 2): 7.0,
                (1, 3): 9.0,
                (1, 6): 14.0,
                (2, 3): 10.0,
                (2, 4): 15.0,
                (3, 4): 11.0,
                (3, 6): 2.0,
                (4, 5): 6.0,
                (5, 6): 9.0,
            }
        )
    )


@pytest.fixture
def kruskal_graph() -> WeightedGraph:
    """Fixture providing the classical 9-node weighted spanning tree example."""
    return WeightedGraph(
        symmetric(
            {
                (0, 1): 4.0,
                (0, 7): 8.0,
                (1, 2): 8.0,
                (1, 7): 11.0,
                (2, 3): 7.0,
                (2, 5): 4.0,
                (2, 8): 2.0,
                (3, 4): 9.0,
                (3, 5): 14.0,
                (4, 5): 10.0,
                (5, 6): 2.0,
                (6, 7): 1.0,
                (6, 8): 6.0,
                (7, 8): 7.0,
            }
        )
    )


@pytest.fixture
def tarjan_graph() -> Graph:
    """Fixture providing the classical 8-node strongly connected components example."""
    successors = {
        "A": {"E"},
        "B": {"A"},
        "C": {"B", "D"},
        "D": {"C"},
        "E": {"B"},
        "F": {"B", "E", "G"},
        "G": {"C", "F"},
        "H": {"D", "G", "H"},
    }
    return graph_of(lambda node: successors[node])


@pytest.fixture
def syracuse_graph() -> Graph:
    """Fixture providing the infinite Collatz graph."""
    return graph_of(lambda n: {n // 2} if n % 2 == 0 else {3 * n + 1})


@pytest.fixture
def integer_line() -> Graph:
    """Fixture providing the infinite graph n -> n + 1, n - 1."""
    return graph_of(lambda n: {n - 1, n + 1}, are_joined=lambda a, b: abs(a - b) == 1)


@pytest.fixture
def weighted_graph():
    """Fixture providing a factory of graphs over an explicit weighted edge table."""
    return WeightedGraph
