"""Shared test fixtures."""

from typing import Dict, List

import pytest

from discrete.core.config import AlgorithmConfig, get_config, set_config
from discrete.core.graph import AdjacencyGraph
from discrete.core.models import Edge


class DictGraph:
    """Read-only directed graph backed by a successor dict, with no cost capability."""

    def __init__(self, successors: Dict[int, List[int]]):
        self._successors = {node: list(succs) for node, succs in successors.items()}
        for succs in successors.values():
            for succ in succs:
                self._successors.setdefault(succ, [])

    def successors(self, node: int) -> List[int]:
        return list(self._successors.get(node, []))

    def is_successor(self, node: int, successor: int) -> bool:
        return successor in self._successors.get(node, [])

    def predecessors(self, node: int) -> List[int]:
        return [other for other, succs in self._successors.items() if node in succs]

    def is_predecessor(self, node: int, predecessor: int) -> bool:
        return node in self._successors.get(predecessor, [])

    def is_adjacent(self, node: int, neighbor: int) -> bool:
        return self.is_successor(node, neighbor) or self.is_predecessor(node, neighbor)

    def node_exists(self, node: int) -> bool:
        return node in self._successors

    def degree(self, node: int) -> int:
        return len(self.successors(node)) + len(self.predecessors(node))

    def edge_list(self) -> List[Edge]:
        return [Edge(node, succ) for node, succs in self._successors.items() for succ in succs]

    def node_list(self) -> List[int]:
        return list(self._successors)

    def is_directed(self) -> bool:
        return True


@pytest.fixture
def dict_graph():
    """Fixture providing the cost-less ``DictGraph`` class."""
    return DictGraph


@pytest.fixture
def cycle_graph() -> AdjacencyGraph:
    """Fixture providing the directed cycle 1 -> 2 -> 3 -> 1."""
    return AdjacencyGraph.from_edges([(1, 2), (2, 3), (3, 1)])


@pytest.fixture
def dag_graph() -> AdjacencyGraph:
    """Fixture providing a directed acyclic graph without reflexive edges."""
    return AdjacencyGraph.from_edges([(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)])


@pytest.fixture
def diamond_graph() -> AdjacencyGraph:
    """Fixture providing start(0) -> a(1), start -> b(2), a -> end(3), b -> end."""
    return AdjacencyGraph.from_edges([(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def weighted_square() -> AdjacencyGraph:
    """Fixture providing the undirected 4-cycle a-b=1, b-c=2, c-d=3, d-a=4."""
    return AdjacencyGraph.from_edges(
        [(1, 2), (2, 3), (3, 4), (4, 1)],
        directed=False,
        costs={(1, 2): 1.0, (2, 3): 2.0, (3, 4): 3.0, (4, 1): 4.0},
    )


@pytest.fixture
def weighted_pentagon() -> AdjacencyGraph:
    """Fixture providing a connected undirected graph with distinct weights."""
    costs = {
        (1, 2): 4.0,
        (1, 3): 1.0,
        (2, 3): 3.0,
        (2, 4): 2.0,
        (3, 4): 5.0,
        (4, 5): 7.0,
        (3, 5): 6.0,
    }
    return AdjacencyGraph.from_edges(list(costs), directed=False, costs=costs)


@pytest.fixture
def restore_config():
    """Fixture restoring the process-wide configuration after a test."""
    saved = get_config()
    yield
    set_config(saved)


@pytest.fixture
def iterative_config() -> AlgorithmConfig:
    """Fixture providing a configuration that skips recursive traversal."""
    return AlgorithmConfig(recursive_tarjan=False)
