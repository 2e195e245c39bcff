"""
Reference graph implementation with insertion-ordered adjacency maps.

This module provides ``AdjacencyGraph``, a concrete graph satisfying the
``MutableGraph`` and ``Coster`` protocols. Successors and predecessors are kept
in insertion order so every enumeration, and therefore every algorithm run over
the graph, is deterministic.

In undirected mode every edge is stored in both directions together with its
cost, which makes the successor and predecessor views identical.
"""

from contextlib import contextmanager
from copy import deepcopy
from dataclasses import dataclass, field
from threading import RLock
from typing import Dict, Generator, Iterable, List, Optional, Tuple

from .exceptions import EdgeNotFoundError, InvalidOperationError, NodeNotFoundError
from .models import Edge

DEFAULT_EDGE_COST = 1.0


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    adjacency: Dict[int, Dict[int, float]] = field(default_factory=dict)
    reverse_index: Dict[int, Dict[int, None]] = field(default_factory=dict)
    directed: bool = True
    next_id: int = 0


class AdjacencyGraph:
    """
    Mutable, optionally weighted graph over integer node identifiers.

    Attributes:
        _state (GraphState): Internal state of the graph
        _state_lock (RLock): Lock for thread-safe state access
    """

    def __init__(self, directed: bool = True):
        """
        Initialize an empty graph.

        Args:
            directed (bool): Whether edges are directed (default: True)
        """
        self._state = GraphState(directed=directed)
        self._state_lock = RLock()

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        """Context manager for atomic graph operations."""
        with self._state_lock:
            state_backup = deepcopy(self._state)
            try:
                yield
            except Exception as e:
                self._state = state_backup
                raise e

    # Graph capability

    def successors(self, node: int) -> List[int]:
        with self._state_lock:
            return list(self._state.adjacency.get(node, {}))

    def is_successor(self, node: int, successor: int) -> bool:
        with self._state_lock:
            return successor in self._state.adjacency.get(node, {})

    def predecessors(self, node: int) -> List[int]:
        with self._state_lock:
            return list(self._state.reverse_index.get(node, {}))

    def is_predecessor(self, node: int, predecessor: int) -> bool:
        with self._state_lock:
            return predecessor in self._state.reverse_index.get(node, {})

    def is_adjacent(self, node: int, neighbor: int) -> bool:
        return self.is_successor(node, neighbor) or self.is_predecessor(node, neighbor)

    def node_exists(self, node: int) -> bool:
        with self._state_lock:
            return node in self._state.adjacency

    def degree(self, node: int) -> int:
        """Number of successors plus predecessors; reflexive edges count twice."""
        with self._state_lock:
            return len(self._state.adjacency.get(node, {})) + len(
                self._state.reverse_index.get(node, {})
            )

    def edge_list(self) -> List[Edge]:
        with self._state_lock:
            return [
                Edge(node, successor)
                for node, successors in self._state.adjacency.items()
                for successor in successors
            ]

    def node_list(self) -> List[int]:
        with self._state_lock:
            return list(self._state.adjacency)

    def is_directed(self) -> bool:
        return self._state.directed

    # Coster capability

    def cost(self, node1: int, node2: int) -> float:
        """Cost of the edge ``node1 -> node2``."""
        with self._state_lock:
            try:
                return self._state.adjacency[node1][node2]
            except KeyError:
                raise EdgeNotFoundError(f"No edge exists from '{node1}' to '{node2}'")

    # MutableGraph capability

    def new_node(self, successors: Optional[List[int]] = None) -> int:
        """Add a node with an unused identifier and return that identifier."""
        with self._state_lock:
            while self._state.next_id in self._state.adjacency:
                self._state.next_id += 1
            node = self._state.next_id
            self.add_node(node, successors)
            return node

    def add_node(self, node: int, successors: Optional[List[int]] = None) -> None:
        """
        Add a node along with edges to each of its successors.

        Successors that do not exist yet are created. Adding a node that is
        already present only adds the listed edges.

        Args:
            node (int): Node identifier
            successors (Optional[List[int]]): Targets of new outbound edges
        """
        with self._state_lock:
            self._ensure_node(node)
            for successor in successors or ():
                self.add_edge(node, successor)

    def add_edge(self, node1: int, node2: int) -> None:
        """
        Add the edge ``node1 -> node2`` with the default cost.

        ``node2`` is created when absent. Re-adding an existing edge keeps its
        cost.

        Raises:
            NodeNotFoundError: If ``node1`` is not in the graph
        """
        with self._state_lock:
            if node1 not in self._state.adjacency:
                raise NodeNotFoundError(f"Source node '{node1}' not found in the graph")
            self._ensure_node(node2)
            self._link(node1, node2)
            if not self._state.directed:
                self._link(node2, node1)

    def set_edge_cost(self, node1: int, node2: int, cost: float) -> None:
        """
        Set the cost of an existing edge; undirected graphs update both directions.

        Raises:
            EdgeNotFoundError: If the edge was never added or has been removed
        """
        with self._state_lock:
            if not self.is_successor(node1, node2):
                raise EdgeNotFoundError(f"No edge exists from '{node1}' to '{node2}'")
            self._state.adjacency[node1][node2] = float(cost)
            if not self._state.directed:
                self._state.adjacency[node2][node1] = float(cost)

    def remove_node(self, node: int) -> None:
        """Remove a node and every edge into or out of it; absent nodes are ignored."""
        with self._state_lock:
            if node not in self._state.adjacency:
                return
            for successor in self._state.adjacency.pop(node):
                self._state.reverse_index.get(successor, {}).pop(node, None)
            for predecessor in self._state.reverse_index.pop(node):
                self._state.adjacency.get(predecessor, {}).pop(node, None)

    def remove_edge(self, node1: int, node2: int) -> None:
        """
        Remove an edge; undirected graphs remove the reciprocal edge too.

        Raises:
            EdgeNotFoundError: If the edge does not exist
        """
        with self._state_lock:
            if not self.is_successor(node1, node2):
                raise EdgeNotFoundError(f"No edge exists from '{node1}' to '{node2}'")
            self._unlink(node1, node2)
            if not self._state.directed:
                self._unlink(node2, node1)

    def empty_graph(self) -> None:
        """Remove all nodes and edges, keeping directedness."""
        with self._state_lock:
            self._state = GraphState(directed=self._state.directed)

    def set_directed(self, directed: bool) -> None:
        """
        Change directedness of an empty graph.

        Raises:
            InvalidOperationError: If the graph still holds nodes and the
                directedness would change
        """
        with self._state_lock:
            if directed == self._state.directed:
                return
            if self._state.adjacency:
                raise InvalidOperationError("Directedness can only change on an empty graph")
            self._state.directed = directed

    # Internal helpers

    def _ensure_node(self, node: int) -> None:
        if node not in self._state.adjacency:
            self._state.adjacency[node] = {}
            self._state.reverse_index[node] = {}

    def _link(self, node1: int, node2: int) -> None:
        self._state.adjacency[node1].setdefault(node2, DEFAULT_EDGE_COST)
        self._state.reverse_index[node2][node1] = None

    def _unlink(self, node1: int, node2: int) -> None:
        self._state.adjacency[node1].pop(node2, None)
        self._state.reverse_index[node2].pop(node1, None)

    def __len__(self) -> int:
        with self._state_lock:
            return len(self._state.adjacency)

    def __contains__(self, node: object) -> bool:
        return self.node_exists(node)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        kind = "directed" if self._state.directed else "undirected"
        return f"AdjacencyGraph({kind}, nodes={len(self)}, edges={len(self.edge_list())})"

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[int, int]],
        directed: bool = True,
        costs: Optional[Dict[Tuple[int, int], float]] = None,
        nodes: Optional[Iterable[int]] = None,
    ) -> "AdjacencyGraph":
        """
        Create a graph from ``(from_node, to_node)`` pairs.

        Args:
            edges: Edges to add, in order
            directed: Whether the graph is directed
            costs: Optional cost per edge, keyed by ``(from_node, to_node)``
            nodes: Extra nodes to add first, e.g. isolated ones

        Returns:
            AdjacencyGraph: The populated graph
        """
        graph = cls(directed=directed)
        with graph.transaction():
            for node in nodes or ():
                graph.add_node(node)
            for from_node, to_node in edges:
                graph.add_node(from_node, [to_node])
            for (from_node, to_node), cost in (costs or {}).items():
                graph.set_edge_cost(from_node, to_node, cost)
        return graph
