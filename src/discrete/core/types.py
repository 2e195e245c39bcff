"""
Capability protocols for the abstract graph model.

Algorithms never depend on a concrete graph class. They accept any object
providing the methods of the smallest protocol they need and test for the
optional ``Coster`` and ``HeuristicCoster`` extensions at runtime.
"""

from typing import Callable, List, Optional, Protocol, runtime_checkable

from .models import Edge

# Type alias for cost functions: cost(from_node, to_node)
CostFunc = Callable[[int, int], float]

# Type alias for heuristic functions: heuristic(node, goal)
HeuristicFunc = Callable[[int, int], float]


@runtime_checkable
class Graph(Protocol):
    """Protocol defining the read-only graph capability set.

    Querying a node that does not exist yields empty results or ``False``.
    For undirected graphs ``successors`` and ``predecessors`` are identical.
    """

    def successors(self, node: int) -> List[int]:
        """Nodes reached by outbound edges of ``node``."""
        ...

    def is_successor(self, node: int, successor: int) -> bool:
        """Whether ``successor`` appears in ``successors(node)``."""
        ...

    def predecessors(self, node: int) -> List[int]:
        """Nodes with an outbound edge into ``node``."""
        ...

    def is_predecessor(self, node: int, predecessor: int) -> bool:
        """Whether ``predecessor`` appears in ``predecessors(node)``."""
        ...

    def is_adjacent(self, node: int, neighbor: int) -> bool:
        """``is_successor(node, neighbor) or is_predecessor(node, neighbor)``."""
        ...

    def node_exists(self, node: int) -> bool:
        """Whether ``node`` is currently in the graph."""
        ...

    def degree(self, node: int) -> int:
        """``len(successors) + len(predecessors)``; reflexive edges count twice."""
        ...

    def edge_list(self) -> List[Edge]:
        """Every edge; undirected graphs list both directions."""
        ...

    def node_list(self) -> List[int]:
        """Fresh list of every node identifier."""
        ...

    def is_directed(self) -> bool:
        """Whether edges are directed."""
        ...


@runtime_checkable
class Coster(Protocol):
    """Graphs that carry a cost between adjacent nodes.

    ``cost`` is only defined when ``node2`` is a successor of ``node1``.
    """

    def cost(self, node1: int, node2: int) -> float:
        """Cost of the edge ``node1 -> node2``."""
        ...


@runtime_checkable
class HeuristicCoster(Protocol):
    """Graphs that also estimate the cost between any two nodes."""

    def cost(self, node1: int, node2: int) -> float:
        """Cost of the edge ``node1 -> node2``."""
        ...

    def heuristic_cost(self, node1: int, node2: int) -> float:
        """Estimated cost from ``node1`` to ``node2``."""
        ...


@runtime_checkable
class MutableGraph(Graph, Protocol):
    """A graph that algorithms may populate.

    A mutable graph passed as a destination must never be the same object as
    the source graph of the same call.
    """

    def new_node(self, successors: Optional[List[int]] = None) -> int:
        """Add a node with a fresh identifier and return it."""
        ...

    def add_node(self, node: int, successors: Optional[List[int]] = None) -> None:
        """Add ``node`` and edges to each of ``successors``, creating them as needed."""
        ...

    def add_edge(self, node1: int, node2: int) -> None:
        """Add ``node1 -> node2`` (both ways if undirected), creating ``node2``."""
        ...

    def set_edge_cost(self, node1: int, node2: int, cost: float) -> None:
        """Set the cost of an existing edge."""
        ...

    def remove_node(self, node: int) -> None:
        """Remove ``node`` and every edge touching it."""
        ...

    def remove_edge(self, node1: int, node2: int) -> None:
        """Remove ``node1 -> node2`` (both ways if undirected)."""
        ...

    def empty_graph(self) -> None:
        """Remove all nodes and edges."""
        ...

    def set_directed(self, directed: bool) -> None:
        """Switch directedness; only called on an empty graph."""
        ...


def uniform_cost(node1: int, node2: int) -> float:
    """Every edge costs 1."""
    return 1.0


def null_heuristic(node1: int, node2: int) -> float:
    """Heuristic that never estimates any cost."""
    return 0.0


def resolve_cost(graph: object, cost_func: Optional[CostFunc] = None) -> CostFunc:
    """
    Pick the cost function an algorithm should use.

    Precedence is argument, then the graph's own ``Coster`` capability, then
    ``uniform_cost``.

    Args:
        graph: Source graph of the algorithm
        cost_func: Explicit cost function supplied by the caller

    Returns:
        CostFunc: The cost function to apply
    """
    if cost_func is not None:
        return cost_func
    if isinstance(graph, Coster):
        return graph.cost
    return uniform_cost


def resolve_heuristic(
    graph: object, heuristic_func: Optional[HeuristicFunc] = None
) -> HeuristicFunc:
    """Pick a heuristic: argument, then ``HeuristicCoster``, then ``null_heuristic``."""
    if heuristic_func is not None:
        return heuristic_func
    if isinstance(graph, HeuristicCoster):
        return graph.heuristic_cost
    return null_heuristic
