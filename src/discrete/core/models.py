"""
Value types shared by the graph algorithms.

Nodes are plain integers. An ``Edge`` is an ordered pair of node identifiers
and carries no weight of its own; a ``WeightedEdge`` pairs an edge with a cost
resolved for a single algorithm invocation.
"""

from dataclasses import dataclass
from typing import Iterable, List, NamedTuple


class Edge(NamedTuple):
    """
    Ordered pair of node identifiers.

    For a directed graph ``from_node`` points to ``to_node``. Undirected graphs
    report every edge once in each direction.

    Attributes:
        from_node (int): Origin node
        to_node (int): Target node
    """

    from_node: int
    to_node: int

    def reversed(self) -> "Edge":
        """Return the same edge pointing the other way."""
        return Edge(self.to_node, self.from_node)


@dataclass(frozen=True)
class WeightedEdge:
    """
    An edge together with its resolved cost.

    Attributes:
        edge (Edge): The underlying edge
        weight (float): Result of ``cost(edge.from_node, edge.to_node)``
    """

    edge: Edge
    weight: float


def sort_edges(weighted: Iterable[WeightedEdge]) -> List[WeightedEdge]:
    """Sort edges ascending by weight only.

    ``sorted`` is stable, so edges of equal weight keep their edge-list order.
    """
    return sorted(weighted, key=lambda weighted_edge: weighted_edge.weight)
