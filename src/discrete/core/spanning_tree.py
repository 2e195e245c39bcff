"""
Minimum spanning tree construction.

Both builders read a source graph, resolve edge costs with the usual
precedence (explicit function, then the graph's ``Coster`` capability, then
uniform cost) and write an undirected tree into a separate mutable
destination graph. The destination is cleared first and its edges carry the
resolved costs.

- ``prim`` grows a single tree from the first node of the source.
- ``kruskal`` merges components with a disjoint set and yields a minimum
  spanning forest when the source is disconnected.

Edges of equal weight keep their edge-list order, so results are
deterministic for a deterministic source graph.
"""

import logging
from typing import Optional

from .config import AlgorithmConfig, get_config
from .exceptions import GraphOperationError
from .models import Edge, WeightedEdge, sort_edges
from .structures import DisjointSet
from .types import CostFunc, Graph, MutableGraph, resolve_cost

logger = logging.getLogger(__name__)


def _reset_destination(dst: MutableGraph) -> None:
    dst.empty_graph()
    dst.set_directed(False)


def _add_tree_edge(dst: MutableGraph, weighted: WeightedEdge) -> None:
    from_node, to_node = weighted.edge
    if not dst.node_exists(from_node):
        dst.add_node(from_node, [to_node])
    else:
        dst.add_edge(from_node, to_node)
    dst.set_edge_cost(from_node, to_node, weighted.weight)


def prim(
    dst: MutableGraph,
    graph: Graph,
    cost_func: Optional[CostFunc] = None,
    strict: Optional[bool] = None,
    config: Optional[AlgorithmConfig] = None,
) -> None:
    """
    Build a minimum spanning tree into ``dst`` using Prim's algorithm.

    The tree is seeded with the first node of ``graph.node_list()``. Each round
    takes the cheapest edge leading from the tree to a node not yet in it.

    Args:
        dst: Destination graph; cleared and made undirected. Must not be ``graph``.
        graph: Source graph
        cost_func: Explicit cost function, overriding the graph's own costs
        strict: Raise on a disconnected source instead of stopping early;
            ``None`` defers to the configuration
        config: Overrides the process-wide configuration

    Raises:
        GraphOperationError: If ``strict`` and some nodes cannot be reached
            from the seed node

    Note:
        On a disconnected source the non-strict result is the spanning tree of
        the seed node's component only. Use ``kruskal`` for a spanning forest.
    """
    config = config or get_config()
    if strict is None:
        strict = config.strict_prim
    cost = resolve_cost(graph, cost_func)
    _reset_destination(dst)

    nodes = graph.node_list()
    if not nodes:
        return

    dst.add_node(nodes[0])
    remaining = set(nodes[1:])

    edges = graph.edge_list()
    while remaining:
        candidates = [
            WeightedEdge(edge, cost(edge.from_node, edge.to_node))
            for edge in map(Edge._make, edges)
            if dst.node_exists(edge.from_node) and edge.to_node in remaining
        ]
        if not candidates:
            message = (
                f"Source graph is disconnected: {len(remaining)} nodes "
                f"unreachable from seed node {nodes[0]}"
            )
            if strict:
                raise GraphOperationError(message)
            logger.warning("%s; returning partial spanning tree", message)
            return

        cheapest = sort_edges(candidates)[0]
        _add_tree_edge(dst, cheapest)
        remaining.discard(cheapest.edge.to_node)


def kruskal(
    dst: MutableGraph,
    graph: Graph,
    cost_func: Optional[CostFunc] = None,
) -> None:
    """
    Build a minimum spanning forest into ``dst`` using Kruskal's algorithm.

    All edges are sorted by resolved cost; an edge is kept whenever its
    endpoints still belong to different disjoint sets.

    Args:
        dst: Destination graph; cleared and made undirected. Must not be ``graph``.
        graph: Source graph
        cost_func: Explicit cost function, overriding the graph's own costs

    Note:
        Isolated source nodes have no edges and are not copied into ``dst``.
    """
    cost = resolve_cost(graph, cost_func)
    _reset_destination(dst)

    weighted = sort_edges(
        WeightedEdge(edge, cost(edge.from_node, edge.to_node))
        for edge in map(Edge._make, graph.edge_list())
    )

    forest = DisjointSet()
    for node in graph.node_list():
        forest.make_set(node)

    kept = 0
    for candidate in weighted:
        root1 = forest.find(candidate.edge.from_node)
        root2 = forest.find(candidate.edge.to_node)
        if root1 != root2:
            forest.union(root1, root2)
            _add_tree_edge(dst, candidate)
            kept += 1

    logger.debug("Kruskal kept %d of %d edges", kept, len(weighted))


def total_weight(graph: Graph) -> float:
    """
    Sum edge costs of an undirected weighted graph, counting each edge once.

    Graphs without the ``Coster`` capability count every edge as 1.
    """
    cost = resolve_cost(graph)
    seen = set()
    total = 0.0
    for from_node, to_node in graph.edge_list():
        key = frozenset((from_node, to_node))
        if key in seen:
            continue
        seen.add(key)
        total += cost(from_node, to_node)
    return total
