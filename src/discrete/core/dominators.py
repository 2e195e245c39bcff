"""
Dominator and post-dominator analysis.

A node ``d`` dominates ``n`` when every path from the start node to ``n``
passes through ``d``; post-dominance is the same relation over paths from
``n`` to the end node. Both relations are computed with the classic iterative
data-flow fixed point:

1. The start (end) node is dominated only by itself; every other node starts
   from the full node set.
2. Each pass replaces a node's set with the intersection of the sets of its
   predecessors (successors, for post-dominators) plus the node itself.
3. Passes repeat until nothing changes. Sets only shrink, so this terminates.

Nodes other than the start node that have no predecessors keep the full node
set. The result is the complete non-strict relation; immediate or strict
dominators are left to the caller.
"""

import logging
from typing import Callable, Dict, List, Optional, Set

from .config import AlgorithmConfig, get_config
from .types import Graph

logger = logging.getLogger(__name__)

DominatorMap = Dict[int, Set[int]]


def _dominator_fixed_point(
    root: int,
    graph: Graph,
    flow_from: Callable[[int], List[int]],
    config: Optional[AlgorithmConfig],
) -> DominatorMap:
    """
    Iterate dominator sets to a fixed point.

    Args:
        root: Start node (or end node for post-dominators)
        graph: Graph supplying the node list
        flow_from: Neighbour view data flows from, ``predecessors`` or ``successors``
        config: Overrides the process-wide configuration

    Returns:
        DominatorMap: Dominator set of every node
    """
    memory = (config or get_config()).memory_manager()
    nodes = graph.node_list()
    all_nodes = set(nodes)
    if root not in all_nodes:
        logger.warning("Root node %s is not in the graph; no node is seeded", root)

    dom_sets: DominatorMap = {
        node: {root} if node == root else set(all_nodes) for node in nodes
    }

    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1
        memory.check_memory()

        for node in nodes:
            if node == root:
                continue
            sources = flow_from(node)
            if not sources:
                continue

            candidate = set(dom_sets[sources[0]])
            for source in sources[1:]:
                candidate &= dom_sets[source]
            candidate.add(node)

            if candidate != dom_sets[node]:
                dom_sets[node] = candidate
                changed = True

    logger.debug("Dominator sets for %d nodes converged after %d passes", len(nodes), passes)
    return dom_sets


def dominators(start: int, graph: Graph, config: Optional[AlgorithmConfig] = None) -> DominatorMap:
    """
    Compute every node's dominators with respect to ``start``.

    Example:
        >>> graph = AdjacencyGraph.from_edges([(0, 1), (0, 2), (1, 3), (2, 3)])
        >>> dominators(0, graph)[3]
        {0, 3}
    """
    return _dominator_fixed_point(start, graph, graph.predecessors, config)


def post_dominators(
    end: int, graph: Graph, config: Optional[AlgorithmConfig] = None
) -> DominatorMap:
    """Compute every node's post-dominators with respect to ``end``."""
    return _dominator_fixed_point(end, graph, graph.successors, config)
