"""Strongly connected component analysis.

This module decomposes a graph into strongly connected components using
Tarjan's algorithm, expressed only in terms of ``node_list`` and
``successors`` so it runs over any object satisfying the ``Graph`` protocol.

The traversal is recursive first. Deep graphs that exhaust the interpreter's
recursion limit are recomputed with an explicit work stack, which visits
nodes in the same order and yields the same components.

Derived checks built on the decomposition:
- ``is_acyclic``: every component is a single node without a reflexive edge
- ``is_strongly_connected``: the whole graph forms one component
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .config import AlgorithmConfig, get_config
from .memory import MemoryManager
from .structures import Stack
from .types import Graph

logger = logging.getLogger(__name__)


@dataclass
class TarjanState:
    """
    Bookkeeping for one Tarjan run.

    Attributes:
        memory: Guard consulted on every discovery
        index: Next discovery index to hand out
        indices: Discovery index of each visited node
        lowlinks: Lowest discovery index reachable from each node
        stack: Nodes of the components still being built
        on_stack: Members of ``stack`` for constant-time lookups
        components: Closed components in closing order
    """

    memory: MemoryManager
    index: int = 0
    indices: Dict[int, int] = field(default_factory=dict)
    lowlinks: Dict[int, int] = field(default_factory=dict)
    stack: Stack[int] = field(default_factory=Stack)
    on_stack: Set[int] = field(default_factory=set)
    components: List[List[int]] = field(default_factory=list)

    def discover(self, node: int) -> None:
        """Assign the next discovery index to ``node`` and push it."""
        self.memory.check_memory()
        self.indices[node] = self.index
        self.lowlinks[node] = self.index
        self.index += 1
        self.stack.push(node)
        self.on_stack.add(node)

    def tighten(self, node: int, other: int) -> None:
        self.lowlinks[node] = min(self.lowlinks[node], self.lowlinks[other])

    def close(self, node: int) -> None:
        """Pop a finished component if ``node`` is its root."""
        if self.lowlinks[node] != self.indices[node]:
            return

        component: List[int] = []
        while True:
            member, _ = self.stack.pop()
            self.on_stack.discard(member)
            component.append(member)
            if member == node:
                break
        self.components.append(component)


def _strongconnect(graph: Graph, node: int, state: TarjanState) -> None:
    state.discover(node)

    for successor in graph.successors(node):
        if successor not in state.indices:
            # Successor has not yet been visited; recurse on it
            _strongconnect(graph, successor, state)
            state.tighten(node, successor)
        elif successor in state.on_stack:
            # Successor belongs to the component still being built
            state.tighten(node, successor)

    state.close(node)


def _strongconnect_iterative(graph: Graph, root: int, state: TarjanState) -> None:
    state.discover(root)
    work: List[Tuple[int, Iterator[int]]] = [(root, iter(graph.successors(root)))]

    while work:
        node, successors = work[-1]
        descended = False
        for successor in successors:
            if successor not in state.indices:
                state.discover(successor)
                work.append((successor, iter(graph.successors(successor))))
                descended = True
                break
            if successor in state.on_stack:
                state.tighten(node, successor)
        if descended:
            continue

        work.pop()
        state.close(node)
        if work:
            state.tighten(work[-1][0], node)


def _run(graph: Graph, nodes: List[int], config: AlgorithmConfig, recursive: bool) -> TarjanState:
    state = TarjanState(memory=config.memory_manager())
    strongconnect = _strongconnect if recursive else _strongconnect_iterative
    for node in nodes:
        if node not in state.indices:
            strongconnect(graph, node, state)
    return state


def tarjan(graph: Graph, config: Optional[AlgorithmConfig] = None) -> List[List[int]]:
    """Find all strongly connected components of a graph.

    A strongly connected component is a maximal set of nodes that can all
    reach one another. Traversal starts from each unvisited node in
    ``node_list`` order and follows ``successors`` order, so the result is
    deterministic for a deterministic graph.

    Args:
        graph: Graph to decompose
        config: Overrides the process-wide configuration

    Returns:
        List[List[int]]: Components, each listing its nodes in pop order. Every
            node appears in exactly one component.

    Example:
        >>> graph = AdjacencyGraph.from_edges([(1, 2), (2, 1), (2, 3)])
        >>> tarjan(graph)
        [[3], [2, 1]]

    Note:
        - An undirected graph yields one component per connected island
        - An acyclic graph yields one single-node component per node
    """
    config = config or get_config()
    nodes = graph.node_list()

    if config.recursive_tarjan:
        try:
            state = _run(graph, nodes, config, recursive=True)
        except RecursionError:
            logger.debug("Recursion limit hit on %d nodes, using explicit stack", len(nodes))
            state = _run(graph, nodes, config, recursive=False)
    else:
        state = _run(graph, nodes, config, recursive=False)

    logger.debug("Found %d strongly connected components", len(state.components))
    return state.components


def is_acyclic(graph: Graph, config: Optional[AlgorithmConfig] = None) -> bool:
    """Whether a directed graph has no cycles, counting reflexive edges as cycles."""
    for component in tarjan(graph, config):
        if len(component) > 1:
            return False
        if graph.is_successor(component[0], component[0]):
            return False
    return True


def is_strongly_connected(graph: Graph, config: Optional[AlgorithmConfig] = None) -> bool:
    """Whether every node reaches every other; ``False`` for an empty graph."""
    return len(tarjan(graph, config)) == 1
