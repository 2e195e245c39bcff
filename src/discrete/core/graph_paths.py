"""Walk validation over the abstract graph model."""

from typing import Optional, Sequence

from .types import Graph


def is_path(path: Optional[Sequence[int]], graph: Graph) -> bool:
    """
    Check that a node sequence is a walk through the graph.

    Every ``path[i + 1]`` must be a successor of ``path[i]``. An empty or
    missing path is trivially valid, and a single-node path is valid when that
    node exists.

    Args:
        path: Node identifiers in walk order
        graph: Graph to check against

    Returns:
        bool: Whether the sequence is a valid walk

    Example:
        >>> graph = AdjacencyGraph.from_edges([(1, 2), (2, 3)])
        >>> is_path([1, 2, 3], graph)
        True
        >>> is_path([3, 2], graph)
        False
    """
    if not path:
        return True
    if len(path) == 1:
        return graph.node_exists(path[0])

    return all(graph.is_successor(node, successor) for node, successor in zip(path, path[1:]))
