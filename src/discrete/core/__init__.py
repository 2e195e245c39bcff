"""Core graph model and algorithms."""

from .config import AlgorithmConfig, get_config, set_config
from .dominators import dominators, post_dominators
from .exceptions import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    InvalidOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
)
from .graph import AdjacencyGraph
from .graph_components import is_acyclic, is_strongly_connected, tarjan
from .graph_paths import is_path
from .models import Edge, WeightedEdge, sort_edges
from .spanning_tree import kruskal, prim, total_weight
from .structures import DisjointSet, Stack
from .types import (
    Coster,
    CostFunc,
    Graph,
    HeuristicCoster,
    HeuristicFunc,
    MutableGraph,
    null_heuristic,
    resolve_cost,
    resolve_heuristic,
    uniform_cost,
)

__all__ = [
    "AdjacencyGraph",
    "AlgorithmConfig",
    "ConfigurationError",
    "CostFunc",
    "Coster",
    "DisjointSet",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphOperationError",
    "HeuristicCoster",
    "HeuristicFunc",
    "InvalidOperationError",
    "MutableGraph",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "Stack",
    "WeightedEdge",
    "dominators",
    "get_config",
    "is_acyclic",
    "is_path",
    "is_strongly_connected",
    "kruskal",
    "null_heuristic",
    "post_dominators",
    "prim",
    "resolve_cost",
    "resolve_heuristic",
    "set_config",
    "sort_edges",
    "tarjan",
    "total_weight",
    "uniform_cost",
]
