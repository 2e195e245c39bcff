"""
Discrete - Graph Algorithms over an Abstract Graph Model

This package runs classic graph algorithms against any object that provides a
small set of graph capabilities. It includes:

- Capability protocols (Graph, Coster, HeuristicCoster, MutableGraph)
- Walk validation
- Strongly connected components (Tarjan)
- Minimum spanning trees (Prim and Kruskal)
- Dominator and post-dominator sets
- A reference mutable graph and the supporting data structures
"""

__version__ = "0.1.0"
__author__ = "Discrete Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Discrete requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.dominators import dominators, post_dominators
from .core.graph import AdjacencyGraph
from .core.graph_components import tarjan
from .core.graph_paths import is_path
from .core.models import Edge
from .core.spanning_tree import kruskal, prim

__all__ = [
    "AdjacencyGraph",
    "Edge",
    "dominators",
    "is_path",
    "kruskal",
    "post_dominators",
    "prim",
    "tarjan",
]
