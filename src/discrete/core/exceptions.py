"""
Custom exceptions for the graph algorithm toolkit.

The algorithms themselves favour well-defined degenerate results over raised
failures. The exceptions below are raised by the reference graph
implementation when one of its checked invariants is violated, by strict
minimum spanning tree construction, by the memory guard and by configuration
loading.
"""


class GraphOperationError(Exception):
    """
    Raised when a graph operation cannot produce a defined result.

    Examples:
        * Strict Prim construction over a disconnected source graph
        * Failure inside a traversal that is not recoverable
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Configuration mapping fails schema validation
        * Unparseable environment variable value
    """

    def __str__(self) -> str:
        """Format configuration error message."""
        return f"Configuration Error: {super().__str__()}"


class ResourceNotFoundError(Exception):
    """
    Raised when a requested graph element is not found.

    Examples:
        * Node not found
        * Edge not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Examples:
        * Adding an edge from a node that does not exist
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * Costing a pair of nodes that is not an edge
        * Assigning a cost to an edge that was never created
        * Removing an edge that does not exist
    """


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current state of a graph.

    Examples:
        * Changing directedness of a graph that still holds nodes
    """
