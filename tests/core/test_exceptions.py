"""
Tests for custom exceptions.
"""

import pytest

from discrete.core.exceptions import (
    EdgeNotFoundError,
    GraphOperationError,
    InvalidOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
)


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


@pytest.mark.parametrize("error_type", [NodeNotFoundError, EdgeNotFoundError])
def test_not_found_hierarchy(error_type):
    """Test node and edge lookups share a common base."""
    with pytest.raises(ResourceNotFoundError):
        raise error_type("missing")


def test_invalid_operation_is_not_a_lookup_failure():
    """Test invalid operations are distinct from missing resources."""
    assert not issubclass(InvalidOperationError, ResourceNotFoundError)
