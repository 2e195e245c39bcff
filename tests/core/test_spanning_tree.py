"""Tests for minimum spanning tree construction."""

import logging

import pytest

from discrete.core.config import AlgorithmConfig
from discrete.core.exceptions import GraphOperationError
from discrete.core.graph import AdjacencyGraph
from discrete.core.graph_components import tarjan
from discrete.core.models import Edge
from discrete.core.spanning_tree import kruskal, prim, total_weight


def _undirected_edges(graph):
    return {frozenset(edge) for edge in graph.edge_list()}


@pytest.mark.parametrize("build", [prim, kruskal])
def test_square_excludes_heaviest_edge(build, weighted_square):
    """Test the 4-cycle with weights 1..4 yields a tree of weight 6."""
    dst = AdjacencyGraph()
    build(dst, weighted_square)

    assert not dst.is_directed()
    assert total_weight(dst) == 6.0
    assert _undirected_edges(dst) == {frozenset({1, 2}), frozenset({2, 3}), frozenset({3, 4})}
    assert not dst.is_adjacent(4, 1)
    assert dst.cost(3, 4) == 3.0


def test_prim_and_kruskal_agree(weighted_pentagon):
    """Test both builders produce trees of identical total weight."""
    prim_tree = AdjacencyGraph()
    kruskal_tree = AdjacencyGraph()
    prim(prim_tree, weighted_pentagon)
    kruskal(kruskal_tree, weighted_pentagon)

    assert total_weight(prim_tree) == total_weight(kruskal_tree) == 12.0
    assert _undirected_edges(prim_tree) == _undirected_edges(kruskal_tree)
    assert sorted(prim_tree.node_list()) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("build", [prim, kruskal])
def test_tree_has_n_minus_one_edges(build, weighted_pentagon):
    """Test the result spans every node without cycles."""
    dst = AdjacencyGraph()
    build(dst, weighted_pentagon)

    assert len(_undirected_edges(dst)) == len(weighted_pentagon.node_list()) - 1
    assert len(tarjan(dst)) == 1


@pytest.mark.parametrize("build", [prim, kruskal])
def test_explicit_cost_overrides_graph_costs(build, weighted_square):
    """Test an explicit cost function wins over the graph's own costs."""
    dst = AdjacencyGraph()
    build(dst, weighted_square, lambda a, b: -weighted_square.cost(a, b))

    assert total_weight(dst) == -9.0
    assert not dst.is_adjacent(1, 2)


@pytest.mark.parametrize("build", [prim, kruskal])
def test_uniform_cost_fallback(build, dict_graph):
    """Test graphs without costs use a weight of 1 per edge."""
    graph = dict_graph({1: [2, 3], 2: [1, 3], 3: [1, 2, 4], 4: [3]})
    dst = AdjacencyGraph()
    build(dst, graph)

    assert total_weight(dst) == 3.0
    assert all(dst.cost(a, b) == 1.0 for a, b in dst.edge_list())


@pytest.mark.parametrize("build", [prim, kruskal])
def test_destination_is_cleared(build, weighted_square):
    """Test previous contents of the destination are discarded."""
    dst = AdjacencyGraph(directed=True)
    dst.add_node(100, [101])
    build(dst, weighted_square)

    assert not dst.node_exists(100)
    assert not dst.is_directed()


@pytest.mark.parametrize("build", [prim, kruskal])
def test_empty_source(build):
    """Test an empty source graph leaves an empty destination."""
    dst = AdjacencyGraph()
    dst.add_node(1)
    build(dst, AdjacencyGraph())

    assert dst.node_list() == []


def test_tie_break_keeps_edge_list_order():
    """Test equal-weight edges are taken in edge-list order."""
    graph = AdjacencyGraph.from_edges([(1, 2), (1, 3), (2, 3)], directed=False)
    prim_tree = AdjacencyGraph()
    kruskal_tree = AdjacencyGraph()
    prim(prim_tree, graph)
    kruskal(kruskal_tree, graph)

    expected = {frozenset({1, 2}), frozenset({1, 3})}
    assert _undirected_edges(prim_tree) == expected
    assert _undirected_edges(kruskal_tree) == expected


def test_prim_disconnected_stops_early(caplog):
    """Test Prim returns the seed component's tree on a disconnected source."""
    graph = AdjacencyGraph.from_edges([(1, 2), (3, 4)], directed=False)
    dst = AdjacencyGraph()

    with caplog.at_level(logging.WARNING, logger="discrete.core.spanning_tree"):
        prim(dst, graph)

    assert sorted(dst.node_list()) == [1, 2]
    assert _undirected_edges(dst) == {frozenset({1, 2})}
    assert "disconnected" in caplog.text


def test_prim_disconnected_strict():
    """Test strict Prim raises on a disconnected source."""
    graph = AdjacencyGraph.from_edges([(1, 2), (3, 4)], directed=False)

    with pytest.raises(GraphOperationError, match="disconnected"):
        prim(AdjacencyGraph(), graph, strict=True)
    with pytest.raises(GraphOperationError):
        prim(AdjacencyGraph(), graph, config=AlgorithmConfig(strict_prim=True))


def test_prim_strict_argument_overrides_config():
    """Test an explicit strict flag wins over the configuration."""
    graph = AdjacencyGraph.from_edges([(1, 2), (3, 4)], directed=False)
    dst = AdjacencyGraph()
    prim(dst, graph, strict=False, config=AlgorithmConfig(strict_prim=True))
    assert sorted(dst.node_list()) == [1, 2]


def test_kruskal_disconnected_builds_forest():
    """Test Kruskal yields a spanning forest on a disconnected source."""
    graph = AdjacencyGraph.from_edges(
        [(1, 2), (2, 3), (1, 3), (4, 5)],
        directed=False,
        costs={(1, 2): 1.0, (2, 3): 1.0, (1, 3): 5.0, (4, 5): 2.0},
    )
    dst = AdjacencyGraph()
    kruskal(dst, graph)

    assert _undirected_edges(dst) == {frozenset({1, 2}), frozenset({2, 3}), frozenset({4, 5})}
    assert total_weight(dst) == 4.0


def test_prim_follows_edge_direction():
    """Test Prim only extends the tree along outbound edges of a directed source."""
    graph = AdjacencyGraph.from_edges([(1, 2), (3, 2), (1, 3)])
    dst = AdjacencyGraph()
    prim(dst, graph)

    assert _undirected_edges(dst) == {frozenset({1, 2}), frozenset({1, 3})}


def test_total_weight_counts_edges_once(weighted_square):
    """Test total weight of an undirected graph counts mirrored edges once."""
    assert total_weight(weighted_square) == 10.0
    assert total_weight(AdjacencyGraph.from_edges([Edge(1, 2)])) == 1.0
