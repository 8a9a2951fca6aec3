import pytest

from graphstats.analysis.clustering import ClusteringAnalyzer
from graphstats.core.graph import DiGraphStore
from graphstats.formats.read_edge_list import EdgeListLoader


def build(edges):
    return EdgeListLoader().load([f"{a} {b}" for a, b in edges])


def test_cycle_has_no_clustering(cycle_path):
    with open(cycle_path) as f:
        analyzer = ClusteringAnalyzer(EdgeListLoader().load(f))
    assert analyzer.average_clustering() == 0.0


def test_star_graph():
    graph = build([(0, 1), (0, 2), (0, 3)])
    analyzer = ClusteringAnalyzer(graph)
    assert analyzer.local_coefficient(graph.node_for(0)) == 0.0
    assert analyzer.average_clustering() == 0.0


def test_closed_pair_in_either_direction():
    graph = build([(0, 1), (0, 2), (2, 1)])
    analyzer = ClusteringAnalyzer(graph)
    assert analyzer.closed_pairs(graph.node_for(0)) == 1
    assert analyzer.local_coefficient(graph.node_for(0)) == 1.0
    # Only node 0 has two neighbors; the other two contribute 0 to the mean
    assert analyzer.average_clustering() == pytest.approx(1 / 3)


def test_partial_neighborhood():
    graph = build([(0, 1), (0, 2), (0, 3), (1, 2)])
    analyzer = ClusteringAnalyzer(graph)
    assert analyzer.local_coefficient(graph.node_for(0)) == pytest.approx(1 / 3)


def test_parallel_edges_do_not_inflate_pairs():
    graph = build([(0, 1), (0, 2), (0, 1), (0, 2), (1, 2)])
    analyzer = ClusteringAnalyzer(graph)
    assert analyzer.local_coefficient(graph.node_for(0)) == 1.0


def test_coefficients_within_unit_interval():
    edges = [(0, 1), (0, 2), (0, 3), (1, 2), (2, 3), (3, 1), (1, 0), (2, 0), (4, 0), (4, 1)]
    analyzer = ClusteringAnalyzer(build(edges))
    coefficients = analyzer.local_coefficients()
    assert len(coefficients) == 5
    assert ((coefficients >= 0.0) & (coefficients <= 1.0)).all()
    assert 0.0 <= analyzer.average_clustering() <= 1.0


def test_empty_graph():
    assert ClusteringAnalyzer(DiGraphStore()).average_clustering() == 0.0
