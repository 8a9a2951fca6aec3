import pytest

from graphstats.analysis.traversal import TraversalEngine
from graphstats.core.graph import DiGraphStore
from graphstats.formats.read_edge_list import EdgeListLoader


def build(edges):
    return EdgeListLoader().load([f"{a} {b}" for a, b in edges])


def test_cycle_separation(cycle_path):
    with open(cycle_path) as f:
        engine = TraversalEngine(EdgeListLoader().load(f))

    assert engine.average_degree_of_separation() == 1.5
    assert engine.largest_degree_of_separation() == 3


def test_bfs_depths_follow_edge_direction():
    graph = build([(0, 1), (1, 2), (3, 0)])
    engine = TraversalEngine(graph)

    depths = engine.bfs_depths(graph.node_for(0))
    assert depths == {graph.node_for(0): 0, graph.node_for(1): 1, graph.node_for(2): 2}
    assert graph.node_for(3) not in depths


def test_bfs_depths_take_shortest_path():
    graph = build([(0, 1), (1, 2), (2, 3), (0, 3)])
    depths = TraversalEngine(graph).bfs_depths(graph.node_for(0))
    assert depths[graph.node_for(3)] == 1


def test_start_depth_is_zero_and_buffer_is_reused():
    graph = build([(0, 1), (1, 2), (2, 0), (2, 3)])
    engine = TraversalEngine(graph)

    for start in graph.node_indices():
        depths = engine.bfs_depths(start)
        assert depths[start] == 0
        # Every reached node other than the start has a predecessor one hop closer
        for node, depth in depths.items():
            if node == start:
                continue
            assert any(depths.get(p) == depth - 1
                       for p in graph.node_indices() if node in graph.neighbors(p))


def test_unknown_start_raises():
    engine = TraversalEngine(build([(0, 1)]))
    with pytest.raises(ValueError):
        engine.bfs_depths(5)


def test_empty_graph_defaults():
    engine = TraversalEngine(DiGraphStore())
    assert engine.average_degree_of_separation() == 0.0
    assert engine.largest_degree_of_separation() == 0


def test_isolated_pairs_count_self_depth():
    # Two disconnected edges: starts 0 and 2 reach 2 nodes each, 1 and 3 reach only themselves
    engine = TraversalEngine(build([(0, 1), (2, 3)]))
    summary = engine.summarize()
    assert summary.total_pairs == 6
    assert summary.total_depth == 2
    assert summary.max_depth == 1
    assert engine.average_degree_of_separation() == pytest.approx(2 / 6)


def test_relabelling_does_not_change_statistics():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (1, 4)]
    relabel = {0: 900, 1: 17, 2: 5, 3: 1234, 4: 42}
    original = TraversalEngine(build(edges))
    relabelled = TraversalEngine(build([(relabel[a], relabel[b]) for a, b in edges]))

    assert original.summarize() == relabelled.summarize()
