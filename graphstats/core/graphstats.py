"""
Main facade class for directed graph statistics.

This module provides the pygraphstats class that builds the graph store and
delegates to the specialized analysis modules.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from .graph import DiGraphStore
from ..formats.read_edge_list import EdgeListLoader, SkippedLine, read_edge_list
from ..analysis.traversal import TraversalEngine
from ..analysis.clustering import ClusteringAnalyzer
from ..classes.report import GraphReport, StatisticsReporter

logger = logging.getLogger(__name__)


class pygraphstats:
    """
    Main facade class for directed graph statistics.

    Wraps a frozen DiGraphStore with its traversal engine, clustering
    analyzer and statistics reporter.
    """

    def __init__(self, graph: DiGraphStore, skipped: Optional[List[SkippedLine]] = None):
        """
        Initialize the facade around a loaded graph.

        Args:
            graph: Graph store to analyze; frozen here if it is not already
            skipped: Lines the loader skipped, if any
        """
        graph.freeze()
        self._graph = graph
        self.skipped: List[SkippedLine] = list(skipped) if skipped else []

        # Initialize analysis components
        self._traversal = TraversalEngine(self._graph)
        self._clustering = ClusteringAnalyzer(self._graph)
        self._reporter = StatisticsReporter(self._graph, self._traversal, self._clustering)

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def from_file(cls, filename: str, encoding: str = "utf-8") -> "pygraphstats":
        """Load an edge list file. Raises OSError if it cannot be read."""
        loader = EdgeListLoader(encoding=encoding)
        graph = read_edge_list(filename, loader=loader)
        return cls(graph, loader.skipped)

    @classmethod
    def from_lines(cls, lines: Iterable[Union[str, bytes]]) -> "pygraphstats":
        """Load edge list lines already in memory."""
        loader = EdgeListLoader()
        graph = loader.load(lines)
        return cls(graph, loader.skipped)

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]]) -> "pygraphstats":
        """Build from (source, target) external identifier pairs."""
        graph = DiGraphStore()
        for source_id, target_id in edges:
            graph.add_edge(graph.add_node(source_id), graph.add_node(target_id))
        return cls(graph)

    # ========================================================================
    # BASIC GRAPH QUERIES
    # ========================================================================

    @property
    def graph(self) -> DiGraphStore:
        return self._graph

    @property
    def node_count(self) -> int:
        return self._graph.node_count

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    # ========================================================================
    # ANALYSIS
    # ========================================================================

    def bfs_depths(self, start_id: int):
        """BFS depths from an internal node index."""
        return self._traversal.bfs_depths(start_id)

    def average_degree_of_separation(self) -> float:
        return self._traversal.average_degree_of_separation()

    def largest_degree_of_separation(self) -> int:
        return self._traversal.largest_degree_of_separation()

    def clustering_coefficient(self) -> float:
        return self._clustering.average_clustering()

    def highest_degree_node(self) -> Optional[int]:
        return self._reporter.highest_degree_node()

    def lowest_degree_node(self) -> Optional[int]:
        return self._reporter.lowest_degree_node()

    def report(self) -> GraphReport:
        """Compute all statistics into a GraphReport."""
        return self._reporter.build_report()
