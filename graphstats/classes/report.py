"""
Statistics report assembly and formatting.

This module gathers counts, extremal-degree nodes and the headline
statistics into a GraphReport for the presentation layer.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from ..core.graph import DiGraphStore
from ..analysis.traversal import TraversalEngine
from ..analysis.clustering import ClusteringAnalyzer

logger = logging.getLogger(__name__)

NONE_LABEL = "none"


@dataclass(frozen=True)
class GraphReport:
    """
    Finished statistics for one graph.

    Extremal nodes are external identifiers, or None for an empty graph.
    """
    node_count: int
    edge_count: int
    highest_degree_node: Optional[int]
    lowest_degree_node: Optional[int]
    average_separation: float
    largest_separation: int
    clustering_coefficient: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class StatisticsReporter:
    """
    Assembles a GraphReport from a frozen graph and its analyzers.
    """

    def __init__(self, graph: DiGraphStore,
                 traversal: Optional[TraversalEngine] = None,
                 clustering: Optional[ClusteringAnalyzer] = None):
        """
        Initialize the reporter.

        Args:
            graph: DiGraphStore instance to report on
            traversal: Traversal engine to reuse; created when omitted
            clustering: Clustering analyzer to reuse; created when omitted
        """
        self.graph = graph
        self.traversal = traversal if traversal is not None else TraversalEngine(graph)
        self.clustering = clustering if clustering is not None else ClusteringAnalyzer(graph)

    def highest_degree_node(self) -> Optional[int]:
        """External ID of the node with the largest out-degree; first discovered wins ties."""
        best_id = None
        best_degree = -1
        for node_id in self.graph.node_indices():
            degree = self.graph.out_degree(node_id)
            if degree > best_degree:
                best_id, best_degree = node_id, degree

        return None if best_id is None else self.graph.external_id(best_id)

    def lowest_degree_node(self) -> Optional[int]:
        """External ID of the node with the smallest out-degree; first discovered wins ties."""
        best_id = None
        best_degree = None
        for node_id in self.graph.node_indices():
            degree = self.graph.out_degree(node_id)
            if best_degree is None or degree < best_degree:
                best_id, best_degree = node_id, degree

        return None if best_id is None else self.graph.external_id(best_id)

    def build_report(self) -> GraphReport:
        """Compute every statistic and return the finished report."""
        summary = self.traversal.summarize()
        report = GraphReport(
            node_count=self.graph.node_count,
            edge_count=self.graph.edge_count,
            highest_degree_node=self.highest_degree_node(),
            lowest_degree_node=self.lowest_degree_node(),
            average_separation=summary.average,
            largest_separation=summary.max_depth,
            clustering_coefficient=self.clustering.average_clustering(),
        )
        logger.debug(f"Built report: {report}")
        return report


def _label(external_id: Optional[int]) -> str:
    return NONE_LABEL if external_id is None else str(external_id)


def format_report(report: GraphReport) -> List[str]:
    """
    Render a report as presentation lines.

    Returns:
        Lines in display order: separation, clustering, counts, extremal nodes
    """
    return [
        f"Average Degree of Separation: {report.average_separation:.2f}",
        f"Largest Degree of Separation: {report.largest_separation}",
        f"Clustering Coefficient: {report.clustering_coefficient:.4f}",
        f"Number of Nodes: {report.node_count}",
        f"Number of Edges: {report.edge_count}",
        f"Node with Highest Degree: {_label(report.highest_degree_node)}",
        f"Node with Lowest Degree: {_label(report.lowest_degree_node)}",
    ]
