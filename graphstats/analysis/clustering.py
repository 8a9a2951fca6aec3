"""
Local clustering coefficient over out-neighbor sets.
"""

import logging
from itertools import combinations

import numpy as np

from ..core.graph import DiGraphStore

logger = logging.getLogger(__name__)


class ClusteringAnalyzer:
    """
    Computes per-node and graph-wide clustering coefficients.

    A node's neighbor set is its distinct successors; parallel edges do not
    add neighbor pairs. A pair of neighbors is closed when an edge joins
    them in either direction.
    """

    def __init__(self, graph: DiGraphStore):
        self.graph = graph

    def closed_pairs(self, node_id: int) -> int:
        """Count unordered pairs of distinct neighbors joined by an edge."""
        neighbors = self.graph.distinct_neighbors(node_id)
        contains_edge = self.graph.contains_edge
        return sum(1 for a, b in combinations(neighbors, 2)
                   if contains_edge(a, b) or contains_edge(b, a))

    def local_coefficient(self, node_id: int) -> float:
        """
        Clustering coefficient of a single node.

        Args:
            node_id: Internal node index

        Returns:
            2 * closed / (k * (k - 1)) for k distinct neighbors, or 0.0 when k < 2
        """
        k = len(self.graph.distinct_neighbors(node_id))
        if k < 2:
            return 0.0
        return 2.0 * self.closed_pairs(node_id) / (k * (k - 1))

    def local_coefficients(self) -> np.ndarray:
        """Clustering coefficient of every node, indexed by internal node ID."""
        return np.array([self.local_coefficient(node_id) for node_id in self.graph.node_indices()],
                        dtype=np.float64)

    def average_clustering(self) -> float:
        """Mean local coefficient over all nodes; 0.0 for an empty graph."""
        if self.graph.node_count == 0:
            return 0.0

        coefficient = float(self.local_coefficients().sum() / self.graph.node_count)
        logger.debug(f"Average clustering coefficient over {self.graph.node_count} nodes: {coefficient:.4f}")
        return coefficient
