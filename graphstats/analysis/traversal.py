"""
Breadth-first traversal and degree-of-separation statistics.

This module provides the BFS depth primitive and the all-pairs aggregates
built on top of it.
"""

import logging
import time
from collections import deque
from typing import Dict, List, NamedTuple, Optional

import numpy as np

from ..core.graph import DiGraphStore

logger = logging.getLogger(__name__)

UNVISITED = -1


class SeparationSummary(NamedTuple):
    """Aggregated depths over a BFS from every node."""
    total_depth: int
    total_pairs: int
    max_depth: int

    @property
    def average(self) -> float:
        if self.total_pairs == 0:
            return 0.0
        return self.total_depth / self.total_pairs


class TraversalEngine:
    """
    Shortest hop-count traversal over a frozen DiGraphStore.

    This class provides methods for:
    - Computing per-node BFS depths from a start node
    - Average degree of separation over all reachable pairs
    - Largest degree of separation over all reachable pairs

    A single depth buffer sized to the node count is reused across
    traversals and reset after each one.
    """

    def __init__(self, graph: DiGraphStore):
        """
        Initialize the traversal engine.

        Args:
            graph: DiGraphStore instance to traverse
        """
        self.graph = graph
        self._depth = np.full(graph.node_count, UNVISITED, dtype=np.int64)
        self._summary: Optional[SeparationSummary] = None

    def _traverse(self, start_id: int) -> List[int]:
        """
        Run a BFS from start_id, leaving depths in the shared buffer.

        Returns:
            Reached node IDs in visitation order; the caller must reset them
        """
        depth = self._depth
        adjacency_list = self.graph.adjacency_list

        order = [start_id]
        depth[start_id] = 0
        queue = deque([start_id])

        while queue:
            current_id = queue.popleft()
            next_depth = depth[current_id] + 1

            for neighbor_id in adjacency_list[current_id]:
                if depth[neighbor_id] == UNVISITED:
                    depth[neighbor_id] = next_depth
                    order.append(neighbor_id)
                    queue.append(neighbor_id)

        return order

    def _reset(self, order: List[int]) -> None:
        self._depth[order] = UNVISITED

    def _ensure_buffer(self) -> None:
        if len(self._depth) != self.graph.node_count:
            self._depth = np.full(self.graph.node_count, UNVISITED, dtype=np.int64)
            self._summary = None

    def bfs_depths(self, start_id: int) -> Dict[int, int]:
        """
        Minimum directed hop count from a start node to every node it reaches.

        Args:
            start_id: Internal index of the start node

        Returns:
            Mapping of reached node ID to depth; the start maps to 0 and
            unreachable nodes are absent

        Raises:
            ValueError: If start_id is not a node of the graph
        """
        if not 0 <= start_id < self.graph.node_count:
            raise ValueError(f"Start node {start_id} is not in graph with {self.graph.node_count} nodes")

        self._ensure_buffer()
        order = self._traverse(start_id)
        depths = {node_id: int(self._depth[node_id]) for node_id in order}
        self._reset(order)
        return depths

    def summarize(self, force_recalculate: bool = False) -> SeparationSummary:
        """
        Run a BFS from every node and aggregate the reached depths.

        Each start's own zero depth counts as one pair. The result is cached
        since the graph does not change after loading.

        Args:
            force_recalculate: Whether to recompute even if cached

        Returns:
            SeparationSummary over all (start, reached) pairs
        """
        self._ensure_buffer()
        if self._summary is not None and not force_recalculate:
            return self._summary

        start_time = time.time()
        total_depth = 0
        total_pairs = 0
        max_depth = 0

        for start_id in self.graph.node_indices():
            order = self._traverse(start_id)
            reached = self._depth[order]
            total_depth += int(reached.sum())
            total_pairs += len(order)
            max_depth = max(max_depth, int(reached.max()))
            self._reset(order)

        self._summary = SeparationSummary(total_depth, total_pairs, max_depth)
        logger.info(f"Ran {self.graph.node_count} traversals in {time.time() - start_time:.3f}s")
        logger.debug(f"Separation summary: {self._summary}")
        return self._summary

    def average_degree_of_separation(self) -> float:
        """Mean depth over all (start, reached) pairs; 0.0 for an empty graph."""
        return self.summarize().average

    def largest_degree_of_separation(self) -> int:
        """Maximum depth over all (start, reached) pairs; 0 for an empty graph."""
        return self.summarize().max_depth
