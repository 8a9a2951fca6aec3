"""
Core graph data structure for directed edge-list networks.

This module provides the fundamental graph structure without any analysis.
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)


class DiGraphStore:
    """
    Core directed graph store.

    This class manages the fundamental graph representation without analysis
    operations. It provides:
    - External identifier to dense internal index management
    - Out-edge adjacency lists in edge-insertion order
    - Edge membership lookup for either direction
    - A freeze step that makes the store read-only once loading is done

    Parallel edges are kept: they count toward the edge total and repeat in
    the neighbor iteration of their source node.
    """

    def __init__(self):
        # Node mappings
        self.external_to_node: Dict[int, int] = {}
        self.node_to_external: List[int] = []

        # Graph structure
        self.adjacency_list: List[List[int]] = []
        self.edge_set: Set[Tuple[int, int]] = set()
        self._edge_count = 0

        self._frozen = False

    @property
    def node_count(self) -> int:
        """Number of distinct nodes in the store."""
        return len(self.node_to_external)

    @property
    def edge_count(self) -> int:
        """Number of inserted edges, parallel duplicates included."""
        return self._edge_count

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Mark loading as complete. Further insertions raise RuntimeError."""
        if not self._frozen:
            self._frozen = True
            logger.debug(f"Froze graph with {self.node_count} nodes and {self.edge_count} edges")

    def add_node(self, external_id: int) -> int:
        """
        Resolve an external identifier, inserting a new node on first sight.

        Args:
            external_id: Identifier the node is named by in the input

        Returns:
            Internal node index (0-based)
        """
        node = self.external_to_node.get(external_id)
        if node is not None:
            return node

        self._check_mutable()
        node = len(self.node_to_external)
        self.external_to_node[external_id] = node
        self.node_to_external.append(external_id)
        self.adjacency_list.append([])
        return node

    def add_edge(self, source: int, target: int) -> None:
        """
        Insert a directed edge between two existing nodes.

        Args:
            source: Internal index of the source node
            target: Internal index of the target node

        Raises:
            ValueError: If either endpoint is not a node of the store
            RuntimeError: If the store has been frozen
        """
        self._check_mutable()
        self._check_node(source)
        self._check_node(target)

        self.adjacency_list[source].append(target)
        self.edge_set.add((source, target))
        self._edge_count += 1

    def node_indices(self) -> range:
        """Internal node indices in discovery order."""
        return range(self.node_count)

    def neighbors(self, node: int) -> List[int]:
        """Get the successors of a node in edge-insertion order, duplicates included."""
        self._check_node(node)
        return list(self.adjacency_list[node])

    def distinct_neighbors(self, node: int) -> List[int]:
        """Get the distinct successors of a node, in order of first insertion."""
        self._check_node(node)
        return list(dict.fromkeys(self.adjacency_list[node]))

    def out_degree(self, node: int) -> int:
        """Count of outgoing edges from a node, duplicates included."""
        self._check_node(node)
        return len(self.adjacency_list[node])

    def contains_edge(self, source: int, target: int) -> bool:
        return (source, target) in self.edge_set

    def external_id(self, node: int) -> int:
        """Get the external identifier of an internal node."""
        self._check_node(node)
        return self.node_to_external[node]

    def node_for(self, external_id: int) -> Optional[int]:
        """
        Get the internal index for an external identifier.

        Args:
            external_id: Identifier as it appeared in the input

        Returns:
            Internal node index, or None if the identifier was never inserted
        """
        return self.external_to_node.get(external_id)

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.node_count:
            raise ValueError(f"Node index {node} is not in graph with {self.node_count} nodes")

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("Graph is frozen; no further nodes or edges can be inserted")

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"DiGraphStore(nodes={self.node_count}, edges={self.edge_count})"
