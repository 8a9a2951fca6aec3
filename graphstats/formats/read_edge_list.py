"""
Edge list reader.

Parses whitespace-delimited integer pairs into a DiGraphStore. Malformed and
unreadable lines are skipped with a warning; they never abort a load.
"""

import logging
import re
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

from ..core.graph import DiGraphStore

logger = logging.getLogger(__name__)

_NON_NEGATIVE_INT = re.compile(r"\+?[0-9]+")


class SkippedLine(NamedTuple):
    """A line the loader could not turn into an edge."""
    line_number: int
    content: Optional[str]
    reason: str


def parse_edge(line: str) -> Optional[Tuple[int, int]]:
    """
    Parse one edge line.

    Args:
        line: Raw text line

    Returns:
        (source, target) external identifiers, or None if the line is not
        exactly two non-negative integers
    """
    tokens = line.split()
    if len(tokens) != 2:
        return None
    if not all(_NON_NEGATIVE_INT.fullmatch(token) for token in tokens):
        return None
    return int(tokens[0]), int(tokens[1])


class EdgeListLoader:
    """
    Builds a DiGraphStore from edge list lines.

    External identifiers are deduplicated into dense internal indices in
    order of first appearance. Every skipped line is logged and kept in
    ``skipped`` for the caller.
    """

    def __init__(self, graph: Optional[DiGraphStore] = None, encoding: str = "utf-8"):
        """
        Initialize the loader.

        Args:
            graph: Store to populate; a new one is created when omitted
            encoding: Encoding used to decode byte lines
        """
        self.graph = graph if graph is not None else DiGraphStore()
        self.encoding = encoding
        self.skipped: List[SkippedLine] = []
        self.edges_loaded = 0

    def load(self, lines: Iterable[Union[str, bytes]]) -> DiGraphStore:
        """
        Insert every valid edge line and freeze the store.

        Args:
            lines: Text lines, or byte lines decoded one at a time

        Returns:
            The populated, frozen graph store
        """
        for line_number, raw in enumerate(lines, start=1):
            if isinstance(raw, bytes):
                try:
                    line = raw.decode(self.encoding)
                except UnicodeDecodeError as e:
                    self._skip(line_number, None, f"undecodable: {e.reason}")
                    continue
            else:
                line = raw

            self.add_line(line_number, line)

        self.graph.freeze()
        logger.debug(f"Loaded {self.edges_loaded} edges, skipped {len(self.skipped)} lines")
        return self.graph

    def add_line(self, line_number: int, line: str) -> bool:
        """
        Insert the edge described by a single line.

        Returns:
            True if an edge was inserted, False if the line was skipped
        """
        edge = parse_edge(line)
        if edge is None:
            self._skip(line_number, line.rstrip("\r\n"), "malformed")
            return False

        source = self.graph.add_node(edge[0])
        target = self.graph.add_node(edge[1])
        self.graph.add_edge(source, target)
        self.edges_loaded += 1
        return True

    def _skip(self, line_number: int, content: Optional[str], reason: str) -> None:
        self.skipped.append(SkippedLine(line_number, content, reason))
        if content is None:
            logger.warning(f"Error reading line {line_number}")
        else:
            logger.warning(f"Invalid edge at line {line_number}: {content}")


def read_edge_list(filename: str, encoding: str = "utf-8",
                   loader: Optional[EdgeListLoader] = None) -> DiGraphStore:
    """
    Read a directed graph from an edge list file.

    The file is read in binary mode and each line decoded on its own, so one
    bad line does not stop the rest of the file from loading.

    Args:
        filename: Path of the edge list file
        encoding: Text encoding of the file
        loader: Loader to use, so the caller can inspect its skipped lines

    Returns:
        The populated, frozen graph store

    Raises:
        OSError: If the file cannot be opened or read
    """
    if loader is None:
        loader = EdgeListLoader(encoding=encoding)
    with open(filename, "rb") as f:
        graph = loader.load(f)

    logger.info(f"Read graph from {filename}: {graph.node_count} nodes, {graph.edge_count} edges")
    return graph
