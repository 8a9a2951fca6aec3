"""
graphstats - Directed Graph Statistics Library

A Python library for computing structural statistics over directed graphs
read from integer edge lists: degree of separation, clustering coefficient,
node and edge counts, and degree extremes.

Main Classes:
    pygraphstats: Main class for graph statistics (facade)
    DiGraphStore: Directed graph store with external identifier mapping
    TraversalEngine: BFS depths and degree-of-separation statistics
    ClusteringAnalyzer: Local and average clustering coefficients
    StatisticsReporter: Assembles a GraphReport

Example:
    >>> from graphstats import pygraphstats
    >>> stats = pygraphstats.from_file("edges.txt")
    >>> stats.average_degree_of_separation()
"""

__version__ = "0.1.0"

from graphstats.core.graph import DiGraphStore
from graphstats.formats.read_edge_list import EdgeListLoader, SkippedLine, read_edge_list
from graphstats.analysis.traversal import TraversalEngine, SeparationSummary
from graphstats.analysis.clustering import ClusteringAnalyzer
from graphstats.classes.report import GraphReport, StatisticsReporter, format_report
from graphstats.core.graphstats import pygraphstats

__all__ = [
    'pygraphstats',
    'DiGraphStore',
    'EdgeListLoader',
    'SkippedLine',
    'read_edge_list',
    'TraversalEngine',
    'SeparationSummary',
    'ClusteringAnalyzer',
    'GraphReport',
    'StatisticsReporter',
    'format_report',
]
