"""
Graph analysis modules for traversal and clustering statistics.
"""

from .traversal import TraversalEngine, SeparationSummary
from .clustering import ClusteringAnalyzer

__all__ = ['TraversalEngine', 'SeparationSummary', 'ClusteringAnalyzer']
