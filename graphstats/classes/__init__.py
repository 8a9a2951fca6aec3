"""
Result data classes shared across the graphstats library.
"""

from .report import GraphReport, StatisticsReporter, format_report

__all__ = ['GraphReport', 'StatisticsReporter', 'format_report']
