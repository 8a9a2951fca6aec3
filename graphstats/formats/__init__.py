"""
Readers and writers for edge lists and statistics reports.
"""
