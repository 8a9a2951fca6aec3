"""
Export a GraphReport as JSON.
"""

import json
import logging

from ..classes.report import GraphReport

logger = logging.getLogger(__name__)


def export_report_to_json(report: GraphReport, filename: str, indent: int = 2) -> None:
    """
    Write a report to a JSON file.

    Absent extremal nodes are written as null.

    Args:
        report: Report to export
        filename: Output file path
        indent: JSON indentation
    """
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, indent=indent)
        f.write("\n")

    logger.info(f"Exported report to {filename}")
