"""
Command line entry point: read an edge list and print its statistics.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.graphstats import pygraphstats
from .classes.report import format_report
from .formats.export_report import export_report_to_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphstats",
        description="Compute degree of separation, clustering and degree statistics for a directed edge list.",
    )
    parser.add_argument("path", nargs="?", default=None,
                        help="Edge list file; read from a line of stdin when omitted")
    parser.add_argument("--json", dest="json_path", default=None,
                        help="Also write the report as JSON to this path")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level for diagnostics on stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    filename = args.path
    if filename is None:
        filename = sys.stdin.readline().strip()

    try:
        stats = pygraphstats.from_file(filename)
    except OSError as e:
        logger.error(f"Failed to open {filename}: {e}")
        return 1

    print("Graph Read Successfully!\n\nProcessing Data...\n")

    report = stats.report()
    for line in format_report(report):
        print(line)

    if args.json_path:
        try:
            export_report_to_json(report, args.json_path)
        except OSError as e:
            logger.error(f"Failed to write {args.json_path}: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
