"""
Command line entry point.

Reads a diagram from a file or standard input, then prints the structured
dump and the colorized diagram, writes a PNG, or opens the interactive view.
"""

import argparse
import curses
import logging
import sys
from typing import List, Optional

from .colorize import render_colorized
from .export import DiagramExporter
from .parser import DiagramParser, ParseError, read_grid
from .viewer import run_interactive

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boxtrace",
        description="Find boxes and connectors in a text diagram",
        epilog="Example: %(prog)s diagram.txt --png diagram.png",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Diagram file to read (default: standard input)",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Browse the diagram in a scrollable terminal view",
    )
    parser.add_argument(
        "--png",
        metavar="PATH",
        help="Also write the highlighted diagram to a PNG image",
    )
    parser.add_argument(
        "--no-dump",
        action="store_true",
        help="Skip the box and connector listing",
    )
    parser.add_argument(
        "--debug-trace",
        action="store_true",
        help="Log a trace of every parse stage",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for read, write or terminal errors)
    """
    args = build_arg_parser().parse_args(argv)

    log_level = logging.DEBUG if args.debug_trace else (
        logging.INFO if args.verbose else logging.WARNING
    )
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    try:
        if args.file:
            with open(args.file, "r", encoding="utf-8") as stream:
                grid = read_grid(stream)
        else:
            grid = read_grid(sys.stdin)

        parser = DiagramParser()
        result = parser.parse(grid, debug=args.debug_trace)
        logger.info(
            "Found %d boxes and %d connectors", len(result.boxes), len(result.edges)
        )
        trace = parser.get_trace()
        if trace is not None:
            logger.debug("%s", trace.summary())

        if args.png:
            DiagramExporter().save_png(result, args.png)
            logger.info("Wrote %s", args.png)

        if args.interactive:
            run_interactive(result)
        else:
            sys.stdout.write(render_colorized(result, dump=not args.no_dump))
            sys.stdout.flush()
    except (ParseError, OSError, curses.error) as exc:
        logger.error("%s", exc)
        return 1

    return 0
