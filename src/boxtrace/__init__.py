"""
boxtrace - Find boxes and connectors in text diagrams

A Python library for pulling structure out of ASCII box-and-line diagrams
and showing it highlighted in the terminal.

Example:
    >>> from boxtrace import parse_diagram
    >>> result = parse_diagram('''
    ...  ,---.  ,---.
    ...  | A |--| B |
    ...  '---'  '---'
    ... ''')
    >>> result.boxes
    [[(1, 1) (3, 5)], [(1, 8) (3, 12)]]

Debug Mode Example:
    >>> parser = DiagramParser()
    >>> result = parser.parse(grid, debug=True)
    >>> print(parser.get_trace().summary())
"""

from .colorize import Colorizer, format_dump, render_colorized
from .connectivity import build_graph, connected_groups, dangling_edges
from .edges import border, border_in_dir, edges, path_contains, sorted_edges
from .export import DiagramExporter, render_to_png
from .glyphs import GLYPH_DIRECTIONS, GLYPHS, can_go
from .grid import Grid
from .models import Direction, Edge, Point, TBox
from .parser import (
    CellStyle,
    DiagramParser,
    ParseError,
    ParseResult,
    parse_diagram,
    read_grid,
)
from .paths import PathIter, scan_path
from .scanner import boxes, scan_dir, top_lefts
from .tracer import CandidateRejection, ParseTrace, PipelineStage

__version__ = "0.1.0"

__all__ = [
    # Main API
    "DiagramParser",
    "ParseResult",
    "ParseError",
    "CellStyle",
    "parse_diagram",
    "read_grid",
    # Model
    "Grid",
    "Point",
    "Direction",
    "TBox",
    "Edge",
    # Parsing engine
    "GLYPH_DIRECTIONS",
    "GLYPHS",
    "can_go",
    "scan_dir",
    "top_lefts",
    "boxes",
    "PathIter",
    "scan_path",
    "border",
    "border_in_dir",
    "edges",
    "path_contains",
    "sorted_edges",
    # Connectivity
    "build_graph",
    "connected_groups",
    "dangling_edges",
    # Output
    "Colorizer",
    "format_dump",
    "render_colorized",
    "DiagramExporter",
    "render_to_png",
    # Debug/Tracing
    "ParseTrace",
    "PipelineStage",
    "CandidateRejection",
]
