"""
Parser module for text diagrams.

Turns a character grid into its boxes and connectors. Parsing is always a
full recompute from a grid snapshot; nothing is updated incrementally when
cells change afterwards.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, List, Optional, Set

from .edges import edges, path_contains
from .grid import Grid
from .models import Edge, Point, TBox
from .scanner import boxes
from .tracer import ParseTrace

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when diagram input cannot be read."""

    pass


class CellStyle(Enum):
    """Highlight class of a cell, highest precedence first: focus, edge, box."""

    FOCUS = "focus"
    EDGE = "edge"
    BOX = "box"
    PLAIN = "plain"


@dataclass
class ParseResult:
    """Boxes and connectors found in a grid."""

    grid: Grid
    boxes: List[TBox] = field(default_factory=list)
    edges: Set[Edge] = field(default_factory=set)

    def box_at(self, p: Point) -> Optional[TBox]:
        """Return the first box (in detection order) containing ``p``."""
        for box in self.boxes:
            if box.contains(p):
                return box
        return None

    def edge_at(self, p: Point) -> Optional[Edge]:
        """Return a connector passing through ``p``, if any."""
        for edge in self.edges:
            if path_contains(edge, p):
                return edge
        return None

    def style_at(self, p: Point, focus: Optional[TBox] = None) -> CellStyle:
        """
        Classify a cell for highlighting.

        Args:
            p: Cell to classify.
            focus: Optional box to highlight above everything else.
        """
        if focus is not None and focus.contains(p):
            return CellStyle.FOCUS
        if self.edge_at(p) is not None:
            return CellStyle.EDGE
        if self.box_at(p) is not None:
            return CellStyle.BOX
        return CellStyle.PLAIN


class DiagramParser:
    """
    Finds boxes and connectors in a grid.

    Example:
        >>> parser = DiagramParser()
        >>> result = parser.parse(Grid.from_text(diagram))
        >>> result.boxes
        [[(1, 1) (4, 5)], [(2, 7) (6, 9)]]
    """

    def __init__(self):
        self._trace: Optional[ParseTrace] = None

    def parse(self, grid: Grid, debug: bool = False) -> ParseResult:
        """
        Recompute boxes and connectors from the current state of ``grid``.

        Args:
            grid: Grid to parse. It is not modified.
            debug: If True, record a ParseTrace retrievable via get_trace().

        Returns:
            ParseResult referencing ``grid``.
        """
        self._trace = ParseTrace() if debug else None

        found_boxes = boxes(grid, trace=self._trace)
        found_edges = edges(grid, found_boxes, trace=self._trace)

        logger.debug(
            "Parsed %dx%d grid: %d boxes, %d connectors",
            grid.height,
            grid.width,
            len(found_boxes),
            len(found_edges),
        )
        return ParseResult(grid=grid, boxes=found_boxes, edges=found_edges)

    def get_trace(self) -> Optional[ParseTrace]:
        """Get the trace of the last parse run with debug=True."""
        return self._trace


def read_grid(stream: IO[str]) -> Grid:
    """
    Read a whole text stream into a grid, one row per line.

    Raises:
        ParseError: If the stream cannot be read or decoded.
    """
    try:
        return Grid.from_lines(stream)
    except UnicodeDecodeError as exc:
        raise ParseError(f"Cannot decode input: {exc}") from exc
    except OSError as exc:
        raise ParseError(f"Cannot read input: {exc}") from exc


def parse_diagram(text: str) -> ParseResult:
    """
    Convenience function to parse a diagram given as text.

    Args:
        text: Multi-line diagram.

    Returns:
        ParseResult with boxes and connectors.
    """
    parser = DiagramParser()
    return parser.parse(Grid.from_text(text))
