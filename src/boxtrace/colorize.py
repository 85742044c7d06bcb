"""
Batch output: a structured dump and an ANSI-colorized copy of the diagram.

Cells are styled by precedence (connector, then box, then plain). An escape
sequence is written only where the style changes, so a long run of box
cells costs a single escape.
"""

from typing import Dict, Iterable, List, Optional

from .connectivity import build_graph
from .edges import sorted_edges
from .models import Edge, Point, TBox
from .parser import CellStyle, ParseResult

RESET = "\x1b[0m"

ANSI_STYLES: Dict[CellStyle, str] = {
    CellStyle.FOCUS: "\x1b[35m",
    CellStyle.EDGE: "\x1b[33m",
    CellStyle.BOX: "\x1b[34m",
    CellStyle.PLAIN: RESET,
}


class Colorizer:
    """
    Renders a parse result with ANSI foreground colors.

    Example:
        >>> colorizer = Colorizer()
        >>> print(colorizer.colorize(parse_diagram(text)))
    """

    def __init__(self, styles: Optional[Dict[CellStyle, str]] = None):
        """
        Initialize the colorizer.

        Args:
            styles: Escape sequence per cell style; missing entries fall back
                    to ANSI_STYLES.
        """
        self.styles = dict(ANSI_STYLES)
        if styles:
            self.styles.update(styles)

    def colorize(self, result: ParseResult, focus: Optional[TBox] = None) -> str:
        """
        Re-emit the diagram with a style escape before each differently styled run.

        Args:
            result: Parse result whose grid is rendered.
            focus: Optional box highlighted above everything else.

        Returns:
            The colorized diagram, ending in the reset style.
        """
        reset = self.styles[CellStyle.PLAIN]
        out: List[str] = []
        current = reset

        for row_idx, row in enumerate(result.grid.rows):
            for col_idx, glyph in enumerate(row):
                style = self.styles[
                    result.style_at(Point(row_idx, col_idx), focus=focus)
                ]
                if style != current:
                    out.append(style)
                    current = style
                out.append(glyph)
            out.append("\n")

        if current != reset:
            out.append(reset)
        return "".join(out)


def format_boxes(boxes: List[TBox]) -> str:
    """Format the BOXES section, one box per line in detection order."""
    lines = ["BOXES ["]
    lines.extend(f"    {box!r}," for box in boxes)
    lines.append("]")
    return "\n".join(lines)


def format_edges(edges: Iterable[Edge]) -> str:
    """Format the EDGES section, one sorted connector per line."""
    lines = ["EDGES {"]
    for edge in sorted_edges(edges):
        lines.append(f"    [{', '.join(repr(p) for p in edge)}],")
    lines.append("}")
    return "\n".join(lines)


def format_dump(result: ParseResult) -> str:
    """
    Format the structured dump printed ahead of the colorized diagram.

    Boxes keep detection order; connectors and links are sorted so the dump
    is stable between runs.
    """
    graph = build_graph(result)
    links = sorted((min(a, b), max(a, b)) for a, b in graph.edges())

    lines = [format_boxes(result.boxes), format_edges(result.edges), "LINKS ["]
    lines.extend(f"    {a} -- {b}," for a, b in links)
    lines.append("]")
    return "\n".join(lines)


def render_colorized(result: ParseResult, dump: bool = True) -> str:
    """
    Convenience function producing the full batch output.

    Args:
        result: Parse result to render.
        dump: Whether to include the structured dump before the diagram.
    """
    text = Colorizer().colorize(result)
    if dump:
        return format_dump(result) + "\n" + text
    return text
