"""
Character grid for text diagrams.

The grid is a list of character rows. Rows keep their own length, so a
diagram read from a file with ragged lines is represented as-is. Reads past
any bound return None instead of raising.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from .models import Direction, Point


class Grid:
    """
    A 2D, possibly jagged, character store.

    The parsing functions only read from a grid. ``set`` exists for an
    interactive owner that edits cells in place; such edits are not picked up
    by a previously computed parse result.
    """

    def __init__(self, rows: Optional[List[List[str]]] = None):
        self.rows: List[List[str]] = rows if rows is not None else []

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        """Build a grid with one row per line, dropping line terminators."""
        return cls([list(line.rstrip("\r\n")) for line in lines])

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """Build a grid from a block of text."""
        return cls.from_lines(text.splitlines())

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self.rows), default=0)

    def at(self, p: Point) -> Optional[str]:
        """Get the glyph at ``p``, or None when ``p`` is off the grid."""
        if p.row >= len(self.rows):
            return None
        row = self.rows[p.row]
        if p.col >= len(row):
            return None
        return row[p.col]

    def set(self, p: Point, glyph: str) -> None:
        """Overwrite the cell at ``p``. Writes off the grid are ignored."""
        if p.row < len(self.rows) and p.col < len(self.rows[p.row]):
            self.rows[p.row][p.col] = glyph

    def in_dir(self, p: Point, d: Direction) -> Optional[Tuple[Point, str]]:
        """Get the neighbor of ``p`` in direction ``d`` together with its glyph."""
        q = p.in_dir(d)
        if q is None:
            return None
        glyph = self.at(q)
        if glyph is None:
            return None
        return q, glyph

    def cells(self) -> Iterator[Tuple[Point, str]]:
        """Yield every cell in row-major order."""
        for row_idx, row in enumerate(self.rows):
            for col_idx, glyph in enumerate(row):
                yield Point(row_idx, col_idx), glyph

    def render(self) -> str:
        """Render the grid back to text."""
        return "\n".join("".join(row) for row in self.rows)
