"""
Data models for diagram parsing.

This module contains the value types shared by every stage of the parser:
grid coordinates, the four scan directions, and axis-aligned boxes. Edges
are plain tuples of points and are described by the ``Edge`` alias.

Classes:
    Point: A (row, col) grid coordinate.
    Direction: One of the four orthogonal scan directions.
    TBox: An axis-aligned rectangle given by its min and max corners.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple


class Direction(Enum):
    """
    Orthogonal scan direction.

    Iteration order (UP, DN, LT, RT) is significant: the path tracer tries
    untried directions in this order when it has to turn.
    """

    UP = "up"
    DN = "dn"
    LT = "lt"
    RT = "rt"

    def negate(self) -> "Direction":
        """Return the opposite direction."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DN,
    Direction.DN: Direction.UP,
    Direction.LT: Direction.RT,
    Direction.RT: Direction.LT,
}


@dataclass(frozen=True)
class Point:
    """
    A cell coordinate in a grid.

    Attributes:
        row: Row index (0-based from the top).
        col: Column index (0-based from the left).
    """

    row: int
    col: int

    def __post_init__(self):
        if self.row < 0 or self.col < 0:
            raise ValueError(f"negative grid coordinate: ({self.row}, {self.col})")

    def __repr__(self) -> str:
        return f"({self.row}, {self.col})"

    def in_dir(self, d: Direction) -> Optional["Point"]:
        """
        Return the neighboring point in direction ``d``.

        Returns None when the neighbor would need a negative coordinate.
        Moving down or right always succeeds here; whether the cell exists
        is for the grid to decide.
        """
        if d is Direction.UP:
            return Point(self.row - 1, self.col) if self.row > 0 else None
        if d is Direction.DN:
            return Point(self.row + 1, self.col)
        if d is Direction.LT:
            return Point(self.row, self.col - 1) if self.col > 0 else None
        return Point(self.row, self.col + 1)


# Polyline of endpoints and turn points; straight runs between them are implied.
Edge = Tuple[Point, ...]


@dataclass(frozen=True)
class TBox:
    """
    Axis-aligned rectangle with inclusive bounds.

    Attributes:
        lo: Top-left (minimum) corner.
        hi: Bottom-right (maximum) corner.
    """

    lo: Point
    hi: Point

    def __post_init__(self):
        if self.lo.row > self.hi.row or self.lo.col > self.hi.col:
            raise ValueError(f"unordered box corners: {self.lo!r} {self.hi!r}")

    @classmethod
    def from_corners(cls, a: Point, b: Point) -> "TBox":
        """Build a box from any two opposite corners."""
        return cls(
            Point(min(a.row, b.row), min(a.col, b.col)),
            Point(max(a.row, b.row), max(a.col, b.col)),
        )

    def __repr__(self) -> str:
        return f"[{self.lo!r} {self.hi!r}]"

    @property
    def height(self) -> int:
        return self.hi.row - self.lo.row + 1

    @property
    def width(self) -> int:
        return self.hi.col - self.lo.col + 1

    def contains(self, p: Point) -> bool:
        """Check whether ``p`` lies inside the box or on its outline."""
        return (
            self.lo.row <= p.row <= self.hi.row
            and self.lo.col <= p.col <= self.hi.col
        )

    def intersects(self, other: "TBox") -> bool:
        """Check whether two boxes share at least one cell."""
        return not (
            self.hi.row < other.lo.row
            or self.lo.row > other.hi.row
            or self.hi.col < other.lo.col
            or self.lo.col > other.hi.col
        )

    def points(self) -> Iterator[Point]:
        """Yield every cell of the box in row-major order."""
        for row in range(self.lo.row, self.hi.row + 1):
            for col in range(self.lo.col, self.hi.col + 1):
                yield Point(row, col)

    def in_dir(self, d: Direction) -> Optional["TBox"]:
        """Return the box shifted one cell in ``d``, or None if it would go negative."""
        lo = self.lo.in_dir(d)
        hi = self.hi.in_dir(d)
        if lo is None or hi is None:
            return None
        return TBox(lo, hi)
