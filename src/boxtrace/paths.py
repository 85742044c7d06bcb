"""
Connector path tracing.

A connector is followed one straight run at a time. At the end of each run
the tracer looks for a way to carry on, trying the directions it has not yet
tried (never the one it just came from), and gives up when none is left:

         * 4
     1 2 |
    |----' 3

    1. start point, emitted as-is
    2. straight run, ridden by ``scan_dir`` without emitting its interior
    3. corner, emitted, then a new direction is picked
    4. end, nothing left to try

Only the start, the corners and the end are emitted; the straight runs
between them are implied.
"""

from typing import List, Optional, Set

from .glyphs import can_go
from .grid import Grid
from .models import Direction, Point
from .scanner import scan_dir


class PathIter:
    """
    Lazily produce the turn points of a connector.

    The iterator is single-use: once exhausted it stays exhausted. To walk
    the same connector again, build a new one from the same start.

    Example:
        >>> grid = Grid.from_text("--'")
        >>> list(PathIter(grid, Point(0, 0), Direction.RT))
        [(0, 0), (0, 2)]
    """

    def __init__(self, grid: Grid, p: Point, d: Direction):
        self.grid = grid
        self.p = p
        self.d = d
        self._start = True
        self._done = False

    def __iter__(self) -> "PathIter":
        return self

    def __next__(self) -> Point:
        point = self._advance()
        if point is None:
            self._done = True
            raise StopIteration
        return point

    def _advance(self) -> Optional[Point]:
        if self._done or self.grid.at(self.p) is None:
            return None
        if self._start:
            self._start = False
            return self.p

        tried: Set[Direction] = {self.d.negate()}
        while True:
            if self._can_step():
                scanned = scan_dir(self.grid, self.p, self.d)
                if scanned is not None:
                    self.p = scanned[0]
                    return self.p

            tried.add(self.d)
            untried = [d for d in Direction if d not in tried]
            if not untried:
                return None
            self.d = untried[0]

    def _can_step(self) -> bool:
        if not can_go(self.grid.at(self.p), self.d):
            return False
        neighbor = self.grid.in_dir(self.p, self.d)
        return neighbor is not None and can_go(neighbor[1], self.d.negate())


def scan_path(grid: Grid, p: Point, d: Direction) -> List[Point]:
    """
    Trace the connector that leaves ``p`` in direction ``d``.

    Tracing stops before a point would be visited twice, so a connector
    that loops back on itself ends just before the loop closes.

    Returns:
        Start point, turn points and end point, or an empty list when the
        glyph at ``p`` cannot leave in ``d``.
    """
    if not can_go(grid.at(p), d):
        return []

    path: List[Point] = []
    seen: Set[Point] = set()
    for point in PathIter(grid, p, d):
        if point in seen:
            break
        seen.add(point)
        path.append(point)
    return path
