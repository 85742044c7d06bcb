"""
Straight-run scanning and box detection.

Boxes are found in two steps. ``top_lefts`` does a cheap local test for
cells that look like a top-left corner, then ``boxes`` walks the outline
from each candidate and keeps only those whose outline closes:

    tl ------ tr
    |          |
    bl ------ br   <- reached both from bl (going right) and tr (going down)
"""

import logging
from typing import List, Optional, Tuple

from .glyphs import can_go
from .grid import Grid
from .models import Direction, Point, TBox
from .tracer import ParseTrace

logger = logging.getLogger(__name__)


def scan_dir(grid: Grid, p: Point, d: Direction) -> Optional[Tuple[Point, str]]:
    """
    Walk from ``p`` in direction ``d`` while the run stays straight and connected.

    Stops on the last point still on the run: either the current point when
    the next cell cannot receive the connection, or the first cell that
    receives it but cannot carry it further (a corner).

    Returns:
        (point, glyph) of the end of the run, or None if ``p`` is off the grid.
    """
    while True:
        neighbor = grid.in_dir(p, d)
        if neighbor is None:
            break
        q, glyph = neighbor
        if not can_go(glyph, d.negate()):
            break
        p = q
        if not can_go(glyph, d):
            return p, glyph

    glyph = grid.at(p)
    if glyph is None:
        return None
    return p, glyph


def top_lefts(grid: Grid) -> List[Tuple[Point, str]]:
    """Find every cell that opens right and down into matching neighbors."""
    found = []
    for p, glyph in grid.cells():
        if not (can_go(glyph, Direction.DN) and can_go(glyph, Direction.RT)):
            continue
        right = grid.in_dir(p, Direction.RT)
        below = grid.in_dir(p, Direction.DN)
        if (
            right is not None
            and can_go(right[1], Direction.LT)
            and below is not None
            and can_go(below[1], Direction.UP)
        ):
            found.append((p, glyph))
    return found


def boxes(grid: Grid, trace: Optional[ParseTrace] = None) -> List[TBox]:
    """
    Find every closed rectangle in the grid.

    Candidates whose outline does not close are dropped. Overlapping or
    nested boxes are not resolved against each other.

    Args:
        grid: Grid to scan.
        trace: Optional trace that records rejected candidates.

    Returns:
        Boxes in row-major order of their top-left corners.
    """
    corners = top_lefts(grid)
    if trace is not None:
        trace.add_stage("top_lefts", {"candidates": [p for p, _ in corners]})

    found: List[TBox] = []
    for tl, _ in corners:
        reason = None
        tr = scan_dir(grid, tl, Direction.RT)
        bl = scan_dir(grid, tl, Direction.DN)
        if tr is None or bl is None:
            reason = "outline_off_grid"
        else:
            br = scan_dir(grid, bl[0], Direction.RT)
            br2 = scan_dir(grid, tr[0], Direction.DN)
            if br is None or br2 is None:
                reason = "outline_off_grid"
            elif br != br2:
                reason = "outline_not_closed"
            else:
                found.append(TBox(tl, br[0]))
                continue

        logger.debug("Dropping corner candidate %r: %s", tl, reason)
        if trace is not None:
            trace.add_rejection(tl, reason)

    if trace is not None:
        trace.add_stage("boxes", {"boxes": list(found)})
    return found
