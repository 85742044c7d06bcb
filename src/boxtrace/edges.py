"""
Connector discovery between boxes.

Every cell just outside a box is a possible start for a connector. Those
that hold a glyph pointing back at the box are traced outward:

      ###
     ,---. ##
    #|   |,--.
     '---''--'
      ###  ##

The same connector is usually found from both of its ends, so results are
deduplicated regardless of the direction they were traced in.
"""

import logging
from typing import Iterable, List, Optional, Set, Tuple

from .glyphs import can_go
from .grid import Grid
from .models import Direction, Edge, Point, TBox
from .paths import scan_path
from .tracer import ParseTrace

logger = logging.getLogger(__name__)


def border_in_dir(box: TBox, d: Direction) -> TBox:
    """Return the one-cell-thick side of ``box`` facing ``d``."""
    lo, hi = box.lo, box.hi
    if d is Direction.UP:
        return TBox.from_corners(lo, Point(lo.row, hi.col))
    if d is Direction.DN:
        return TBox.from_corners(Point(hi.row, lo.col), hi)
    if d is Direction.LT:
        return TBox.from_corners(lo, Point(hi.row, lo.col))
    return TBox.from_corners(Point(lo.row, hi.col), hi)


def border(box: TBox) -> List[Tuple[Point, Direction]]:
    """
    List the probe points just outside each side of ``box``.

    Each point is tagged with the side it lies on, which is also the
    direction a trace from it heads away from the box. Sides that would
    need a negative coordinate are skipped.
    """
    probes = []
    for d in Direction:
        outside = border_in_dir(box, d).in_dir(d)
        if outside is None:
            continue
        probes.extend((p, d) for p in outside.points())
    return probes


def path_contains(edge: Edge, p: Point) -> bool:
    """
    Check whether ``p`` lies on the polyline ``edge``.

    Consecutive points are always joined by an axis-aligned run, so the
    bounding box of each pair is exactly that run.
    """
    if not edge:
        return False
    if edge[0] == p:
        return True
    for a, b in zip(edge, edge[1:]):
        if TBox.from_corners(a, b).contains(p):
            return True
    return False


def edges(
    grid: Grid, boxes: List[TBox], trace: Optional[ParseTrace] = None
) -> Set[Edge]:
    """
    Trace every connector leaving the given boxes.

    Args:
        grid: Grid the boxes were found in.
        boxes: Boxes to probe around.
        trace: Optional trace that records the probes used.

    Returns:
        Set of connectors, each stored once in one of its two orientations.
    """
    found: Set[Edge] = set()
    probes = []
    for box in boxes:
        for p, d in border(box):
            if not can_go(grid.at(p), d.negate()):
                continue
            probes.append((p, d))
            path = tuple(scan_path(grid, p, d))
            if not path:
                continue
            # Stored reversed: a connector's second find matches as-is
            if path not in found:
                found.add(path[::-1])

    logger.debug("Traced %d connectors from %d probes", len(found), len(probes))
    if trace is not None:
        trace.add_stage("probes", {"probes": probes})
        trace.add_stage("edges", {"edges": sorted_edges(found)})
    return found


def sorted_edges(found: Iterable[Edge]) -> List[Edge]:
    """Sort connectors by their point coordinates, for stable output."""
    return sorted(found, key=lambda edge: [(p.row, p.col) for p in edge])
