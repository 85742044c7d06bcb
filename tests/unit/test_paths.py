"""Unit tests for connector path tracing."""

import pytest

from boxtrace.grid import Grid
from boxtrace.models import Direction, Point
from boxtrace.paths import PathIter, scan_path


class TestPathIter:
    """Tests for the PathIter iterator."""

    def test_straight_run(self):
        """Only the two ends of a straight run are produced."""
        grid = Grid.from_text("--'")
        assert list(PathIter(grid, Point(0, 0), Direction.RT)) == [
            Point(0, 0),
            Point(0, 2),
        ]

    def test_off_grid_start(self):
        """An off-grid start produces nothing."""
        grid = Grid.from_text("--")
        assert list(PathIter(grid, Point(5, 5), Direction.RT)) == []

    def test_stays_exhausted(self):
        """Once finished, the iterator keeps signalling completion."""
        grid = Grid.from_text("--")
        it = PathIter(grid, Point(0, 0), Direction.RT)
        assert list(it) == [Point(0, 0), Point(0, 1)]
        with pytest.raises(StopIteration):
            next(it)
        with pytest.raises(StopIteration):
            next(it)

    def test_circles_a_loop(self, loop_grid):
        """The raw iterator revisits points on a closed outline."""
        it = PathIter(loop_grid, Point(0, 0), Direction.RT)
        assert [next(it) for _ in range(5)] == [
            Point(0, 0),
            Point(0, 2),
            Point(1, 2),
            Point(1, 0),
            Point(0, 0),
        ]

    def test_does_not_reverse(self):
        """A dead end stops the path instead of walking back."""
        grid = Grid.from_text("---")
        assert list(PathIter(grid, Point(0, 1), Direction.RT)) == [
            Point(0, 1),
            Point(0, 2),
        ]


class TestScanPath:
    """Tests for scan_path."""

    def test_sample_connector(self, sample_grid, sample_connector):
        """The winding connector is traced corner by corner."""
        path = list(sample_connector)
        assert scan_path(sample_grid, path[0], Direction.RT) == path

    def test_sample_connector_reversed(self, sample_grid, sample_connector):
        """Tracing from the other end gives the reversed path."""
        path = list(reversed(sample_connector))
        assert scan_path(sample_grid, path[0], Direction.RT) == path

    def test_start_mid_run(self, sample_grid, sample_connector):
        """Starting inside the last straight run keeps the rest of the path."""
        path = list(reversed(sample_connector))
        path[0] = Point(path[0].row, path[0].col + 1)
        assert scan_path(sample_grid, path[0], Direction.RT) == path

    def test_start_mid_vertical_run(self, sample_grid):
        """Starting inside a vertical run follows it to the end."""
        assert scan_path(sample_grid, Point(2, 18), Direction.DN) == [
            Point(2, 18),
            Point(3, 18),
            Point(3, 12),
            Point(5, 12),
            Point(5, 10),
        ]

    def test_glyph_cannot_leave(self, sample_grid):
        """A start glyph that cannot leave in the direction gives nothing."""
        assert scan_path(sample_grid, Point(1, 1), Direction.LT) == []
        assert scan_path(sample_grid, Point(0, 0), Direction.RT) == []

    def test_non_glyph_start(self):
        """Plain text is never a path start."""
        grid = Grid.from_text("abc")
        assert scan_path(grid, Point(0, 0), Direction.RT) == []

    def test_single_point(self):
        """A lone glyph with nowhere to go is a one-point path."""
        grid = Grid.from_text("-")
        assert scan_path(grid, Point(0, 0), Direction.RT) == [Point(0, 0)]

    def test_cycle_truncated(self, loop_grid):
        """A closed loop stops just before returning to the start."""
        assert scan_path(loop_grid, Point(0, 0), Direction.RT) == [
            Point(0, 0),
            Point(0, 2),
            Point(1, 2),
            Point(1, 0),
        ]

    def test_arrow_heads(self):
        """Arrow glyphs end a connector in the direction they point."""
        grid = Grid.from_text("<-->")
        assert scan_path(grid, Point(0, 0), Direction.RT) == [
            Point(0, 0),
            Point(0, 3),
        ]
