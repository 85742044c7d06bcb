"""Unit tests for the grid module."""

from boxtrace.grid import Grid
from boxtrace.models import Direction, Point


class TestGrid:
    """Tests for the Grid class."""

    def test_from_text_keeps_jagged_rows(self):
        """Rows keep their own lengths."""
        grid = Grid.from_text("abc\nd\n\nefgh")
        assert grid.height == 4
        assert grid.width == 4
        assert [len(row) for row in grid.rows] == [3, 1, 0, 4]

    def test_from_lines_strips_terminators(self):
        """Line endings are not cells."""
        grid = Grid.from_lines(["ab\n", "cd\r\n", "e"])
        assert grid.rows == [["a", "b"], ["c", "d"], ["e"]]

    def test_empty_grid(self):
        """An empty grid has no size and no cells."""
        grid = Grid.from_text("")
        assert grid.height == 0
        assert grid.width == 0
        assert list(grid.cells()) == []
        assert grid.at(Point(0, 0)) is None

    def test_at(self):
        """Cells are read by (row, col)."""
        grid = Grid.from_text("abc\nd")
        assert grid.at(Point(0, 2)) == "c"
        assert grid.at(Point(1, 0)) == "d"

    def test_at_out_of_bounds(self):
        """Reads past any bound return None."""
        grid = Grid.from_text("abc\nd")
        assert grid.at(Point(1, 1)) is None
        assert grid.at(Point(0, 3)) is None
        assert grid.at(Point(2, 0)) is None

    def test_set(self):
        """Cells can be overwritten in place."""
        grid = Grid.from_text("abc")
        grid.set(Point(0, 1), "-")
        assert grid.render() == "a-c"

    def test_set_out_of_bounds(self):
        """Writes off the grid are ignored."""
        grid = Grid.from_text("abc")
        grid.set(Point(0, 5), "x")
        grid.set(Point(3, 0), "x")
        assert grid.render() == "abc"

    def test_in_dir(self):
        """Neighbors come back with their glyph."""
        grid = Grid.from_text("ab\ncd")
        assert grid.in_dir(Point(0, 0), Direction.RT) == (Point(0, 1), "b")
        assert grid.in_dir(Point(0, 0), Direction.DN) == (Point(1, 0), "c")
        assert grid.in_dir(Point(1, 1), Direction.UP) == (Point(0, 1), "b")

    def test_in_dir_off_grid(self):
        """No neighbor past the edges, including a short row."""
        grid = Grid.from_text("ab\nc")
        assert grid.in_dir(Point(0, 0), Direction.UP) is None
        assert grid.in_dir(Point(0, 0), Direction.LT) is None
        assert grid.in_dir(Point(0, 1), Direction.DN) is None
        assert grid.in_dir(Point(0, 1), Direction.RT) is None

    def test_cells_row_major(self):
        """Cells are yielded row by row."""
        grid = Grid.from_text("ab\nc")
        assert list(grid.cells()) == [
            (Point(0, 0), "a"),
            (Point(0, 1), "b"),
            (Point(1, 0), "c"),
        ]

    def test_render_round_trip(self):
        """Rendering gives back the input text."""
        text = " ,-.\n '-'"
        assert Grid.from_text(text).render() == text
