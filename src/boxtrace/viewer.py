"""
Interactive, scrollable terminal view of a parsed diagram.

The view is split in two:
- Viewport: cursor and scroll state with no terminal dependency
- Viewer: the curses front end that draws a Viewport and feeds it keys

curses.wrapper owns the terminal lifecycle (alternate screen, raw input,
keypad mode) and restores the terminal on every exit path, including
exceptions raised while drawing.

Keys are always read from the controlling terminal. When the diagram was
piped in, standard input is swapped for /dev/tty before curses starts.
"""

import curses
import logging
import os
import sys
from typing import IO, Dict, Optional, Union

from .models import Direction, Point
from .parser import CellStyle, ParseResult

logger = logging.getLogger(__name__)

QUIT = "quit"

DEFAULT_KEYMAP: Dict[int, Union[str, Direction]] = {
    ord("q"): QUIT,
    27: QUIT,  # Esc
    ord("h"): Direction.LT,
    ord("j"): Direction.DN,
    ord("k"): Direction.UP,
    ord("l"): Direction.RT,
    curses.KEY_LEFT: Direction.LT,
    curses.KEY_DOWN: Direction.DN,
    curses.KEY_UP: Direction.UP,
    curses.KEY_RIGHT: Direction.RT,
}

CURSES_COLORS: Dict[CellStyle, int] = {
    CellStyle.FOCUS: curses.COLOR_MAGENTA,
    CellStyle.EDGE: curses.COLOR_YELLOW,
    CellStyle.BOX: curses.COLOR_BLUE,
}


def _clamp(value: int, lo: int, hi: int) -> int:
    if hi < lo:
        return lo
    return max(lo, min(value, hi))


class Viewport:
    """
    Cursor and scroll position over a grid of a given extent.

    The cursor is an absolute grid coordinate; the offset is the grid
    coordinate shown in the top-left corner of the window.

    Attributes:
        grid_rows: Number of grid rows.
        grid_cols: Length of the longest grid row.
        view_rows: Number of visible rows.
        view_cols: Number of visible columns.
    """

    def __init__(
        self, grid_rows: int, grid_cols: int, view_rows: int = 0, view_cols: int = 0
    ):
        self.grid_rows = grid_rows
        self.grid_cols = grid_cols
        self.view_rows = 0
        self.view_cols = 0
        self.cursor = Point(0, 0)
        self.offset = Point(0, 0)
        self.resize(view_rows, view_cols)

    def resize(self, view_rows: int, view_cols: int) -> None:
        """Set the window size, then pull offset and cursor back into bounds."""
        self.view_rows = max(view_rows, 0)
        self.view_cols = max(view_cols, 0)
        self.offset = Point(
            _clamp(self.offset.row, 0, self._max_offset_row()),
            _clamp(self.offset.col, 0, self._max_offset_col()),
        )
        self.cursor = self._clamp_cursor(self.cursor)

    def visible(self, p: Point) -> bool:
        """Check whether ``p`` falls inside the window."""
        return (
            self.offset.row <= p.row < self.offset.row + self.view_rows
            and self.offset.col <= p.col < self.offset.col + self.view_cols
        )

    def move(self, d: Direction) -> None:
        """
        Move the cursor one cell in ``d``.

        The cursor moves within the window when it can. Otherwise the window
        pans one cell, as far as the grid's bounding box allows, and the
        cursor follows.
        """
        target = self.cursor.in_dir(d)
        if target is None:
            return
        if not self.visible(target):
            self._pan(d)
        self.cursor = self._clamp_cursor(target)

    def to_screen(self, p: Point) -> Point:
        """Translate a grid point inside the window to window coordinates."""
        return Point(p.row - self.offset.row, p.col - self.offset.col)

    def _pan(self, d: Direction) -> None:
        shifted = self.offset.in_dir(d)
        if shifted is None:
            return
        self.offset = Point(
            _clamp(shifted.row, 0, self._max_offset_row()),
            _clamp(shifted.col, 0, self._max_offset_col()),
        )

    def _max_offset_row(self) -> int:
        return max(0, self.grid_rows - self.view_rows)

    def _max_offset_col(self) -> int:
        return max(0, self.grid_cols - self.view_cols)

    def _clamp_cursor(self, p: Point) -> Point:
        row = _clamp(p.row, self.offset.row, self.offset.row + self.view_rows - 1)
        col = _clamp(p.col, self.offset.col, self.offset.col + self.view_cols - 1)
        return Point(
            _clamp(row, 0, self.grid_rows - 1),
            _clamp(col, 0, self.grid_cols - 1),
        )


def attach_terminal_input(tty_path: str = "/dev/tty") -> None:
    """
    Make file descriptor 0 the terminal when standard input is redirected.

    curses reads keys from descriptor 0; after a piped diagram is consumed
    that descriptor is at end of file and no key would ever arrive.
    """
    if sys.stdin is not None and sys.stdin.isatty():
        return
    try:
        fd = os.open(tty_path, os.O_RDONLY)
    except OSError as exc:
        raise OSError(f"Cannot open {tty_path} for key input: {exc}") from exc
    try:
        os.dup2(fd, 0)
    finally:
        os.close(fd)
    logger.debug("Reading keys from %s", tty_path)


def status_line(viewport: Viewport, term_rows: int, term_cols: int) -> str:
    """Format the status line shown below the diagram."""
    return (
        f"cursor {viewport.cursor!r} offset {viewport.offset!r} "
        f"term {term_rows}x{term_cols}"
    )


class Viewer:
    """
    Curses front end for browsing a parsed diagram.

    Boxes and connectors are highlighted as in batch output, and the box
    under the cursor gets its own focus color. The diagram is parsed once;
    the viewer never re-parses.
    """

    def __init__(
        self,
        result: ParseResult,
        keymap: Optional[Dict[int, Union[str, Direction]]] = None,
    ):
        self.result = result
        self.keymap = keymap if keymap is not None else DEFAULT_KEYMAP
        self.viewport = Viewport(result.grid.height, result.grid.width)
        self._attrs: Dict[CellStyle, int] = {}

    def run(self) -> None:
        """
        Take over the terminal until the user quits.

        Raises:
            OSError: If standard input is not a terminal and /dev/tty
                cannot be opened for key input.
        """
        attach_terminal_input()
        curses.wrapper(self._main)

    def _main(self, stdscr) -> None:
        curses.raw()
        stdscr.keypad(True)
        self._init_colors()
        self._resize(stdscr)

        while True:
            self._draw(stdscr)
            key = stdscr.getch()
            if key == curses.KEY_RESIZE:
                self._resize(stdscr)
                continue
            action = self.keymap.get(key)
            if action == QUIT:
                logger.debug("Quit at cursor %r", self.viewport.cursor)
                return
            if isinstance(action, Direction):
                self.viewport.move(action)

    def _init_colors(self) -> None:
        self._attrs = {style: curses.A_NORMAL for style in CellStyle}
        if not curses.has_colors():
            self._attrs[CellStyle.FOCUS] = curses.A_REVERSE
            self._attrs[CellStyle.EDGE] = curses.A_BOLD
            self._attrs[CellStyle.BOX] = curses.A_UNDERLINE
            return
        curses.start_color()
        curses.use_default_colors()
        for pair, (style, color) in enumerate(CURSES_COLORS.items(), 1):
            curses.init_pair(pair, color, -1)
            self._attrs[style] = curses.color_pair(pair)

    def _resize(self, stdscr) -> None:
        term_rows, term_cols = stdscr.getmaxyx()
        # Last terminal row holds the status line
        self.viewport.resize(term_rows - 1, term_cols)

    def _draw(self, stdscr) -> None:
        term_rows, term_cols = stdscr.getmaxyx()
        viewport = self.viewport
        grid = self.result.grid
        focus = self.result.box_at(viewport.cursor)

        stdscr.erase()
        for screen_row in range(viewport.view_rows):
            for screen_col in range(viewport.view_cols):
                p = Point(
                    viewport.offset.row + screen_row, viewport.offset.col + screen_col
                )
                glyph = grid.at(p)
                if glyph is None:
                    continue
                style = self.result.style_at(p, focus=focus)
                stdscr.addstr(screen_row, screen_col, glyph, self._attrs[style])

        if term_rows > 0 and term_cols > 1:
            stdscr.addnstr(
                term_rows - 1,
                0,
                status_line(viewport, term_rows, term_cols),
                term_cols - 1,
                curses.A_REVERSE,
            )
        if viewport.visible(viewport.cursor):
            cursor = viewport.to_screen(viewport.cursor)
            stdscr.move(cursor.row, cursor.col)
        stdscr.refresh()


def run_interactive(result: ParseResult, stream: Optional[IO[str]] = None) -> bool:
    """
    Open the interactive view when ``stream`` is a terminal.

    Returns:
        True if the view was shown, False if ``stream`` is not a terminal.
    """
    if stream is None:
        stream = sys.stdout
    if not stream.isatty():
        print("not a terminal, skipping interactive view", file=sys.stderr)
        return False
    Viewer(result).run()
    return True
