"""Editing session: owns the single live grid and executes commands on it.

The session replaces its grid wholesale on `I` and passes it explicitly to
the drawing and fill functions for every other command.  One command runs to
completion before the next is accepted.
"""
from __future__ import annotations

from bitmap.draw import draw_horizontal_segment, draw_vertical_segment, fill_rectangle
from bitmap.errors import UninitializedGrid
from bitmap.fill import fill_area
from bitmap.grid import DEFAULT_COLOR, Grid, render_text

from .commands import ParsedCommand, help_text, parse_line


class Session:
    """Holds the current grid and dispatches parsed commands to the core."""

    def __init__(self, debug: bool = False) -> None:
        self.grid: Grid | None = None
        self.debug = debug
        self.finished = False

    def _require_grid(self, token: str) -> Grid:
        if self.grid is None:
            raise UninitializedGrid(
                f"{token}: the image hasn't been created yet; use I M N first."
            )
        return self.grid

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def run_line(self, line: str) -> str | None:
        """Parse and execute one input line.  Returns text to display, if any."""
        parsed = parse_line(line)
        if parsed is None:
            return None
        return self.execute(parsed)

    def execute(self, parsed: ParsedCommand) -> str | None:
        """Execute one parsed command.

        Returns the rendered image for `S`, the help text for `?`, and None
        for every mutating command.  Errors from the core propagate unchanged.
        """
        token, args = parsed.token, parsed.args
        if self.debug:
            print(f"[editor] {parsed.command.usage} <- {args}")

        if token == "X":
            self.finished = True
            return None
        if token == "?":
            return help_text()
        if token == "I":
            width, height = args
            # A failed create leaves the previous grid live.
            self.grid = Grid.create(height, width)
            if self.debug:
                print(f"[editor] new grid {height} rows x {width} cols")
            return None

        grid = self._require_grid(token)
        if token == "C":
            grid.clear(DEFAULT_COLOR)
        elif token == "L":
            grid.set_cell(*args)
        elif token == "V":
            draw_vertical_segment(grid, *args)
        elif token == "H":
            draw_horizontal_segment(grid, *args)
        elif token == "Q":
            fill_rectangle(grid, *args)
        elif token == "F":
            n = fill_area(grid, *args)
            if self.debug:
                print(f"[editor] filled {n} cell(s)")
        elif token == "S":
            return render_text(grid)
        else:
            raise AssertionError(f"command table and dispatcher disagree on {token!r}")
        return None
