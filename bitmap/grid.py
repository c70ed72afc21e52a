"""Core grid model for the bitmap editor.

A Grid is a fixed-size rectangle of cells, each holding one colour.  A colour
is exactly one upper-case ASCII letter ('A'..'Z'); there is no empty cell.

Coordinates are zero-indexed and half-open: column x in [0, width), row y in
[0, height).  Cells are stored in a 2-D numpy array indexed [row, column].
"""
from __future__ import annotations

from typing import Iterator

import numpy as np

from .errors import InvalidColor, InvalidDimensions, OutOfRange

# Colour used by `I` (create) and `C` (clear) when none is given.
DEFAULT_COLOR = "O"

# Every cell is a single unicode character.
CELL_DTYPE = "<U1"


def is_valid_color(color: object) -> bool:
    """Return True if color is exactly one upper-case letter A-Z.

    No normalisation is applied: 'a', ' A', 'AB' and '' are all invalid.
    """
    return isinstance(color, str) and len(color) == 1 and "A" <= color <= "Z"


def check_color(color: object) -> None:
    if not is_valid_color(color):
        raise InvalidColor(f"Color not recognized: {color!r} (expected one letter A-Z).")


class Grid:
    """Rectangular array of coloured cells, mutated in place."""

    def __init__(self, cells: np.ndarray) -> None:
        # Use Grid.create() or grid_from_rows(); this does no validation.
        self._cells = cells

    @classmethod
    def create(cls, height: int, width: int, initial_color: str = DEFAULT_COLOR) -> "Grid":
        """Return a new height x width grid with every cell set to initial_color."""
        check_color(initial_color)
        if height <= 0 or width <= 0:
            raise InvalidDimensions(
                f"Grid dimensions must be positive; got height={height}, width={width}."
            )
        try:
            cells = np.full((height, width), initial_color, dtype=CELL_DTYPE)
        except (ValueError, OverflowError, MemoryError) as exc:
            raise InvalidDimensions(
                f"Grid of {height} x {width} cells cannot be allocated."
            ) from exc
        return cls(cells)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying [row, column] array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def check_point(self, x: int, y: int) -> None:
        """Raise OutOfRange unless (x, y) addresses a cell of this grid."""
        if not 0 <= x < self.width:
            raise OutOfRange(f"X value {x} is out of range [0, {self.width}).")
        if not 0 <= y < self.height:
            raise OutOfRange(f"Y value {y} is out of range [0, {self.height}).")

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def clear(self, color: str = DEFAULT_COLOR) -> None:
        """Set every cell to color.  Dimensions are unchanged."""
        check_color(color)
        self._cells[:, :] = color

    def set_cell(self, x: int, y: int, color: str) -> None:
        """Set the cell at column x, row y to color."""
        self.check_point(x, y)
        check_color(color)
        self._cells[y, x] = color

    def paint_cells(self, points, color: str) -> None:
        """Set every (x, y) in points to color without re-validating."""
        xs, ys = zip(*points)
        self._cells[list(ys), list(xs)] = color

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_cell(self, x: int, y: int) -> str:
        self.check_point(x, y)
        return str(self._cells[y, x])

    def render(self) -> Iterator[list[str]]:
        """Yield rows top to bottom, each a list of colours left to right."""
        for row in self._cells:
            yield [str(c) for c in row]

    def copy(self) -> "Grid":
        return Grid(self._cells.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return grids_equal(self, other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"


def grids_equal(a: Grid, b: Grid) -> bool:
    """Return True if two grids are identical in shape and colours."""
    return a.cells.shape == b.cells.shape and np.array_equal(a.cells, b.cells)


def grid_from_rows(rows: list[str] | list[list[str]]) -> Grid:
    """Build a Grid from rows given as strings ("OOC") or lists of colours.

    Every row must have the same length and every colour must be valid.
    """
    if not rows or not rows[0]:
        raise InvalidDimensions("A grid needs at least one row and one column.")
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise InvalidDimensions(
                f"Ragged rows: expected width {width}, got a row of {len(row)}."
            )
        for color in row:
            check_color(color)
    return Grid(np.array([list(row) for row in rows], dtype=CELL_DTYPE))


def render_text(grid: Grid) -> str:
    """Return the rendered grid as newline-separated rows."""
    return "\n".join("".join(row) for row in grid.render())
