"""Axis-aligned drawing primitives.

Each function paints an inclusive run of cells through Grid.set_cell, so the
per-cell bounds and colour checks are the only validation performed.  There is
no atomicity across cells: if a cell part-way through is out of range, the
cells before it have already been painted when OutOfRange is raised.
"""
from __future__ import annotations

from .grid import Grid


def _ordered(a: int, b: int) -> tuple[int, int]:
    return (b, a) if a > b else (a, b)


def draw_vertical_segment(grid: Grid, x: int, y1: int, y2: int, color: str) -> None:
    """Paint column x from row y1 to row y2 (inclusive, either order)."""
    y1, y2 = _ordered(y1, y2)
    for y in range(y1, y2 + 1):
        grid.set_cell(x, y, color)


def draw_horizontal_segment(grid: Grid, x1: int, x2: int, y: int, color: str) -> None:
    """Paint row y from column x1 to column x2 (inclusive, either order)."""
    x1, x2 = _ordered(x1, x2)
    for x in range(x1, x2 + 1):
        grid.set_cell(x, y, color)


def fill_rectangle(grid: Grid, x1: int, y1: int, x2: int, y2: int, color: str) -> None:
    """Paint the inclusive rectangle with corners (x1, y1) and (x2, y2).

    Corners may be given in any order.  Rows are painted top to bottom.
    """
    x1, x2 = _ordered(x1, x2)
    y1, y2 = _ordered(y1, y2)
    for y in range(y1, y2 + 1):
        for x in range(x1, x2 + 1):
            grid.set_cell(x, y, color)
