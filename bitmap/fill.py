"""Flood fill over a Grid.

A region is the maximal set of cells reachable from a seed by 4-connectivity
(up/down/left/right) that share the seed's colour.  Cells touching only at a
corner are not connected.

Traversal uses an explicit stack and a boolean visited mask, so region size is
not limited by the interpreter's recursion depth and each cell is pushed at
most once.
"""
from __future__ import annotations

import numpy as np

from .grid import Grid, check_color

# (dx, dy) offsets of the four edge-sharing neighbours.
NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def region_cells(grid: Grid, x: int, y: int) -> set[tuple[int, int]]:
    """Return the (x, y) coordinates of the region containing (x, y).

    Raises OutOfRange if the seed is outside the grid.  Does not mutate.
    """
    grid.check_point(x, y)
    cells = grid.cells
    target = cells[y, x]
    height, width = cells.shape

    visited = np.zeros((height, width), dtype=bool)
    visited[y, x] = True
    stack = [(x, y)]
    region: set[tuple[int, int]] = set()
    while stack:
        cx, cy = stack.pop()
        region.add((cx, cy))
        for dx, dy in NEIGHBOURS:
            nx, ny = cx + dx, cy + dy
            if nx < 0 or nx >= width or ny < 0 or ny >= height:
                continue
            if visited[ny, nx] or cells[ny, nx] != target:
                continue
            visited[ny, nx] = True
            stack.append((nx, ny))
    return region


def fill_area(grid: Grid, x: int, y: int, color: str) -> int:
    """Recolour the region containing (x, y) to color.

    The seed's original colour is captured before any cell changes, so the
    result does not depend on traversal order.  Filling with the region's own
    colour is a no-op.  Both the seed and the colour are validated before any
    mutation.

    Returns the number of cells in the region.
    """
    grid.check_point(x, y)
    check_color(color)
    region = region_cells(grid, x, y)
    grid.paint_cells(region, color)
    return len(region)
