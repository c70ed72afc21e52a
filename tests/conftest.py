"""Shared pytest fixtures for the bitmap editor test suite."""
from __future__ import annotations

import io

import pytest

from bitmap.grid import Grid, grid_from_rows
from editor.repl import Repl
from editor.session import Session


# ---------------------------------------------------------------------------
# Grid fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def blank_grid() -> Grid:
    """6 rows x 5 columns, all 'O'."""
    return Grid.create(6, 5)


@pytest.fixture
def walled_grid() -> Grid:
    """Two 'O' areas separated by an 'X' wall; the left area is 2x2."""
    return grid_from_rows([
        "OOXOO",
        "OOXOO",
        "XXXOO",
        "OOOOO",
    ])


@pytest.fixture
def checker_grid() -> Grid:
    """Same colours touching only at corners."""
    return grid_from_rows([
        "AB",
        "BA",
    ])


# ---------------------------------------------------------------------------
# Editor fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def session() -> Session:
    return Session()


@pytest.fixture
def make_repl():
    """Factory: make_repl("I 3 2\\nS\\n") → (Repl, stdout StringIO)."""
    def _make(script: str, **kwargs):
        out = io.StringIO()
        kwargs.setdefault("prompt", "")
        repl = Repl(stdin=io.StringIO(script), stdout=out, **kwargs)
        return repl, out
    return _make
