"""Exception hierarchy for the bitmap editor.

Core operations (Grid, segment drawing, flood fill) raise the first three
kinds.  The remaining kinds are raised by the command layer in editor/.
"""
from __future__ import annotations


class BitmapError(Exception):
    """Base class for every error the editor reports back to the user."""


class InvalidDimensions(BitmapError, ValueError):
    pass


class InvalidColor(BitmapError, ValueError):
    pass


class OutOfRange(BitmapError, IndexError):
    pass


class UninitializedGrid(BitmapError):
    pass


class UnrecognizedCommand(BitmapError):
    pass


class InvalidArguments(BitmapError, ValueError):
    pass
