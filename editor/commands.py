"""Command vocabulary of the editor: tokenising, argument conversion, help.

A command line is a single-letter token followed by whitespace-separated
arguments, e.g. "V 1 0 4 C".  Coordinates are converted to int; colour
tokens are passed through untouched and validated by the grid itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bitmap.errors import InvalidArguments, UnrecognizedCommand


@dataclass(frozen=True)
class Command:
    token:       str
    arg_names:   tuple[str, ...]
    arg_types:   tuple[type, ...]
    description: str
    needs_grid:  bool = True

    @property
    def usage(self) -> str:
        return " ".join((self.token,) + self.arg_names)


@dataclass(frozen=True)
class ParsedCommand:
    command: Command
    args:    tuple[Any, ...]

    @property
    def token(self) -> str:
        return self.command.token


# ---------------------------------------------------------------------------
# Command table
# ---------------------------------------------------------------------------

COMMANDS: dict[str, Command] = {
    c.token: c
    for c in (
        Command("I", ("M", "N"), (int, int),
                "Create a new M x N image (M columns, N rows) with all pixels coloured O.",
                needs_grid=False),
        Command("C", (), (),
                "Clear the image, setting all pixels to O."),
        Command("L", ("X", "Y", "C"), (int, int, str),
                "Colour the pixel at (X,Y) with colour C."),
        Command("V", ("X", "Y1", "Y2", "C"), (int, int, int, str),
                "Draw a vertical segment of colour C in column X between rows Y1 and Y2."),
        Command("H", ("X1", "X2", "Y", "C"), (int, int, int, str),
                "Draw a horizontal segment of colour C in row Y between columns X1 and X2."),
        Command("Q", ("X1", "Y1", "X2", "Y2", "C"), (int, int, int, int, str),
                "Fill the rectangle with corners (X1,Y1) and (X2,Y2) with colour C."),
        Command("F", ("X", "Y", "C"), (int, int, str),
                "Fill the region containing (X,Y) with colour C."),
        Command("S", (), (),
                "Show the current image."),
        Command("?", (), (),
                "Show this help.", needs_grid=False),
        Command("X", (), (),
                "Terminate the session.", needs_grid=False),
    )
}


def help_text() -> str:
    """Return the list of supported commands, one per line."""
    width = max(len(c.usage) for c in COMMANDS.values())
    lines = ["Supported commands are (coordinates start at 0):"]
    for c in COMMANDS.values():
        lines.append(f"  {c.usage.ljust(width)}  {c.description}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _convert(command: Command, name: str, kind: type, raw: str) -> Any:
    if kind is int:
        try:
            return int(raw)
        except ValueError:
            raise InvalidArguments(
                f"{command.token}: {name} must be an integer; got {raw!r}."
            ) from None
    return raw


def parse_line(line: str) -> ParsedCommand | None:
    """Parse one input line.  Returns None for a blank line.

    Raises UnrecognizedCommand for an unknown token and InvalidArguments for
    a wrong argument count or a non-integer coordinate.
    """
    tokens = line.split()
    if not tokens:
        return None
    token, raw_args = tokens[0], tokens[1:]

    command = COMMANDS.get(token)
    if command is None:
        raise UnrecognizedCommand(f"Command not recognized: {token!r}.")
    if len(raw_args) != len(command.arg_names):
        raise InvalidArguments(
            f"{token} expects {len(command.arg_names)} argument(s) "
            f"(usage: {command.usage}); got {len(raw_args)}."
        )

    args = tuple(
        _convert(command, name, kind, raw)
        for name, kind, raw in zip(command.arg_names, command.arg_types, raw_args)
    )
    return ParsedCommand(command, args)
