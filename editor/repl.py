"""Read-eval-print loop for the editor.

Reads one command per line, executes it on a Session and writes any output.
Editor errors never end the loop: the message (and, by default, the help
text) is printed and the next line is read.  The loop ends on `X` or at end
of input.
"""
from __future__ import annotations

import sys
from typing import TextIO

from bitmap.errors import BitmapError

from .commands import help_text
from .session import Session

PROMPT = "> "


class Repl:
    def __init__(
        self,
        session:            Session | None = None,
        stdin:              TextIO | None  = None,
        stdout:             TextIO | None  = None,
        prompt:             str            = PROMPT,
        show_help_on_error: bool           = True,
        debug:              bool           = False,
    ) -> None:
        self.session            = session or Session(debug=debug)
        self.stdin              = stdin or sys.stdin
        self.stdout             = stdout or sys.stdout
        self.prompt             = prompt
        self.show_help_on_error = show_help_on_error
        self.debug              = debug
        self.n_errors           = 0

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def step(self, line: str) -> bool:
        """Execute one line.  Returns False once the session has finished."""
        try:
            output = self.session.run_line(line)
        except BitmapError as exc:
            self.n_errors += 1
            if self.debug:
                print(f"[repl] {type(exc).__name__}: {exc}", file=self.stdout)
            self._write(f"\n{exc}\n\n")
            if self.show_help_on_error:
                self._write(help_text() + "\n\n")
            return not self.session.finished
        if output is not None:
            self._write(output + "\n")
        return not self.session.finished

    def run(self) -> int:
        """Run until `X` or end of input.  Returns the number of failed commands."""
        while True:
            if self.prompt:
                self._write(self.prompt)
            line = self.stdin.readline()
            if not line:
                if self.prompt:
                    self._write("\n")
                break
            if not self.step(line):
                break
        if self.debug:
            print(f"[repl] session ended, {self.n_errors} error(s)", file=self.stdout)
        return self.n_errors
