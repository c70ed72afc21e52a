#!/usr/bin/env python3
"""CLI entry point for the bitmap editor.

Usage examples
--------------
# Interactive session:
python run_editor.py

# Run a command script, no prompt, terse errors:
python run_editor.py --script examples.txt --no-prompt --no-help-on-error

Commands (coordinates start at 0):
    I M N        new M x N image     L X Y C      colour one pixel
    V X Y1 Y2 C  vertical segment    H X1 X2 Y C  horizontal segment
    Q X1 Y1 X2 Y2 C  rectangle       F X Y C      fill region
    C  clear     S  show     ?  help     X  exit
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from editor.repl import PROMPT, Repl
from editor.session import Session


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Single-letter command bitmap editor",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("--script", type=Path, metavar="FILE", default=None,
                   help="Read commands from FILE instead of stdin.")
    p.add_argument("--prompt", default=PROMPT,
                   help="Prompt shown before each command.")
    p.add_argument("--no-prompt", action="store_true",
                   help="Do not print a prompt.")
    p.add_argument("--no-help-on-error", action="store_true",
                   help="Print only the error message when a command fails.")
    p.add_argument("--debug", action="store_true",
                   help="Verbose progress logging.")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    prompt = "" if args.no_prompt else args.prompt

    def build(stdin) -> Repl:
        return Repl(
            session=Session(debug=args.debug),
            stdin=stdin,
            stdout=sys.stdout,
            prompt=prompt,
            show_help_on_error=not args.no_help_on_error,
            debug=args.debug,
        )

    if args.script is not None:
        with open(args.script) as f:
            n_errors = build(f).run()
    else:
        n_errors = build(sys.stdin).run()

    if args.debug:
        print(f"[main] {n_errors} command(s) failed", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
