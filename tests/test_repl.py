"""Tests for editor/repl.py and the run_editor.py entry point."""
from __future__ import annotations

import io

import run_editor


class TestRepl:
    def test_show(self, make_repl):
        repl, out = make_repl("I 3 2\nL 2 1 Z\nS\n")
        assert repl.run() == 0
        assert out.getvalue() == "OOO\nOOZ\n"

    def test_stops_at_x(self, make_repl):
        repl, out = make_repl("I 1 1\nX\nS\n")
        repl.run()
        assert out.getvalue() == ""
        assert repl.session.finished

    def test_stops_at_end_of_input(self, make_repl):
        repl, out = make_repl("I 1 1\nS")
        repl.run()
        assert out.getvalue() == "O\n"

    def test_error_then_continue(self, make_repl):
        repl, out = make_repl("S\nI 2 1\nL 9 9 A\nS\n")
        assert repl.run() == 2
        text = out.getvalue()
        assert "hasn't been created yet" in text
        assert "out of range" in text
        assert "Supported commands" in text
        assert text.endswith("OO\n")

    def test_oversized_create_does_not_end_session(self, make_repl):
        repl, out = make_repl("I 99999999999999999999 1\nI 2 1\nS\n")
        assert repl.run() == 1
        text = out.getvalue()
        assert "cannot be allocated" in text
        assert text.endswith("OO\n")

    def test_debug_lines_use_injected_stream(self, make_repl, capsys):
        repl, out = make_repl("Z\n", show_help_on_error=False, debug=True)
        repl.run()
        text = out.getvalue()
        assert "[repl] UnrecognizedCommand" in text
        assert "[repl] session ended, 1 error(s)" in text
        assert "[repl]" not in capsys.readouterr().out

    def test_terse_errors(self, make_repl):
        repl, out = make_repl("Z\n", show_help_on_error=False)
        assert repl.run() == 1
        assert out.getvalue() == "\nCommand not recognized: 'Z'.\n\n"

    def test_prompt(self, make_repl):
        repl, out = make_repl("I 1 1\nS\n", prompt="> ")
        repl.run()
        assert out.getvalue() == "> > O\n> \n"

    def test_blank_lines_ignored(self, make_repl):
        repl, out = make_repl("\n\nI 1 1\n\nS\n")
        assert repl.run() == 0
        assert out.getvalue() == "O\n"


class TestRunEditor:
    def test_script(self, tmp_path, capsys):
        script = tmp_path / "commands.txt"
        script.write_text("I 4 4\nF 1 1 C\nS\nX\n")
        assert run_editor.main(["--script", str(script), "--no-prompt"]) == 0
        assert capsys.readouterr().out == "CCCC\nCCCC\nCCCC\nCCCC\n"

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("I 2 1\nS\n"))
        assert run_editor.main(["--no-prompt", "--no-help-on-error"]) == 0
        assert capsys.readouterr().out == "OO\n"

    def test_defaults(self):
        args = run_editor.parse_args([])
        assert args.prompt == "> "
        assert args.script is None
        assert not args.debug
