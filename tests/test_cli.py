"""
Tests for the lox command-line driver.
"""

import io
import json
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.cli import EX_DATAERR, EX_NOINPUT, EX_OK, EX_USAGE, main, run, run_prompt


class TestRun:
    """Scanning a single buffer."""

    def test_prints_one_token_per_line(self):
        out, err = io.StringIO(), io.StringIO()
        result = run("1 + 2", out=out, err=err)
        assert not result.has_errors
        assert out.getvalue().splitlines() == [
            "NUMBER 1 1",
            "PLUS + 1",
            "NUMBER 2 1",
            "EOF  1",
        ]
        assert err.getvalue() == ""

    def test_reports_diagnostics(self):
        out, err = io.StringIO(), io.StringIO()
        result = run('"abc', out=out, err=err)
        assert result.has_errors
        assert err.getvalue() == "[line 1] Error : Unterminated string.\n"
        assert out.getvalue() == "EOF  1\n"

    def test_json_output(self):
        out = io.StringIO()
        run('"hi"', as_json=True, out=out, err=io.StringIO())
        lines = [json.loads(line) for line in out.getvalue().splitlines()]
        assert lines[0] == {"type": "STRING", "lexeme": '"hi"', "line": 1, "literal": "hi"}
        assert lines[1]["type"] == "EOF"


class TestRunFile:
    """File mode scans the whole file as one buffer."""

    def test_clean_file(self, tmp_path, capsys):
        script = tmp_path / "hello.lox"
        script.write_text('print "hello";\n', encoding="utf-8")

        assert main([str(script)]) == EX_OK

        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "PRINT print 1",
            'STRING "hello" 1',
            "SEMICOLON ; 1",
            "EOF  2",
        ]
        assert captured.err == ""

    def test_multiline_string_in_file(self, tmp_path, capsys):
        script = tmp_path / "multi.lox"
        script.write_text('"one\ntwo"', encoding="utf-8")

        assert main([str(script)]) == EX_OK
        assert capsys.readouterr().out.splitlines()[-1] == "EOF  2"

    def test_lexical_errors_fail_the_run(self, tmp_path, capsys):
        script = tmp_path / "bad.lox"
        script.write_text("var x = 1;\nx @ 2;\n", encoding="utf-8")

        assert main([str(script)]) == EX_DATAERR
        assert "[line 2] Error : Unexpected character '@'." in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.lox")]) == EX_NOINPUT
        assert "Unable to read file" in capsys.readouterr().err

    def test_too_many_arguments(self, capsys):
        assert main(["a.lox", "b.lox"]) == EX_USAGE
        assert "Usage: lox [script]" in capsys.readouterr().err


class TestRunPrompt:
    """Prompt mode scans every line independently."""

    def test_each_line_starts_at_line_one(self, capsys):
        assert run_prompt(io.StringIO("1\n2\n")) == EX_OK
        assert capsys.readouterr().out.splitlines() == [
            "NUMBER 1 1",
            "EOF  1",
            "NUMBER 2 1",
            "EOF  1",
        ]

    def test_string_cannot_span_input_lines(self, capsys):
        run_prompt(io.StringIO('"a\nb"\n'))
        captured = capsys.readouterr()
        assert captured.err.splitlines() == [
            "[line 1] Error : Unterminated string.",
            "[line 1] Error : Unterminated string.",
        ]
        assert "IDENTIFIER b 1" in captured.out.splitlines()

    def test_errors_do_not_stop_the_prompt(self, capsys):
        run_prompt(io.StringIO("@\nnil\n"))
        captured = capsys.readouterr()
        assert "NIL nil 1" in captured.out
        assert captured.err.count("Error") == 1

    def test_main_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("true\n"))
        assert main([]) == EX_OK
        assert capsys.readouterr().out.splitlines() == ["TRUE true 1", "EOF  1"]

    def test_main_json_prompt(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("3\n"))
        assert main(["--json"]) == EX_OK
        first = json.loads(capsys.readouterr().out.splitlines()[0])
        assert first == {"type": "NUMBER", "lexeme": "3", "line": 1, "literal": 3.0}
