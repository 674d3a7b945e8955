"""
Tests for lexical diagnostics and their report format.
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.errors import (
    ERROR_CODES, Diagnostic, ErrorKind, LexerError,
    create_unrecognized_character_error, create_unterminated_string_error,
    error, format_report, report
)


class TestDiagnostics(unittest.TestCase):

    def test_report_format(self):
        self.assertEqual(format_report(3, "", "Oops."), "[line 3] Error : Oops.")
        self.assertEqual(format_report(1, "at 'x'", "Oops."), "[line 1] Error at 'x': Oops.")

    def test_diagnostic_str(self):
        diagnostic = Diagnostic(message="Unterminated string.", line=2)
        self.assertEqual(str(diagnostic), "[line 2] Error : Unterminated string.")
        self.assertEqual(diagnostic.severity, "error")

    def test_unterminated_string_error(self):
        e = create_unterminated_string_error(5)
        self.assertIsInstance(e, Exception)
        self.assertEqual(e.kind, ErrorKind.UNTERMINATED_STRING)
        self.assertEqual(e.line, 5)
        self.assertEqual(e.diagnostic.code, "L002")
        self.assertEqual(str(e), "[line 5] Error : Unterminated string.")

    def test_unrecognized_character_error(self):
        e = create_unrecognized_character_error("@", 1)
        self.assertEqual(e.kind, ErrorKind.UNRECOGNIZED_CHARACTER)
        self.assertEqual(e.message, "Unexpected character '@'.")

    def test_unprintable_character_uses_code_point(self):
        e = create_unrecognized_character_error("\x07", 1)
        self.assertEqual(e.message, "Unexpected character U+0007.")

    def test_error_codes_cover_every_kind(self):
        for kind in ErrorKind:
            self.assertIn(kind.value, ERROR_CODES)

    def test_report_writes_to_stream(self):
        stream = io.StringIO()
        report(4, "", "Bad.", stream)
        error(7, "Worse.", stream)
        self.assertEqual(
            stream.getvalue().splitlines(),
            ["[line 4] Error : Bad.", "[line 7] Error : Worse."]
        )

    def test_lexer_error_can_be_raised(self):
        with self.assertRaises(LexerError):
            raise create_unterminated_string_error(1)


if __name__ == '__main__':
    unittest.main()
