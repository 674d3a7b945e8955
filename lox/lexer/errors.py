"""
Error handling for the Lox scanner.

Lexical errors are recoverable: the scanner records each one with the
line it occurred on and keeps scanning. This module holds the diagnostic
record, the exception type the scanner uses internally to signal a bad
lexeme, and the helpers that print diagnostics in the
``[line N] Error <location>: <message>`` format.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO


class ErrorKind(Enum):
    """The two lexical error categories, valued by their error code."""
    UNRECOGNIZED_CHARACTER = "L001"
    UNTERMINATED_STRING = "L002"


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized character",
    "L002": "Unterminated string literal",
}


@dataclass
class Diagnostic:
    """A single lexical diagnostic."""
    message: str
    line: int
    location: str = ""              # Empty when no finer position is known
    severity: str = "error"
    code: Optional[str] = None

    def __str__(self) -> str:
        return format_report(self.line, self.location, self.message)


class LexerError(Exception):
    """
    Raised by the scanner when a lexeme cannot be scanned.

    The scanner catches it in its main loop and records it, so a
    LexerError never escapes ``Scanner.scan()``. ``tokenize_string``
    re-raises the first one for callers that want fail-fast behavior.
    """

    def __init__(self, kind: ErrorKind, message: str, line: int, location: str = ""):
        super().__init__(message)
        self.kind = kind
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            location=location,
            severity="error",
            code=kind.value,
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


def create_unrecognized_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        message = f"Unexpected character '{char}'."
    else:
        message = f"Unexpected character U+{ord(char):04X}."
    return LexerError(ErrorKind.UNRECOGNIZED_CHARACTER, message, line)


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal missing its closing quote."""
    return LexerError(ErrorKind.UNTERMINATED_STRING, "Unterminated string.", line)


def format_report(line: int, location: str, message: str) -> str:
    return f"[line {line}] Error {location}: {message}"


def report(line: int, location: str, message: str, stream: Optional[TextIO] = None):
    """Write a formatted diagnostic to the error channel."""
    print(format_report(line, location, message), file=stream or sys.stderr)


def error(line: int, message: str, stream: Optional[TextIO] = None):
    """Report a diagnostic that has no location beyond its line."""
    report(line, "", message, stream)
