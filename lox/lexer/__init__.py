"""
Lox Lexer Package

Implements the scanner for the Lox language: a character-level state
machine producing a flat token list terminated by an EOF token.

Key Features:
- One- and two-character operators with single-character lookahead
- String literals spanning lines, with line tracking
- Number literals with an optional fractional part
- Maximal-munch identifiers and a fixed keyword table
- Non-fatal diagnostics: scanning always reaches end of input
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, ScanResult, scan_source, tokenize_string, tokenize_file
from .errors import ErrorKind, Diagnostic, LexerError

__all__ = [
    "Scanner",
    "ScanResult",
    "Token",
    "TokenType",
    "KEYWORDS",
    "ErrorKind",
    "Diagnostic",
    "LexerError",
    "scan_source",
    "tokenize_string",
    "tokenize_file",
]
