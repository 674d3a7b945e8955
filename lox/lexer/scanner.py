"""
Lox Scanner - turns a complete source buffer into tokens

A single left-to-right pass with at most two characters of lookahead.
Two cursors delimit the lexeme under construction: ``start`` marks its
first character and ``current`` the next unexamined one. Lexical errors
are recorded and scanning resumes at the next character, so ``scan()``
always reaches the end of input and always emits the EOF token.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS
)
from .errors import (
    LexerError, create_unrecognized_character_error,
    create_unterminated_string_error
)

logger = logging.getLogger(__name__)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_alpha_numeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Scanner:
    """
    Lox lexical analyzer.

    Each scanner owns one source buffer and is consumed by ``scan()``;
    scanning another buffer needs a new scanner.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            filename: Name of the source for log messages
        """
        self.source = source
        self.filename = filename
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1         # Line the current lexeme starts on
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []
        self._consumed = False

    def scan(self) -> List[Token]:
        """
        Scan the whole buffer.

        Returns:
            List of tokens ending with exactly one EOF token

        Raises:
            RuntimeError: If this scanner was already used
        """
        if self._consumed:
            raise RuntimeError("scanner already consumed; create a new Scanner per buffer")
        self._consumed = True

        while not self.is_at_end():
            self.start = self.current
            self.start_line = self.line
            try:
                self._scan_token()
            except LexerError as e:
                self.errors.append(e)

        self.tokens.append(Token(TokenType.EOF, "", self.line))

        logger.debug(
            "scanned %s: %d tokens, %d errors, %d lines",
            self.filename, len(self.tokens), len(self.errors), self.line
        )
        return self.tokens

    def _scan_token(self):
        char = self.advance()

        if char in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[char])
        elif char in ONE_OR_TWO_CHAR_TOKENS:
            single, double = ONE_OR_TWO_CHAR_TOKENS[char]
            self.add_token(double if self.match("=") else single)
        elif char == "/":
            if self.match("/"):
                # Line comment runs up to, not including, the newline
                while self.peek() != "\n" and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif char in " \t\r":
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            raise create_unrecognized_character_error(char, self.line)

    def _string(self):
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.is_at_end():
            raise create_unterminated_string_error(self.line)

        self.advance()  # Closing quote

        value = self.source[self.start + 1:self.current - 1]
        self.add_token(TokenType.STRING, value)

    def _number(self):
        while _is_digit(self.peek()):
            self.advance()

        # A trailing '.' belongs to the number only if a digit follows it
        if self.peek() == "." and _is_digit(self.peek_next()):
            self.advance()
            while _is_digit(self.peek()):
                self.advance()

        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self):
        while _is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        """Consume and return the character at ``current``."""
        char = self.source[self.current]
        self.current += 1
        return char

    def match(self, expected: str) -> bool:
        """Consume the character at ``current`` only if it is ``expected``."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        """Return the character at ``current`` without consuming it."""
        if self.is_at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self) -> str:
        """Return the character after ``current`` without consuming anything."""
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def add_token(self, token_type: TokenType, literal: Any = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, self.start_line, literal))

    def has_errors(self) -> bool:
        """Check if the scanner encountered any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self):
        return [e.diagnostic for e in self.errors]


@dataclass
class ScanResult:
    """Tokens and lexical errors from scanning one buffer."""
    tokens: List[Token]
    errors: List[LexerError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0


def scan_source(source: str, filename: str = "<string>") -> ScanResult:
    """
    Scan a buffer with a fresh scanner.

    Args:
        source: Complete source text
        filename: Name of the source for log messages

    Returns:
        ScanResult holding the tokens and any lexical errors
    """
    scanner = Scanner(source, filename)
    tokens = scanner.scan()
    return ScanResult(tokens, scanner.errors)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Name of the source for log messages

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning recorded any error
    """
    result = scan_source(source, filename)

    if result.has_errors:
        # Raise the first error encountered
        raise result.errors[0]

    return result.tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning recorded any error
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
