"""
Token definitions for the Lox scanner.

This module defines every token type the scanner can produce:
- Single-character punctuation
- One- or two-character comparison operators
- Literals (identifiers, strings, numbers)
- Reserved keywords
- The synthetic end-of-input marker
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category, in the order the scanner recognizes them.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # breakfast, _tmp, x1
    STRING = auto()                 # "hello" (payload: str)
    NUMBER = auto()                 # 123, 45.67 (payload: float)

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    A lexical token in the Lox language.

    Pairs the token type with the exact source text it was scanned from
    and the 1-based line it starts on. String and number tokens also
    carry their parsed literal value.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    line: int
    literal: Any = None             # str for STRING, float for NUMBER

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.line}"

    def __repr__(self) -> str:
        if self.literal is not None:
            return (f"Token({self.type.name}, {self.lexeme!r}, "
                    f"{self.line}, {self.literal!r})")
        return f"Token({self.type.name}, {self.lexeme!r}, {self.line})"

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal payload."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.name,
            "lexeme": self.lexeme,
            "line": self.line,
            "literal": self.literal,
        }


# Lookup tables used by the scanner

KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

LITERAL_TYPES = frozenset({TokenType.STRING, TokenType.NUMBER})

# '/' is absent: it may open a line comment
SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# (type on its own, type when followed by '=')
ONE_OR_TWO_CHAR_TOKENS: Dict[str, Tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
}
