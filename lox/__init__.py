"""
Lox Front End Package

Scanner, token model and expression tree for the Lox scripting language,
the first stages of a tree-walking interpreter.

Architecture:
    lox/
    ├── lexer/           # Tokens, lexical diagnostics, the scanner
    ├── syntax/          # Expression tree, visitor contract, printer
    └── cli.py           # Script / prompt driver

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, LexerError
from .syntax import Expr, ExprVisitor, AstPrinter

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "LexerError",
    "Expr",
    "ExprVisitor",
    "AstPrinter",

    # Version info
    "__version__",
    "__license__",
]
