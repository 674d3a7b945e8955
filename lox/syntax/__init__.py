"""
Lox Syntax Package

Expression tree model and its visitor-based traversal. The tree is built
by a parser from the scanner's tokens and consumed by visitors such as
the prefix printer.
"""

from .ast_nodes import Expr, ExprType, ExprVisitor, Binary, Grouping, Unary, Literal
from .printer import AstPrinter

__all__ = [
    # Tree model
    "Expr", "ExprType", "ExprVisitor",
    "Binary", "Grouping", "Unary", "Literal",

    # Visitors
    "AstPrinter",
]
