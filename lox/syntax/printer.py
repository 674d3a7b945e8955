"""
Prefix-notation printer for expression trees.

Renders every composite node fully parenthesized with its operator (or
``group``) first, e.g. ``-123 * (45.67)`` prints as
``(* (- 123) (group 45.67))``. Literals print as their source lexeme.
"""

from .ast_nodes import Binary, Expr, ExprVisitor, Grouping, Literal, Unary


class AstPrinter(ExprVisitor[str]):
    """Visitor rendering an expression tree as a Lisp-like string."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary_expr(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_unary_expr(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def visit_literal_expr(self, expr: Literal) -> str:
        return expr.value.lexeme

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name]
        for expr in exprs:
            parts.append(expr.accept(self))
        return "(" + " ".join(parts) + ")"
