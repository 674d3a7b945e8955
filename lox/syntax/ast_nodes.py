"""
Expression tree node definitions for Lox.

Four expression variants make up the tree. New operations over the tree
are added by implementing ExprVisitor; the node classes never change.
Nodes are immutable and hold only their children, so a tree has no
parent links and no cycles.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, TypeVar

from ..lexer.tokens import Token

R = TypeVar("R")


class ExprType(Enum):
    """Enumeration of all expression node types."""
    BINARY = "Binary"
    GROUPING = "Grouping"
    UNARY = "Unary"
    LITERAL = "Literal"


class ExprVisitor(ABC, Generic[R]):
    """Visitor interface with one operation per expression variant."""

    @abstractmethod
    def visit_binary_expr(self, expr: "Binary") -> R:
        pass

    @abstractmethod
    def visit_grouping_expr(self, expr: "Grouping") -> R:
        pass

    @abstractmethod
    def visit_unary_expr(self, expr: "Unary") -> R:
        pass

    @abstractmethod
    def visit_literal_expr(self, expr: "Literal") -> R:
        pass


class Expr(ABC):
    """Base class for all expression nodes."""

    @property
    @abstractmethod
    def node_type(self) -> ExprType:
        pass

    @abstractmethod
    def accept(self, visitor: ExprVisitor[R]) -> R:
        """Dispatch to the visitor operation for this variant."""
        pass

    @abstractmethod
    def children(self) -> List["Expr"]:
        """Get all child nodes."""
        pass


@dataclass(frozen=True)
class Binary(Expr):
    """Binary operation expression."""
    left: Expr
    operator: Token
    right: Expr

    @property
    def node_type(self) -> ExprType:
        return ExprType.BINARY

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary_expr(self)

    def children(self) -> List[Expr]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    expression: Expr

    @property
    def node_type(self) -> ExprType:
        return ExprType.GROUPING

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping_expr(self)

    def children(self) -> List[Expr]:
        return [self.expression]


@dataclass(frozen=True)
class Unary(Expr):
    """Unary operation expression."""
    operator: Token
    right: Expr

    @property
    def node_type(self) -> ExprType:
        return ExprType.UNARY

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary_expr(self)

    def children(self) -> List[Expr]:
        return [self.right]


@dataclass(frozen=True)
class Literal(Expr):
    """Literal value expression, holding the token it was scanned as."""
    value: Token

    @property
    def node_type(self) -> ExprType:
        return ExprType.LITERAL

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal_expr(self)

    def children(self) -> List[Expr]:
        return []
