"""
Expression trees built by the Countdown solver.

A tree is either a source number (Value) or an operator applied to two
sub-expressions (Application). Totals are computed once when a node is
built and trees are never mutated afterwards.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator

from .operators import Op, apply


@dataclass(frozen=True)
class Expr(ABC):
    """Base class for expression tree nodes; only Value and Application are built."""
    total: int

    @property
    @abstractmethod
    def operations(self) -> int:
        """Number of binary operators in the tree."""

    @abstractmethod
    def leaves(self) -> Iterator[int]:
        """Yield the source numbers used, left to right."""

    @abstractmethod
    def render(self, parent_op: Op = Op.ADD) -> str:
        """Render as infix notation inside a parent using parent_op."""

    def __str__(self) -> str:
        return self.render(Op.ADD)


@dataclass(frozen=True)
class Value(Expr):
    """A source number."""

    @property
    def operations(self) -> int:
        return 0

    def leaves(self) -> Iterator[int]:
        yield self.total

    def render(self, parent_op: Op = Op.ADD) -> str:
        return str(self.total)


@dataclass(frozen=True)
class Application(Expr):
    """An operator applied to two sub-expressions."""
    op: Op
    left: Expr
    right: Expr

    @classmethod
    def combine(cls, op: Op, left: Expr, right: Expr) -> 'Application':
        """Build a node, computing its total from the children's totals."""
        return cls(apply(op, left.total, right.total), op, left, right)

    @property
    def operations(self) -> int:
        return 1 + self.left.operations + self.right.operations

    def leaves(self) -> Iterator[int]:
        yield from self.left.leaves()
        yield from self.right.leaves()

    def render(self, parent_op: Op = Op.ADD) -> str:
        """
        Render with the fewest parentheses that keep the value intact.

        A subtree is wrapped when its parent binds tighter, and also for a
        subtraction nested in a subtraction, so that a - (b - c) is not read
        back as (a - b) - c. The right operand of a division is wrapped when
        it is itself a product or quotient.
        """
        use_parens = (parent_op.priority > self.op.priority
                      or (parent_op is self.op is Op.SUB))
        right = self.right.render(self.op)
        # a / (b * c) and a / (b / c) are not left-associative either
        if (self.op is Op.DIV and isinstance(self.right, Application)
                and self.right.op.priority == Op.DIV.priority):
            right = f"({right})"
        text = f"{self.left.render(self.op)} {self.op.symbol} {right}"
        return f"({text})" if use_parens else text
