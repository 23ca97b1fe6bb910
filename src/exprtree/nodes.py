"""
exprtree.nodes — the expression tree node variants.

The set of variants is closed: :class:`Value` leaves and the four binary
operators :class:`Plus`, :class:`Minus`, :class:`Times`, :class:`Divide`.
Nodes are frozen dataclasses; every operator owns both of its children
from construction on, so a tree can never be observed half-built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .errors import DivisionByZero, UnrecognizedOperator

__all__ = [
    "BinaryOp",
    "Divide",
    "Minus",
    "Node",
    "OPERATOR_NODES",
    "Plus",
    "Times",
    "Value",
    "create_operator_node",
]


class Node:
    """Common interface for all tree nodes."""

    def evaluate(self) -> int:
        raise NotImplementedError

    def prefix(self) -> str:
        raise NotImplementedError

    def infix(self) -> str:
        raise NotImplementedError

    def postfix(self) -> str:
        raise NotImplementedError

    def count(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        total = 0
        pending: list[Node] = [self]
        while pending:
            node = pending.pop()
            total += 1
            if isinstance(node, BinaryOp):
                pending.append(node.left)
                pending.append(node.right)
        return total

    def to_string(self) -> str:
        """Label of this node alone: its numeral or its operator symbol."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class Value(Node):
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Value expects an int, got {type(self.value).__name__}")

    def evaluate(self) -> int:
        return self.value

    def prefix(self) -> str:
        return self.to_string()

    def infix(self) -> str:
        return self.to_string()

    def postfix(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BinaryOp(Node):
    left: Node
    right: Node

    symbol: ClassVar[str] = ""

    def __post_init__(self) -> None:
        for side in ("left", "right"):
            child = getattr(self, side)
            if not isinstance(child, Node):
                raise TypeError(
                    f"{type(self).__name__}.{side} must be a Node, got {type(child).__name__}"
                )

    def apply(self, lhs: int, rhs: int) -> int:
        raise NotImplementedError

    def evaluate(self) -> int:
        return self.apply(self.left.evaluate(), self.right.evaluate())

    def prefix(self) -> str:
        return f"{self.symbol} {self.left.prefix()} {self.right.prefix()}"

    def infix(self) -> str:
        return f"{self.left.infix()} {self.symbol} {self.right.infix()}"

    def postfix(self) -> str:
        return f"{self.left.postfix()} {self.right.postfix()} {self.symbol}"

    def to_string(self) -> str:
        return self.symbol


class Plus(BinaryOp):
    symbol = "+"

    def apply(self, lhs: int, rhs: int) -> int:
        return lhs + rhs


class Minus(BinaryOp):
    symbol = "-"

    def apply(self, lhs: int, rhs: int) -> int:
        return lhs - rhs


class Times(BinaryOp):
    symbol = "*"

    def apply(self, lhs: int, rhs: int) -> int:
        return lhs * rhs


class Divide(BinaryOp):
    symbol = "/"

    def apply(self, lhs: int, rhs: int) -> int:
        if rhs == 0:
            raise DivisionByZero(f"Division by zero: {lhs} / 0")
        # truncate toward zero, unlike floor division
        quotient = abs(lhs) // abs(rhs)
        return quotient if (lhs < 0) == (rhs < 0) else -quotient


OPERATOR_NODES: dict[str, type[BinaryOp]] = {
    cls.symbol: cls for cls in (Plus, Minus, Times, Divide)
}


def create_operator_node(symbol: str, left: Node, right: Node) -> BinaryOp:
    """Build the operator node for *symbol* over *left* and *right*."""
    cls = OPERATOR_NODES.get(symbol)
    if cls is None:
        raise UnrecognizedOperator(symbol)
    return cls(left, right)
