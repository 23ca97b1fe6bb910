from __future__ import annotations

__all__ = [
    "DivisionByZero",
    "EmptyTree",
    "ExprTreeError",
    "MalformedExpression",
    "UnrecognizedOperator",
]


class ExprTreeError(Exception):
    """Base class for every error raised by exprtree."""


class MalformedExpression(ExprTreeError, ValueError):
    """Unbalanced parentheses, an empty group, or a missing operand/operator."""


class DivisionByZero(ExprTreeError, ZeroDivisionError):
    """The right operand of a division evaluated to zero."""


class EmptyTree(ExprTreeError, ValueError):
    """An operation that needs a root was called on an empty tree."""


class UnrecognizedOperator(ExprTreeError, ValueError):
    """A non-number token that is not one of ``+ - * /``."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unrecognized operator {symbol!r}")
        self.symbol = symbol
