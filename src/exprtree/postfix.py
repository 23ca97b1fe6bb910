"""
exprtree.postfix — infix → postfix conversion (shunting-yard).

One operator stack and one output list. An operator pops every stacked
operator of greater *or equal* precedence before it is pushed, which makes
``-`` and ``/`` left-associative. ``(`` has the lowest precedence and acts
as a barrier.

:func:`trace_postfix` runs the same loop and returns every intermediate
state as a :class:`ConversionStep`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .errors import MalformedExpression
from .tokens import LPAREN, RPAREN, is_number, precedence

logger = logging.getLogger(__name__)

__all__ = ["ConversionStep", "to_postfix", "trace_postfix"]


@dataclass(frozen=True)
class ConversionStep:
    """State of the converter right after one token was handled.

    Attributes
    ----------
    token : str | None
        The input token, or ``None`` for the final drain of the stack.
    action : str
        ``push`` for ``(``, ``pop-group`` for ``)``, ``emit`` for a number,
        ``operator`` for an operator, ``drain`` at end of input.
    stack : tuple[str, ...]
        Operator stack, bottom first.
    output : tuple[str, ...]
        Postfix output produced so far.
    """

    token: Optional[str]
    action: str
    stack: tuple[str, ...]
    output: tuple[str, ...]

    def __repr__(self) -> str:
        return f"{self.action}({self.token!r}) stack={list(self.stack)} out={list(self.output)}"


def _convert(
    tokens: Iterable[str],
    on_step: Optional[Callable[[ConversionStep], None]] = None,
) -> list[str]:
    stack: list[str] = []
    output: list[str] = []
    # output length at each open "(", to catch "()"
    group_marks: list[int] = []

    def step(token: Optional[str], action: str) -> None:
        if on_step is not None:
            on_step(ConversionStep(token, action, tuple(stack), tuple(output)))

    for token in tokens:
        if token == LPAREN:
            stack.append(token)
            group_marks.append(len(output))
            step(token, "push")
        elif token == RPAREN:
            while stack and stack[-1] != LPAREN:
                output.append(stack.pop())
            if not stack:
                raise MalformedExpression("Unbalanced ')': no matching '('")
            stack.pop()
            if len(output) == group_marks.pop():
                raise MalformedExpression("Empty parentheses '()'")
            step(token, "pop-group")
        elif is_number(token):
            output.append(token)
            step(token, "emit")
        else:
            rank = precedence(token)
            while stack and precedence(stack[-1]) >= rank:
                output.append(stack.pop())
            stack.append(token)
            step(token, "operator")

    while stack:
        top = stack.pop()
        if top == LPAREN:
            raise MalformedExpression("Unbalanced '(': missing ')'")
        output.append(top)
    step(None, "drain")
    return output


def to_postfix(tokens: Iterable[str]) -> list[str]:
    """Reorder an infix token sequence into postfix order.

    Raises :class:`MalformedExpression` for unbalanced or empty parentheses.
    """
    return _convert(tokens)


def trace_postfix(tokens: Iterable[str]) -> list[ConversionStep]:
    """Convert *tokens* and return the converter state after every token."""
    steps: list[ConversionStep] = []

    def _record(s: ConversionStep) -> None:
        logger.debug("to_postfix: %r", s)
        steps.append(s)

    _convert(tokens, _record)
    return steps
