"""
exprtree.tree — the expression tree and the pipeline that builds it.

Core pipeline::

    1. tokenize(expression)   — raw string → infix tokens
    2. to_postfix(tokens)     — infix → postfix (shunting-yard)
    3. build_tree(tokens)     — postfix → ExprTree via an operand stack
    4. evaluate / *_order     — recursive evaluation and rendering
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .errors import EmptyTree, MalformedExpression, UnrecognizedOperator
from .nodes import OPERATOR_NODES, Node, Value, create_operator_node
from .postfix import to_postfix
from .render import render_tree_text
from .snapshot import snapshot_tree
from .tokenizer import tokenize
from .tokens import is_number

logger = logging.getLogger(__name__)

__all__ = [
    "ExprTree",
    "build_tree",
    "evaluate_whole_tree",
    "infix_order",
    "is_empty",
    "parse",
    "postfix_order",
    "prefix_order",
    "size",
]


def _count_size(node: Optional[Node]) -> int:
    return 0 if node is None else node.count()


class ExprTree:
    """An optional root node plus its node count, cached at construction."""

    def __init__(self, root: Optional[Node] = None, *, _size: Optional[int] = None) -> None:
        if root is not None and not isinstance(root, Node):
            raise TypeError(f"ExprTree root must be a Node or None, got {type(root).__name__}")
        self._root = root
        # build_tree passes the count it already has
        self._size = _count_size(root) if _size is None else _size

    @classmethod
    def from_expression(cls, expression: str) -> "ExprTree":
        return build_tree(tokenize(expression))

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def get_root(self) -> Optional[Node]:
        return self._root

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def _require_root(self, action: str) -> Node:
        if self._root is None:
            raise EmptyTree(f"Cannot {action} an empty tree")
        return self._root

    def evaluate_whole_tree(self) -> int:
        return self._require_root("evaluate").evaluate()

    def prefix_order(self) -> str:
        return self._require_root("render").prefix()

    def infix_order(self) -> str:
        return self._require_root("render").infix()

    def postfix_order(self) -> str:
        return self._require_root("render").postfix()

    def pretty(self) -> str:
        """Indented one-node-per-line text view of the tree."""
        return render_tree_text(snapshot_tree(self))

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __repr__(self) -> str:
        if self._root is None:
            return "ExprTree()"
        return f"ExprTree({self._root.infix()!r}, size={self._size})"


def build_tree(tokens: Iterable[str]) -> ExprTree:
    """Build an :class:`ExprTree` from an infix token sequence.

    The tokens are converted to postfix first. Numbers become :class:`Value`
    leaves; each operator pops its right operand, then its left one.

    Raises :class:`UnrecognizedOperator` for a symbol outside ``+ - * /`` and
    :class:`MalformedExpression` when operands and operators do not pair up.
    """
    # (node, subtree size) pairs
    stack: list[tuple[Node, int]] = []
    for token in to_postfix(tokens):
        if is_number(token):
            stack.append((Value(int(token)), 1))
            continue
        if token not in OPERATOR_NODES:
            raise UnrecognizedOperator(token)
        if len(stack) < 2:
            raise MalformedExpression(f"Operator {token!r} is missing an operand")
        right, right_size = stack.pop()
        left, left_size = stack.pop()
        stack.append((create_operator_node(token, left, right), left_size + right_size + 1))

    if not stack:
        return ExprTree()
    if len(stack) > 1:
        raise MalformedExpression(
            f"Expression leaves {len(stack)} operands without an operator between them"
        )
    root, root_size = stack[0]
    tree = ExprTree(root, _size=root_size)
    logger.debug("build_tree: %d nodes", tree.size())
    return tree


def parse(expression: str) -> ExprTree:
    """Shorthand for ``build_tree(tokenize(expression))``."""
    return build_tree(tokenize(expression))


def evaluate_whole_tree(tree: ExprTree) -> int:
    """Integer value of the whole tree; division truncates toward zero.

    Raises :class:`EmptyTree` or :class:`DivisionByZero`.
    """
    return tree.evaluate_whole_tree()


def prefix_order(tree: ExprTree) -> str:
    return tree.prefix_order()


def infix_order(tree: ExprTree) -> str:
    return tree.infix_order()


def postfix_order(tree: ExprTree) -> str:
    return tree.postfix_order()


def size(tree: ExprTree) -> int:
    return tree.size()


def is_empty(tree: ExprTree) -> bool:
    return tree.is_empty()
