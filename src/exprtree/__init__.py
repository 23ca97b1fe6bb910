__version__ = "0.1.0"

from .errors import (
    DivisionByZero,
    EmptyTree,
    ExprTreeError,
    MalformedExpression,
    UnrecognizedOperator,
)
from .layout import LayoutConfig, Position, layout_tree
from .nodes import (
    BinaryOp,
    Divide,
    Minus,
    Node,
    Plus,
    Times,
    Value,
    create_operator_node,
)
from .postfix import ConversionStep, to_postfix, trace_postfix
from .render import render_tree_text
from .snapshot import snapshot_tree
from .tokenizer import tokenize
from .tree import (
    ExprTree,
    build_tree,
    evaluate_whole_tree,
    infix_order,
    is_empty,
    parse,
    postfix_order,
    prefix_order,
    size,
)

__all__ = [
    "BinaryOp",
    "ConversionStep",
    "Divide",
    "DivisionByZero",
    "EmptyTree",
    "ExprTree",
    "ExprTreeError",
    "LayoutConfig",
    "MalformedExpression",
    "Minus",
    "Node",
    "Plus",
    "Position",
    "Times",
    "UnrecognizedOperator",
    "Value",
    "build_tree",
    "create_operator_node",
    "evaluate_whole_tree",
    "infix_order",
    "is_empty",
    "layout_tree",
    "parse",
    "postfix_order",
    "prefix_order",
    "render_tree_text",
    "size",
    "snapshot_tree",
    "to_postfix",
    "tokenize",
    "trace_postfix",
]
