"""
Example: build an expression tree and walk the shunting-yard conversion.

Usage:
    python examples/expression_tree.py
    python examples/expression_tree.py "2 * (3 + 4) - 5"
"""

import sys

import exprtree as et


def main(expression: str) -> None:
    tokens = et.tokenize(expression)
    for step in et.trace_postfix(tokens):
        print(step)

    tree = et.build_tree(tokens)
    print()
    print(tree.pretty())
    print()
    print("value:  ", et.evaluate_whole_tree(tree))
    print("prefix: ", et.prefix_order(tree))
    print("infix:  ", et.infix_order(tree))
    print("postfix:", et.postfix_order(tree))
    print("size:   ", et.size(tree))

    for node_id, pos in sorted(et.layout_tree(tree).items()):
        print(f"  node {node_id}: ({pos.x:+.2f}, {pos.y:+.2f})")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "(1 + 2) * 3")
