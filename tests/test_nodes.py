import pytest

from exprtree import (
    Divide,
    DivisionByZero,
    ExprTree,
    Minus,
    Plus,
    Times,
    UnrecognizedOperator,
    Value,
    create_operator_node,
)


def test_hand_built_tree():
    root = Times(Plus(Value(1), Value(2)), Value(3))
    tree = ExprTree(root)

    assert tree.size() == 5
    assert tree.evaluate_whole_tree() == 9
    assert tree.postfix_order() == "1 2 + 3 *"


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (0, 5, 0)],
)
def test_divide_truncates_toward_zero(lhs, rhs, expected):
    assert Divide(Value(lhs), Value(rhs)).evaluate() == expected


def test_divide_by_zero():
    with pytest.raises(DivisionByZero):
        Divide(Value(1), Value(0)).evaluate()


def test_create_operator_node():
    node = create_operator_node("-", Value(5), Value(8))

    assert isinstance(node, Minus)
    assert node.evaluate() == -3
    assert node.to_string() == "-"
    assert str(node.left) == "5"


def test_create_operator_node_unknown_symbol():
    with pytest.raises(UnrecognizedOperator):
        create_operator_node("^", Value(1), Value(2))


def test_nodes_compare_structurally():
    assert Plus(Value(1), Value(2)) == Plus(Value(1), Value(2))
    assert Plus(Value(1), Value(2)) != Minus(Value(1), Value(2))


def test_operator_children_must_be_nodes():
    with pytest.raises(TypeError):
        Plus(Value(1), 2)


def test_value_must_be_int():
    with pytest.raises(TypeError):
        Value("3")
    with pytest.raises(TypeError):
        Value(True)


def test_expr_tree_root_must_be_node():
    with pytest.raises(TypeError):
        ExprTree("1+2")
