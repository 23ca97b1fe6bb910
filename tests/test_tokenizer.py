import pytest

from exprtree import tokenize
from exprtree.tokens import is_number, precedence


def test_tokenize_merges_multi_digit_numbers():
    assert tokenize("12+3 * 45") == ["12", "+", "3", "*", "45"]


@pytest.mark.parametrize("source", ["", "   ", "\t\n "])
def test_tokenize_empty_or_blank_input(source):
    assert tokenize(source) == []


def test_tokenize_keeps_parentheses_as_single_tokens():
    assert tokenize("(10-2)/4") == ["(", "10", "-", "2", ")", "/", "4"]


def test_tokenize_digits_merge_across_whitespace():
    """A digit joins the previous number token even when spaces sit between them."""
    assert tokenize("1 2 + 3") == ["12", "+", "3"]


def test_tokenize_passes_unknown_symbols_through():
    assert tokenize("7 % 2") == ["7", "%", "2"]


def test_is_number_only_accepts_ascii_digits():
    assert is_number("0")
    assert is_number("120")
    assert not is_number("")
    assert not is_number("1a")
    assert not is_number("²")
    assert not is_number("+")


def test_precedence_table():
    assert precedence("(") == 0
    assert precedence("+") == precedence("-") == 1
    assert precedence("*") == precedence("/") == 2
    assert precedence("%") == 3
