import logging

import pytest

from exprtree import MalformedExpression, to_postfix, tokenize, trace_postfix


def _postfix(source: str) -> list[str]:
    return to_postfix(tokenize(source))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1+2", ["1", "2", "+"]),
        ("3+4*2", ["3", "4", "2", "*", "+"]),
        ("8-3-2", ["8", "3", "-", "2", "-"]),
        ("16/4/2", ["16", "4", "/", "2", "/"]),
        ("(1+2)*3", ["1", "2", "+", "3", "*"]),
        ("2*(3+4)-5", ["2", "3", "4", "+", "*", "5", "-"]),
        ("((7))", ["7"]),
    ],
)
def test_to_postfix(source, expected):
    assert _postfix(source) == expected


def test_to_postfix_empty_input():
    assert to_postfix([]) == []


@pytest.mark.parametrize("source", [")", "1+2)", "(1+2", "((3)", "()", "1*()"])
def test_to_postfix_rejects_bad_parentheses(source):
    with pytest.raises(MalformedExpression):
        _postfix(source)


def test_trace_postfix_records_every_token_and_the_drain():
    steps = trace_postfix(tokenize("1+2*3"))

    assert [s.token for s in steps] == ["1", "+", "2", "*", "3", None]
    assert [s.action for s in steps] == ["emit", "operator", "emit", "operator", "emit", "drain"]
    assert steps[3].stack == ("+", "*")
    assert steps[4].output == ("1", "2", "3")
    assert steps[-1].stack == ()
    assert list(steps[-1].output) == to_postfix(tokenize("1+2*3"))


def test_trace_postfix_group_steps():
    steps = trace_postfix(tokenize("(1+2)"))

    assert steps[0].action == "push"
    assert steps[0].stack == ("(",)
    pop = steps[4]
    assert pop.action == "pop-group"
    assert pop.stack == ()
    assert pop.output == ("1", "2", "+")


def test_trace_postfix_logs_each_step_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="exprtree.postfix"):
        steps = trace_postfix(tokenize("(1+2)*3"))

    records = [r for r in caplog.records if r.name == "exprtree.postfix"]
    assert len(records) == len(steps)
    assert all(r.levelno == logging.DEBUG for r in records)
    assert records[-1].getMessage() == f"to_postfix: {steps[-1]!r}"
