import pytest

from algokit.expressions import (
    has_redundant_parentheses,
    infix_to_postfix,
    precedence,
)


@pytest.mark.parametrize(
    ("symbol", "expected"),
    [("(", 0), ("+", 1), ("-", 1), ("*", 2), ("/", 2), ("^", 3), ("a", -1)],
)
def test_precedence(symbol, expected):
    assert precedence(symbol) == expected


def test_worked_example():
    assert infix_to_postfix("a^(b*c-d/(e+f))") == "abc*def+/-^"


def test_simple_expressions():
    assert infix_to_postfix("a+b") == "ab+"
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_operands_keep_their_order():
    expression = "A*(B+C)/D-9"
    postfix = infix_to_postfix(expression)
    operands = [c for c in expression if c.isalnum()]
    assert [c for c in postfix if c.isalnum()] == operands
    assert "(" not in postfix and ")" not in postfix


def test_spaces_are_ignored():
    assert infix_to_postfix("a ^ (b * c - d / (e + f))") == "abc*def+/-^"


@pytest.mark.parametrize("expression", [")", "a+b)", "(a+b"])
def test_unbalanced(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)


@pytest.mark.parametrize(
    ("expression", "expected"),
    [("((a+b))", True), ("(a+(b)/c)", True), ("(a+b*(c-d))", False)],
)
def test_redundant_parentheses(expression, expected):
    assert has_redundant_parentheses(expression) is expected


def test_redundant_unbalanced():
    with pytest.raises(ValueError):
        has_redundant_parentheses("a+b)")