import pytest

from dstructs.expression import (
    ExpressionError,
    evaluate,
    is_operator,
    operate,
    precede,
)


def test_worked_example():
    assert evaluate("(2+3)*4*6#") == 120


def test_terminator_is_optional():
    assert evaluate("(2+3)*4*6") == evaluate("(2+3)*4*6#")


def test_precedence_matches_explicit_grouping():
    assert evaluate("7+(7+3)*(6/3+3)*4#") == evaluate("7+((7+3)*(6/3+3))*4#")


def test_single_digit():
    assert evaluate("5#") == 5


@pytest.mark.parametrize("c", list("+-*/()#"))
def test_operators_recognised(c):
    assert is_operator(c)


@pytest.mark.parametrize("c", ["3", "a", " ", ""])
def test_non_operators(c):
    assert not is_operator(c)


def test_precede_table():
    assert precede("+", "*") == "<"
    assert precede("*", "+") == ">"
    assert precede("(", ")") == "="
    assert precede("#", "#") == "="
    assert precede("#", "(") == "<"


def test_operate_division_truncates():
    assert operate(7, "/", 2) == 3
    assert operate(-6, "/", 4) == -1


def test_operate_basic():
    assert operate(4, "+", 5) == 4 + 5
    assert operate(1, "-", 7) == 1 - 7


@pytest.mark.parametrize(
    "exp", ["(2+3#", "2+3)#", "+3#", "#", "2+a#", "8/0#"]
)
def test_malformed_expressions_raise(exp):
    with pytest.raises(ExpressionError):
        evaluate(exp)


def test_precede_closing_then_opening_raises():
    with pytest.raises(ExpressionError):
        precede(")", "(")


def test_precede_unknown_operator_raises():
    with pytest.raises(ValueError):
        precede("+", "x")