"""Operator-precedence evaluation of arithmetic on single-digit operands."""

from __future__ import annotations

from .seqstack import SequenceStack

OPERATORS = frozenset("+-*/()#")
_DIGITS = "0123456789"


class ExpressionError(ValueError):
    """The expression is malformed."""


def is_operator(c: str) -> bool:
    """Whether ``c`` is one of ``+ - * / ( ) #``."""
    return len(c) == 1 and c in OPERATORS


def precede(o1: str, o2: str) -> str:
    """Relation of stacked operator ``o1`` to incoming operator ``o2``: '<', '=' or '>'."""
    if o2 in ("+", "-"):
        return "<" if o1 in ("(", "#") else ">"
    if o2 in ("*", "/"):
        return ">" if o1 in ("*", "/", ")") else "<"
    if o2 == "(":
        if o1 == ")":
            raise ExpressionError("mismatched parentheses")
        return "<"
    if o2 == ")":
        if o1 == "(":
            return "="
        if o1 == "#":
            raise ExpressionError("unexpected closing parenthesis")
        return ">"
    if o2 == "#":
        if o1 == "#":
            return "="
        if o1 == "(":
            raise ExpressionError("unclosed parenthesis")
        return ">"
    raise ValueError(f"not an operator: {o2!r}")


def operate(a: int, theta: str, b: int) -> int:
    """Apply ``theta`` to ``a`` and ``b``; division truncates toward zero."""
    if theta == "+":
        return a + b
    if theta == "-":
        return a - b
    if theta == "*":
        return a * b
    if theta == "/":
        if b == 0:
            raise ExpressionError("division by zero")
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    raise ValueError(f"not an arithmetic operator: {theta!r}")


def _pop_operand(opnd: SequenceStack) -> int:
    if opnd.is_empty():
        raise ExpressionError("missing operand")
    return opnd.pop()


def evaluate(exp: str) -> int:
    """Evaluate ``exp``, terminated by ``#`` or by its end; operands are single digits."""
    optr = SequenceStack()
    optr.push("#")
    opnd = SequenceStack()
    chars = iter(exp)
    ch = next(chars, "#")
    while ch != "#" or optr.top() != "#":
        if not is_operator(ch):
            if len(ch) != 1 or ch not in _DIGITS:
                raise ExpressionError(f"unexpected character {ch!r}")
            opnd.push(int(ch))
            ch = next(chars, "#")
            continue
        order = precede(optr.top(), ch)
        if order == "<":
            optr.push(ch)
            ch = next(chars, "#")
        elif order == "=":
            optr.pop()
            ch = next(chars, "#")
        else:
            theta = optr.pop()
            b = _pop_operand(opnd)
            a = _pop_operand(opnd)
            opnd.push(operate(a, theta, b))
    if opnd.is_empty():
        raise ExpressionError("empty expression")
    return opnd.top()