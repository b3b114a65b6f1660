"""Conversion of a non-negative decimal integer to octal using a stack."""

from __future__ import annotations

from .seqstack import SequenceStack


def to_octal(n: int) -> str:
    """Return ``n`` written in octal with a leading ``0``."""
    if n < 0:
        raise ValueError("only non-negative numbers can be converted")
    stack = SequenceStack()
    while n:
        stack.push(n % 8)
        n //= 8
    digits = []
    while not stack.is_empty():
        digits.append(str(stack.pop()))
    return "0" + "".join(digits)