"""A line editor: ``#`` erases one character, ``@`` erases the current line."""

from __future__ import annotations

from .seqstack import SequenceStack


def line_edit(buffer: str) -> str:
    """Apply the editing characters in ``buffer`` and return the resulting text.

    A newline commits the current line; a NUL character ends the input.
    """
    stack = SequenceStack()
    out: list[str] = []
    for ch in buffer:
        if ch == "\0":
            break
        if ch == "#":
            if not stack.is_empty():
                stack.pop()
        elif ch == "@":
            stack.clear()
        elif ch == "\n":
            stack.push(ch)
            out.extend(stack)
            stack.clear()
        else:
            stack.push(ch)
    out.extend(stack)
    return "".join(out)