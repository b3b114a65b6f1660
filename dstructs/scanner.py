"""Formatted reading of whitespace-separated values from a text stream.

Only ASCII characters take part in a conversion: any other character
met before a value is skipped, so data files may carry remarks in other
scripts between their numbers.
"""

from __future__ import annotations

import re
from typing import Callable, TextIO

_FORMAT = re.compile(r"(?:%[cdfs])*")
_DIGITS = "0123456789"
_SIGNS = "+-"
_INT_START = _DIGITS + _SIGNS
_FLOAT_START = _INT_START + "."


def _printable(ch: str) -> bool:
    return " " <= ch <= "~"


class _Reader:
    """One-character lookahead over a seekable text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def mark(self) -> int:
        return self._stream.tell()

    def reset(self, position: int) -> None:
        self._stream.seek(position)

    def peek(self) -> str:
        position = self._stream.tell()
        ch = self._stream.read(1)
        self._stream.seek(position)
        return ch

    def read(self) -> str:
        return self._stream.read(1)

    def skip_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters matching ``predicate``; return the next one, or ''."""
        while (ch := self.peek()) and predicate(ch):
            self.read()
        return ch

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        chars = []
        while (ch := self.peek()) and predicate(ch):
            chars.append(self.read())
        return "".join(chars)


def _read_sign(reader: _Reader) -> str:
    ch = reader.peek()
    return reader.read() if ch and ch in _SIGNS else ""


def _read_digits(reader: _Reader) -> str:
    return reader.read_while(lambda c: c in _DIGITS)


def _read_int(reader: _Reader) -> int | None:
    if not reader.skip_while(lambda c: c not in _INT_START):
        return None
    sign = _read_sign(reader)
    digits = _read_digits(reader)
    return int(sign + digits) if digits else None


def _read_float(reader: _Reader) -> float | None:
    if not reader.skip_while(lambda c: c not in _FLOAT_START):
        return None
    text = _read_sign(reader)
    whole = _read_digits(reader)
    fraction = ""
    if reader.peek() == ".":
        reader.read()
        fraction = _read_digits(reader)
    if not whole and not fraction:
        return None
    text += f"{whole or '0'}.{fraction or '0'}"
    if (ch := reader.peek()) and ch in "eE":
        position = reader.mark()
        reader.read()
        exp_sign = _read_sign(reader)
        exp_digits = _read_digits(reader)
        if exp_digits:
            text += "e" + exp_sign + exp_digits
        else:
            reader.reset(position)
    return float(text)


def _read_word(reader: _Reader) -> str:
    if not reader.skip_while(lambda c: not _printable(c) or c == " "):
        return ""
    return reader.read_while(lambda c: _printable(c) and c != " ")


def scan(stream: TextIO, fmt: str) -> list:
    """Read the values described by ``fmt`` (``%c``, ``%d``, ``%f``, ``%s``) from ``stream``.

    Returns the values read, in order. The list is shorter than the format
    when the stream ends or a number cannot be read; the stream is left
    positioned just after the last character consumed.
    """
    if not _FORMAT.fullmatch(fmt):
        raise ValueError(f"unsupported format: {fmt!r}")

    reader = _Reader(stream)
    values: list = []
    for conversion in fmt[1::2]:
        if not reader.skip_while(lambda c: not c.isascii()):
            break
        if conversion == "c":
            values.append(reader.read())
        elif conversion == "d":
            number = _read_int(reader)
            if number is None:
                break
            values.append(number)
        elif conversion == "f":
            real = _read_float(reader)
            if real is None:
                break
            values.append(real)
        else:
            values.append(_read_word(reader))
    return values