"""Polynomials in one variable as linked lists of terms in ascending exponent order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

from .extlist import ExtLinkedList, Node
from .scanner import scan


@dataclass(frozen=True)
class Term:
    """One term ``coef * x**expn``."""

    coef: float
    expn: int


def compare_exponents(c1: Term, c2: Term) -> int:
    """Return -1, 0 or 1 as the exponent of ``c1`` is below, equal to or above ``c2``'s."""
    diff = c1.expn - c2.expn
    return (diff > 0) - (diff < 0)


class Polynomial:
    """A polynomial held as a list of terms with increasing exponents."""

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        self._list = ExtLinkedList()
        self._list.head.data = Term(0.0, -1)
        for term in terms:
            self._list.insert_first(self._list.tail, Node(term))

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._list)

    def __repr__(self) -> str:
        return f"Polynomial({list(self)!r})"

    def __str__(self) -> str:
        parts = []
        for index, term in enumerate(self):
            if index == 0:
                text = f"{term.coef:g}"
            elif term.coef > 0:
                text = f" + {term.coef:g}"
            else:
                text = f" - {-term.coef:g}"
            if term.expn:
                text += "x"
                if term.expn != 1:
                    text += f"^{term.expn}"
            parts.append(text)
        return "".join(parts)

    @classmethod
    def from_stream(cls, stream: TextIO, m: int) -> Polynomial:
        """Read ``m`` (coefficient, exponent) pairs from ``stream``."""
        terms = []
        for _ in range(m):
            values = scan(stream, "%f%d")
            if len(values) != 2:
                raise ValueError("stream holds too few terms")
            terms.append(Term(values[0], values[1]))
        return cls(terms)

    def add(self, other: Polynomial) -> None:
        """Add ``other`` into this polynomial, reusing its nodes; ``other`` is emptied."""
        mine, theirs = self._list, other._list
        ha, hb = mine.head, theirs.head
        qa, qb = ha.next, hb.next
        while qa is not None and qb is not None:
            a, b = qa.data, qb.data
            order = compare_exponents(a, b)
            if order < 0:
                ha = qa
                qa = ha.next
            elif order == 0:
                total = a.coef + b.coef
                if total != 0.0:
                    qa.data = Term(total, a.expn)
                    ha = qa
                else:
                    mine.delete_first(ha)
                theirs.delete_first(hb)
                qb = hb.next
                qa = ha.next
            else:
                mine.insert_first(ha, theirs.delete_first(hb))
                qb = hb.next
                ha = ha.next
        if not theirs.is_empty():
            mine.append(qb)
        theirs.clear()