"""Array-backed linear list with 1-based positions, union and merging."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator


class SequenceList:
    """A linear list stored contiguously; positions run from 1 to ``len``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SequenceList({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def get(self, i: int) -> Any:
        """Return the element at position ``i``."""
        if not 1 <= i <= len(self._items):
            raise IndexError(f"position {i} out of range")
        return self._items[i - 1]

    def locate(self, e: Any, compare: Callable[[Any, Any], bool]) -> int | None:
        """Position of the first element ``x`` with ``compare(e, x)`` true, or None."""
        return next(
            (pos for pos, item in enumerate(self._items, 1) if compare(e, item)),
            None,
        )

    def prior(self, cur: Any) -> Any:
        """Element just before the first occurrence of ``cur``."""
        if self._items and self._items[0] != cur:
            for before, item in zip(self._items, self._items[1:]):
                if item == cur:
                    return before
        raise ValueError(f"{cur!r} has no predecessor")

    def next_of(self, cur: Any) -> Any:
        """Element just after the first occurrence of ``cur``."""
        if self._items and self._items[-1] != cur:
            for item, after in zip(self._items, self._items[1:]):
                if item == cur:
                    return after
        raise ValueError(f"{cur!r} has no successor")

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` so that it ends up at position ``i`` (1 to len+1)."""
        if not 1 <= i <= len(self._items) + 1:
            raise IndexError(f"position {i} out of range")
        self._items.insert(i - 1, e)

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        if not 1 <= i <= len(self._items):
            raise IndexError(f"position {i} out of range")
        return self._items.pop(i - 1)


def union(la: SequenceList, lb: SequenceList) -> None:
    """Append to ``la`` every element of ``lb`` not already in it."""
    for e in list(lb):
        if la.locate(e, operator.eq) is None:
            la.insert(len(la) + 1, e)


def merge_by_position(la: SequenceList, lb: SequenceList) -> SequenceList:
    """Merge two non-decreasing lists by positional access into a new list."""
    lc = SequenceList()
    i = j = 1
    while i <= len(la) and j <= len(lb):
        ai, bj = la.get(i), lb.get(j)
        if ai <= bj:
            lc.insert(len(lc) + 1, ai)
            i += 1
        else:
            lc.insert(len(lc) + 1, bj)
            j += 1
    while i <= len(la):
        lc.insert(len(lc) + 1, la.get(i))
        i += 1
    while j <= len(lb):
        lc.insert(len(lc) + 1, lb.get(j))
        j += 1
    return lc


def merge_by_pointer(la: SequenceList, lb: SequenceList) -> SequenceList:
    """Merge two non-decreasing lists by walking both at once into a new list."""
    merged: list = []
    sentinel = object()
    it_a, it_b = iter(la), iter(lb)
    a, b = next(it_a, sentinel), next(it_b, sentinel)
    while a is not sentinel and b is not sentinel:
        if a <= b:
            merged.append(a)
            a = next(it_a, sentinel)
        else:
            merged.append(b)
            b = next(it_b, sentinel)
    if a is not sentinel:
        merged.append(a)
        merged.extend(it_a)
    if b is not sentinel:
        merged.append(b)
        merged.extend(it_b)
    return SequenceList(merged)