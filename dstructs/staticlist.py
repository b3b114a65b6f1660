"""Cursor-based linked lists living in a shared pool of cells, and set difference."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

DEFAULT_SIZE = 1000


class Space:
    """A fixed pool of cells linked by cursors; cell 0 heads the free list."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 2:
            raise ValueError("a space needs at least two cells")
        self.size = size
        self._data: list[Any] = [None] * size
        self._cur: list[int] = [i + 1 for i in range(size - 1)] + [0]

    def allocate(self) -> int:
        """Take a cell off the free list and return its index."""
        i = self._cur[0]
        if not i:
            raise MemoryError("static space exhausted")
        self._cur[0] = self._cur[i]
        return i

    def release(self, k: int) -> None:
        """Return cell ``k`` to the free list."""
        if not 1 <= k < self.size:
            raise ValueError(f"cell {k} out of range")
        self._cur[k] = self._cur[0]
        self._cur[0] = k


class StaticLinkedList:
    """A list whose nodes are cells of a :class:`Space`, headed by its own head cell."""

    def __init__(self, space: Space | None = None) -> None:
        self.space = space if space is not None else Space()
        self._head = self.space.allocate()
        self.space._cur[self._head] = 0

    def _check(self) -> None:
        if not self._head:
            raise RuntimeError("list has been destroyed")

    def _indices(self) -> Iterator[int]:
        self._check()
        cur = self.space._cur
        p = cur[self._head]
        while p:
            yield p
            p = cur[p]

    def __len__(self) -> int:
        return sum(1 for _ in self._indices())

    def __iter__(self) -> Iterator[Any]:
        data = self.space._data
        return (data[p] for p in self._indices())

    def __repr__(self) -> str:
        if not self._head:
            return "StaticLinkedList(<destroyed>)"
        return f"StaticLinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        return bool(self._head) and not self.space._cur[self._head]

    def clear(self) -> None:
        self._check()
        cur = self.space._cur
        p = cur[self._head]
        while p:
            cur[self._head] = cur[p]
            self.space.release(p)
            p = cur[self._head]

    def destroy(self) -> None:
        """Release every cell of the list, its head included."""
        self.clear()
        self.space.release(self._head)
        self._head = 0

    def get(self, i: int) -> Any:
        """Return the element at position ``i``."""
        self._check()
        if not 1 <= i <= self.space.size - 2:
            raise IndexError(f"position {i} out of range")
        cur = self.space._cur
        p = self._head
        for _ in range(i):
            p = cur[p]
            if not p:
                raise IndexError(f"position {i} out of range")
        return self.space._data[p]

    def locate(self, e: Any) -> int | None:
        """Position of the first element equal to ``e``, or None."""
        return next((pos for pos, item in enumerate(self, 1) if item == e), None)

    def prior(self, cur: Any) -> Any:
        """Element just before the first occurrence of ``cur``."""
        self._check()
        links, data = self.space._cur, self.space._data
        p = links[self._head]
        if p and data[p] != cur:
            while links[p]:
                suc = links[p]
                if data[suc] == cur:
                    return data[p]
                p = suc
        raise ValueError(f"{cur!r} has no predecessor")

    def next_of(self, cur: Any) -> Any:
        """Element just after the first occurrence of ``cur`` that has a successor."""
        links, data = self.space._cur, self.space._data
        for p in self._indices():
            if links[p] and data[p] == cur:
                return data[links[p]]
        raise ValueError(f"{cur!r} has no successor")

    def _prev_index(self, i: int) -> int:
        """Index of the cell at position ``i - 1`` (the head for i == 1)."""
        self._check()
        if i < 1:
            raise IndexError(f"position {i} out of range")
        cur = self.space._cur
        k = self._head
        for _ in range(i - 1):
            k = cur[k]
            if not k:
                raise IndexError(f"position {i} out of range")
        return k

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` so that it ends up at position ``i`` (1 to len+1)."""
        k = self._prev_index(i)
        p = self.space.allocate()
        cur = self.space._cur
        self.space._data[p] = e
        cur[p] = cur[k]
        cur[k] = p

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        k = self._prev_index(i)
        cur = self.space._cur
        q = cur[k]
        if not q:
            raise IndexError(f"position {i} out of range")
        e = self.space._data[q]
        cur[k] = cur[q]
        self.space.release(q)
        return e


def difference(
    a: Iterable[Any], b: Iterable[Any], space: Space | None = None
) -> StaticLinkedList:
    """Build the list of (A-B) ∪ (B-A) in a static space.

    Elements of ``a`` come first in input order; elements of ``b`` not
    found among them are placed right after the last surviving element
    of ``a``, each new one ahead of the previous. ``b`` is assumed to hold
    no repeated values.
    """
    s = StaticLinkedList(space)
    sp = s.space
    cur, data = sp._cur, sp._data
    head = s._head
    r = head
    for x in a:
        i = sp.allocate()
        data[i] = x
        cur[r] = i
        r = i
    cur[r] = 0

    for x in b:
        p = head
        k = cur[head]
        while k != cur[r] and data[k] != x:
            p = k
            k = cur[k]
        if k == cur[r]:
            i = sp.allocate()
            data[i] = x
            cur[i] = cur[r]
            cur[r] = i
        else:
            cur[p] = cur[k]
            sp.release(k)
            if r == k:
                r = p
    return s