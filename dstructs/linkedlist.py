"""Singly linked list with a head node, and in-place merging of two such lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, TextIO

from .scanner import scan


@dataclass(eq=False)
class Node:
    """A list node holding one element."""

    data: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list headed by a sentinel node; positions start at 1."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = Node(None)
        tail = self._head
        for item in items:
            tail.next = Node(item)
            tail = tail.next

    def _nodes(self) -> Iterator[Node]:
        node = self._head.next
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, k: int) -> Node | None:
        """Node at position ``k`` (0 is the head node), or None past the end."""
        node: Node | None = self._head
        for _ in range(k):
            if node is None:
                break
            node = node.next
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        return self._head.next is None

    def clear(self) -> None:
        self._head.next = None

    def get(self, i: int) -> Any:
        """Return the element at position ``i``."""
        node = self._node_at(i) if i >= 1 else None
        if node is None:
            raise IndexError(f"position {i} out of range")
        return node.data

    def locate(self, e: Any, compare: Callable[[Any, Any], bool]) -> int | None:
        """Position of the first element ``x`` with ``compare(e, x)`` true, or None."""
        return next(
            (pos for pos, item in enumerate(self, 1) if compare(e, item)),
            None,
        )

    def prior(self, cur: Any) -> Any:
        """Element just before the first occurrence of ``cur``."""
        first = self._head.next
        if first is not None and first.data != cur:
            for node in self._nodes():
                if node.next is not None and node.next.data == cur:
                    return node.data
        raise ValueError(f"{cur!r} has no predecessor")

    def next_of(self, cur: Any) -> Any:
        """Element just after the first occurrence of ``cur`` that has a successor."""
        for node in self._nodes():
            if node.next is not None and node.data == cur:
                return node.next.data
        raise ValueError(f"{cur!r} has no successor")

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` so that it ends up at position ``i`` (1 to len+1)."""
        prev = self._node_at(i - 1) if i >= 1 else None
        if prev is None:
            raise IndexError(f"position {i} out of range")
        prev.next = Node(e, prev.next)

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        prev = self._node_at(i - 1) if i >= 1 else None
        if prev is None or prev.next is None:
            raise IndexError(f"position {i} out of range")
        removed = prev.next
        prev.next = removed.next
        return removed.data

    @classmethod
    def from_head_insertion(cls, stream: TextIO, n: int) -> LinkedList:
        """Read ``n`` integers, inserting each at the front (reverse order)."""
        lst = cls()
        for _ in range(n):
            lst._head.next = Node(_read_int(stream), lst._head.next)
        return lst

    @classmethod
    def from_tail_insertion(cls, stream: TextIO, n: int) -> LinkedList:
        """Read ``n`` integers, appending each at the end (input order)."""
        lst = cls()
        tail = lst._head
        for _ in range(n):
            tail.next = Node(_read_int(stream))
            tail = tail.next
        return lst


def _read_int(stream: TextIO) -> int:
    values = scan(stream, "%d")
    if not values:
        raise ValueError("stream holds too few integers")
    return values[0]


def merge(la: LinkedList, lb: LinkedList) -> LinkedList:
    """Merge non-decreasing ``lb`` into non-decreasing ``la`` by relinking nodes.

    The result reuses ``la`` and is returned; ``lb`` is left empty.
    """
    pa, pb = la._head.next, lb._head.next
    pc = la._head
    while pa is not None and pb is not None:
        if pa.data <= pb.data:
            pc.next, pc, pa = pa, pa, pa.next
        else:
            pc.next, pc, pb = pb, pb, pb.next
    pc.next = pa if pa is not None else pb
    lb._head.next = None
    return la