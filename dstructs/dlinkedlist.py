"""Doubly linked circular list with a head node; positions start at 1."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator


@dataclass(eq=False)
class DNode:
    """A node linked to both neighbours."""

    data: Any
    prior: DNode | None = field(default=None, repr=False)
    next: DNode | None = field(default=None, repr=False)


class DoublyCircularList:
    """A circular doubly linked list whose head node links back to itself when empty."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = DNode(None)
        self._head.prior = self._head.next = self._head
        for item in items:
            self._link_before(self._head, item)

    def _link_before(self, p: DNode, e: Any) -> DNode:
        s = DNode(e, p.prior, p)
        p.prior.next = s
        p.prior = s
        return s

    def _nodes(self) -> Iterator[DNode]:
        node = self._head.next
        while node is not self._head:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"DoublyCircularList({list(self)!r})"

    def is_empty(self) -> bool:
        return self._head.next is self._head and self._head.prior is self._head

    def clear(self) -> None:
        self._head.prior = self._head.next = self._head

    def node_at(self, i: int) -> DNode | None:
        """Node at position ``i``, or None when there is no such position."""
        if i < 1:
            return None
        for pos, node in enumerate(self._nodes(), 1):
            if pos == i:
                return node
        return None

    def get(self, i: int) -> Any:
        """Return the element at position ``i``."""
        node = self.node_at(i)
        if node is None:
            raise IndexError(f"position {i} out of range")
        return node.data

    def locate(self, e: Any, compare: Callable[[Any, Any], bool]) -> int | None:
        """Position of the first element ``x`` with ``compare(e, x)`` true, or None."""
        return next(
            (pos for pos, item in enumerate(self, 1) if compare(e, item)),
            None,
        )

    def _find(self, e: Any) -> DNode | None:
        return next((node for node in self._nodes() if node.data == e), None)

    def prior(self, cur: Any) -> Any:
        """Element just before the first occurrence of ``cur``."""
        node = self._find(cur)
        if node is None or node.prior is self._head:
            raise ValueError(f"{cur!r} has no predecessor")
        return node.prior.data

    def next_of(self, cur: Any) -> Any:
        """Element just after the first occurrence of ``cur``."""
        node = self._find(cur)
        if node is None or node.next is self._head:
            raise ValueError(f"{cur!r} has no successor")
        return node.next.data

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` so that it ends up at position ``i`` (1 to len+1)."""
        if not 1 <= i <= len(self) + 1:
            raise IndexError(f"position {i} out of range")
        p = self.node_at(i) or self._head
        self._link_before(p, e)

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        p = self.node_at(i)
        if p is None:
            raise IndexError(f"position {i} out of range")
        p.prior.next = p.next
        p.next.prior = p.prior
        return p.data