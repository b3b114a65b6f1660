"""Singly linked list with head and tail pointers and a stored length.

Nodes are handed to and returned from the list directly, so callers can
splice at any node they hold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator


@dataclass(eq=False)
class Node:
    """A list node holding one element."""

    data: Any
    next: Node | None = None


class ExtLinkedList:
    """A linked list headed by a sentinel node, keeping its tail and length.

    ``head`` is the sentinel node; ``tail`` is the last node (the head when
    the list is empty).
    """

    def __init__(self) -> None:
        self.head = Node(None)
        self.tail = self.head
        self._len = 0

    def _nodes(self) -> Iterator[Node]:
        node = self.head.next
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"ExtLinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        return self._len == 0

    def clear(self) -> None:
        self.head.next = None
        self.tail = self.head
        self._len = 0

    def insert_first(self, h: Node, s: Node) -> None:
        """Treat node ``h`` as a head and link ``s`` right after it."""
        s.next = h.next
        h.next = s
        if h is self.tail:
            self.tail = s
        self._len += 1

    def delete_first(self, h: Node) -> Node:
        """Treat node ``h`` as a head, unlink the node after it and return it."""
        q = h.next
        if q is None:
            raise ValueError("node has no successor to delete")
        h.next = q.next
        if h.next is None:
            self.tail = h
        q.next = None
        self._len -= 1
        return q

    def append(self, s: Node | None) -> None:
        """Link the chain of nodes starting at ``s`` after the last node."""
        self.tail.next = s
        while s is not None:
            self.tail = s
            s = s.next
            self._len += 1

    def remove(self) -> Node:
        """Unlink the last node and return it."""
        if not self._len:
            raise IndexError("remove from empty list")
        q = self.tail
        self.tail = self.prior_pos(q) or self.head
        self.tail.next = None
        self._len -= 1
        return q

    def insert_before(self, p: Node, s: Node) -> Node:
        """Link ``s`` just before node ``p`` and return ``s``."""
        q = self.prior_pos(p) or self.head
        s.next = p
        q.next = s
        self._len += 1
        return s

    def insert_after(self, p: Node, s: Node) -> Node:
        """Link ``s`` just after node ``p`` and return ``s``."""
        if p is self.tail:
            self.tail = s
        s.next = p.next
        p.next = s
        self._len += 1
        return s

    def prior_pos(self, p: Node) -> Node | None:
        """Node before ``p``; None when ``p`` is the first node."""
        q = self.head.next
        if q is p:
            return None
        while q is not None and q.next is not p:
            q = q.next
        if q is None:
            raise ValueError("node is not in the list")
        return q

    def locate_pos(self, i: int) -> Node:
        """Node at position ``i``; position 0 is the head node."""
        if not 0 <= i <= self._len:
            raise IndexError(f"position {i} out of range")
        node = self.head
        for _ in range(i):
            node = node.next
        return node

    def locate_elem(self, e: Any, compare: Callable[[Any, Any], bool]) -> Node | None:
        """First node whose data ``x`` has ``compare(e, x)`` true, or None."""
        return next((n for n in self._nodes() if compare(e, n.data)), None)

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` so that it ends up at position ``i`` (1 to len+1)."""
        self.insert_first(self.locate_pos(i - 1), Node(e))

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        if not 1 <= i <= self._len:
            raise IndexError(f"position {i} out of range")
        return self.delete_first(self.locate_pos(i - 1)).data