"""First-in first-out queue built from linked nodes behind a head node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(eq=False)
class _QNode:
    data: Any
    next: _QNode | None = None


class LinkQueue:
    """A linked queue; ``front`` is a sentinel node and ``rear`` the last node."""

    def __init__(self) -> None:
        self._front = _QNode(None)
        self._rear = self._front

    def _nodes(self) -> Iterator[_QNode]:
        node = self._front.next
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkQueue({list(self)!r})"

    def is_empty(self) -> bool:
        return self._front is self._rear

    def clear(self) -> None:
        self._front.next = None
        self._rear = self._front

    def head(self) -> Any:
        """Return the element at the front without removing it."""
        if self.is_empty():
            raise IndexError("head of empty queue")
        return self._front.next.data

    def enqueue(self, e: Any) -> None:
        node = _QNode(e)
        self._rear.next = node
        self._rear = node

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if self.is_empty():
            raise IndexError("dequeue from empty queue")
        node = self._front.next
        self._front.next = node.next
        if self._rear is node:
            self._rear = self._front
        return node.data