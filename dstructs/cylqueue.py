"""Circular array queue that keeps one slot free to tell full from empty."""

from __future__ import annotations

from typing import Any, Iterator

MAXQSIZE = 100


class CircularQueue:
    """A ring-buffer queue holding at most ``maxsize - 1`` elements."""

    def __init__(self, maxsize: int = MAXQSIZE) -> None:
        if maxsize < 2:
            raise ValueError("maxsize must be at least 2")
        self.maxsize = maxsize
        self._base: list[Any] = [None] * maxsize
        self._front = 0
        self._rear = 0

    def __len__(self) -> int:
        return (self._rear - self._front + self.maxsize) % self.maxsize

    def __iter__(self) -> Iterator[Any]:
        i = self._front
        while i != self._rear:
            yield self._base[i]
            i = (i + 1) % self.maxsize

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, maxsize={self.maxsize})"

    def is_empty(self) -> bool:
        return self._front == self._rear

    def clear(self) -> None:
        self._front = self._rear = 0

    def head(self) -> Any:
        """Return the element at the front without removing it."""
        if self.is_empty():
            raise IndexError("head of empty queue")
        return self._base[self._front]

    def enqueue(self, e: Any) -> None:
        """Add ``e`` at the rear; raises OverflowError when the queue is full."""
        if (self._rear + 1) % self.maxsize == self._front:
            raise OverflowError("queue is full")
        self._base[self._rear] = e
        self._rear = (self._rear + 1) % self.maxsize

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if self.is_empty():
            raise IndexError("dequeue from empty queue")
        e = self._base[self._front]
        self._base[self._front] = None
        self._front = (self._front + 1) % self.maxsize
        return e