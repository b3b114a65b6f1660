"""A last-in first-out stack backed by a growable array."""

from __future__ import annotations

from typing import Any, Iterator


class SequenceStack:
    """A stack stored contiguously; iteration runs from bottom to top."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SequenceStack({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def push(self, e: Any) -> None:
        self._items.append(e)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()