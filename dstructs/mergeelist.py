"""Merging of sorted head-and-tail linked lists, and reading them from a stream."""

from __future__ import annotations

from typing import Any, Callable, TextIO

from .extlist import ExtLinkedList
from .scanner import scan


def merge(
    la: ExtLinkedList, lb: ExtLinkedList, compare: Callable[[Any, Any], int]
) -> ExtLinkedList:
    """Merge two non-decreasing lists into a new one by moving their nodes.

    ``compare(c1, c2)`` is negative, zero or positive as ``c1`` sorts before,
    with or after ``c2``; on ties the element of ``la`` comes first. Both
    inputs are left empty.
    """
    lc = ExtLinkedList()
    ha, hb = la.head, lb.head
    pa, pb = ha.next, hb.next
    while pa is not None and pb is not None:
        if compare(pa.data, pb.data) <= 0:
            lc.insert_first(lc.tail, la.delete_first(ha))
            pa = ha.next
        else:
            lc.insert_first(lc.tail, lb.delete_first(hb))
            pb = hb.next
    lc.append(pa if pa is not None else pb)
    la.clear()
    lb.clear()
    return lc


def compare_values(c1: Any, c2: Any) -> Any:
    """Return ``c1 - c2``."""
    return c1 - c2


def create_ascending(stream: TextIO, count: int) -> ExtLinkedList:
    """Read ``count`` integers from ``stream`` into a list, in input order."""
    lst = ExtLinkedList()
    for pos in range(1, count + 1):
        values = scan(stream, "%d")
        if not values:
            raise ValueError("stream holds too few integers")
        lst.insert(pos, values[0])
    return lst