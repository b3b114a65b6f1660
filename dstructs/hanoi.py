"""Towers of Hanoi solved recursively."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """One move: disk ``disk`` goes from peg ``source`` to peg ``target``."""

    step: int
    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Step {self.step:2d}: move disk {self.disk} from {self.source} to {self.target}"


def hanoi(n: int, x: str = "x", y: str = "y", z: str = "z") -> list[Move]:
    """Moves that carry disks 1..n from peg ``x`` to peg ``z`` using ``y`` as spare."""
    if n < 1:
        raise ValueError("at least one disk is needed")
    moves: list[Move] = []

    def solve(k: int, a: str, b: str, c: str) -> None:
        if k == 1:
            moves.append(Move(len(moves) + 1, 1, a, c))
        else:
            solve(k - 1, a, c, b)
            moves.append(Move(len(moves) + 1, k, a, c))
            solve(k - 1, b, a, c)

    solve(n, x, y, z)
    return moves