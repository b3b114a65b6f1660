"""Maze generation and exhaustive path search with a stack."""

from __future__ import annotations

import argparse
import random as _random
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Sequence

from .seqstack import SequenceStack


class Cell(IntEnum):
    """State of a maze cell; the four directions mark the way a cell was left."""

    WALL = 0
    OBSTACLE = 1
    WAY = 2
    DEAD_LOCK = 3
    EAST = 4
    SOUTH = 5
    WEST = 6
    NORTH = 7


@dataclass(frozen=True)
class Position:
    """Row ``x`` and column ``y`` of a cell."""

    x: int
    y: int


@dataclass
class _Block:
    ord: int
    seat: Position
    di: Cell


_GLYPHS = {
    Cell.WALL: "▇",
    Cell.OBSTACLE: "▓",
    Cell.EAST: "→",
    Cell.SOUTH: "↓",
    Cell.WEST: "←",
    Cell.NORTH: "↑",
    Cell.DEAD_LOCK: "★",
}


def next_pos(seat: Position, direction: Cell) -> Position:
    """Neighbour of ``seat`` in ``direction``; other cell kinds leave it unchanged."""
    if direction == Cell.EAST:
        return Position(seat.x, seat.y + 1)
    if direction == Cell.SOUTH:
        return Position(seat.x + 1, seat.y)
    if direction == Cell.WEST:
        return Position(seat.x, seat.y - 1)
    if direction == Cell.NORTH:
        return Position(seat.x - 1, seat.y)
    return seat


class Maze:
    """A rectangular grid of cells, indexed ``grid[x][y]``."""

    def __init__(self, grid: Iterable[Iterable[int]]) -> None:
        self.grid = [[Cell(c) for c in row] for row in grid]
        if not self.grid or not self.grid[0]:
            raise ValueError("maze must have at least one cell")
        if any(len(row) != len(self.grid[0]) for row in self.grid):
            raise ValueError("maze rows must have equal length")

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0])

    @classmethod
    def random(
        cls,
        size: int = 15,
        obstacle_ratio: int = 4,
        rng: _random.Random | None = None,
    ) -> Maze:
        """A walled ``size``×``size`` maze with about one obstacle in ``obstacle_ratio`` cells.

        The entrance (1, 0), the exit (size-2, size-1) and the cells next to
        them are always open.
        """
        if size < 3:
            raise ValueError("maze size must be at least 3")
        if obstacle_ratio < 1:
            raise ValueError("obstacle ratio must be positive")
        rng = rng if rng is not None else _random.Random()
        grid = []
        for i in range(size):
            row = []
            for j in range(size):
                if i in (0, size - 1) or j in (0, size - 1):
                    row.append(Cell.WALL)
                elif rng.randrange(obstacle_ratio) == 0:
                    row.append(Cell.OBSTACLE)
                else:
                    row.append(Cell.WAY)
            grid.append(row)
        for x, y in ((1, 0), (size - 2, size - 1), (1, 1), (size - 2, size - 2)):
            grid[x][y] = Cell.WAY
        return cls(grid)

    def is_outside(self, seat: Position) -> bool:
        return not (0 <= seat.x < self.rows and 0 <= seat.y < self.cols)

    def passable(self, seat: Position) -> bool:
        """Whether ``seat`` is inside the maze and an unvisited open cell."""
        return not self.is_outside(seat) and self.grid[seat.x][seat.y] == Cell.WAY

    def _set(self, seat: Position, cell: Cell) -> None:
        self.grid[seat.x][seat.y] = cell

    def render(self) -> str:
        """The maze as text, one line per row."""
        return "".join(
            "".join(_GLYPHS.get(cell, "  ") for cell in row) + "\n"
            for row in self.grid
        )

    def find_path(
        self,
        start: Position | None = None,
        end: Position | None = None,
        on_step: Callable[[Maze], None] | None = None,
    ) -> list[Position] | None:
        """Search from ``start`` to ``end``, marking cells as they are tried.

        Returns the path from start to end, or None when there is none.
        ``on_step`` is called with the maze after each change to it.
        """
        if start is None:
            start = Position(1, 0)
        if end is None:
            end = Position(self.rows - 2, self.cols - 1)
        notify = on_step or (lambda maze: None)
        stack = SequenceStack()
        cur = start
        step = 1
        while True:
            if self.passable(cur):
                self._set(cur, Cell.EAST)
                notify(self)
                stack.push(_Block(step, cur, Cell.EAST))
                if cur == end:
                    return [block.seat for block in stack]
                cur = next_pos(cur, Cell.EAST)
                step += 1
            elif not stack.is_empty():
                block = stack.pop()
                while block.di == Cell.NORTH and not stack.is_empty():
                    self._set(block.seat, Cell.DEAD_LOCK)
                    notify(self)
                    block = stack.pop()
                if block.di < Cell.NORTH:
                    block.di = Cell(block.di + 1)
                    self._set(block.seat, block.di)
                    notify(self)
                    stack.push(block)
                    cur = next_pos(block.seat, block.di)
            if stack.is_empty():
                return None


def _show(maze: Maze) -> None:
    print("\033[2J\033[H" + maze.render(), end="", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Generate random mazes and search them until the user declines another."""
    parser = argparse.ArgumentParser(description="Random maze path search.")
    parser.add_argument("--size", type=int, default=15)
    parser.add_argument("--ratio", type=int, default=4, help="one obstacle in RATIO cells")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = _random.Random(args.seed)

    again = "y"
    while again in ("y", "Y"):
        maze = Maze.random(args.size, args.ratio, rng)
        _show(maze)
        try:
            input("Press Enter...")
        except EOFError:
            return 0
        path = maze.find_path(on_step=_show)
        print("\nPath found!\n" if path is not None else "\nNo path found.\n")
        try:
            again = input("Reset? (Y/N): ").strip()[:1]
        except EOFError:
            break
    return 0


if __name__ == "__main__":
    raise SystemExit(main())