"""Reachability checks: can the player collect everything and reach the exit."""

from __future__ import annotations

from typing import Sequence

from solong.mapfile import WALL

Grid = Sequence[Sequence[str]]
Position = tuple[int, int]

_DIRECTIONS = ((0, -1), (-1, 0), (1, 0), (0, 1))


def find_position(grid: Grid, tile: str) -> Position | None:
    """Return (row, column) of the first occurrence of tile, or None."""
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == tile:
                return (y, x)
    return None


def _open(grid: Grid, y: int, x: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y]) and grid[y][x] != WALL


def reachable(grid: Grid, start: Position) -> set[Position]:
    """Return every cell reachable from start by steps that avoid walls."""
    visited = {start}
    pending = [start]
    while pending:
        y, x = pending.pop()
        for dy, dx in _DIRECTIONS:
            cell = (y + dy, x + dx)
            if cell not in visited and _open(grid, *cell):
                visited.add(cell)
                pending.append(cell)
    return visited


def is_valid_path(grid: Grid) -> bool:
    """True if the exit and every collectible can be reached from the start."""
    start = find_position(grid, "P")
    exit_position = find_position(grid, "E")
    if start is None or exit_position is None:
        return False
    visited = reachable(grid, start)
    if exit_position not in visited:
        return False
    return all(
        (y, x) in visited
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char == "C"
    )