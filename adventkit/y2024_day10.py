"""Hiking trails on a topographic map: trailhead scores and ratings."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence
from functools import cache

DIGITS = "0123456789"
_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
TRAILHEAD = 0
SUMMIT = 9

Grid = Sequence[Sequence[int]]
Position = tuple[int, int]


def parse_topography(text: str) -> list[list[int]]:
    """Heights per row; non-digit characters are ignored and empty rows dropped."""
    rows = ([int(char) for char in line if char in DIGITS] for line in text.splitlines())
    return [row for row in rows if row]


def _height(grid: Grid, x: int, y: int) -> int | None:
    if 0 <= x < len(grid) and 0 <= y < len(grid[x]):
        return grid[x][y]
    return None


def _uphill(grid: Grid, x: int, y: int):
    here = grid[x][y]
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if _height(grid, nx, ny) == here + 1:
            yield nx, ny


def trailhead_score(grid: Grid, start: Position) -> int:
    """Number of distinct height-9 cells reachable by climbing one step at a time."""
    seen = {start}
    queue = deque([start])
    summits = 0
    while queue:
        x, y = queue.popleft()
        if grid[x][y] == SUMMIT:
            summits += 1
        for step in _uphill(grid, x, y):
            if step not in seen:
                seen.add(step)
                queue.append(step)
    return summits


def trailhead_rating(grid: Grid, start: Position) -> int:
    """Number of distinct climbing paths from ``start`` to a height-9 cell."""

    @cache
    def paths(x: int, y: int) -> int:
        if grid[x][y] == SUMMIT:
            return 1
        return sum(paths(nx, ny) for nx, ny in _uphill(grid, x, y))

    return paths(*start)


def _trailheads(grid: Grid):
    return (
        (x, y)
        for x, row in enumerate(grid)
        for y, height in enumerate(row)
        if height == TRAILHEAD
    )


def total_score(grid: Grid) -> int:
    """Sum of the scores of every trailhead."""
    return sum(trailhead_score(grid, start) for start in _trailheads(grid))


def total_rating(grid: Grid) -> int:
    """Sum of the ratings of every trailhead."""
    return sum(trailhead_rating(grid, start) for start in _trailheads(grid))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score trailheads on a map.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            grid = parse_topography(handle.read())
    except OSError as exc:
        print(f"Error opening file: {args.path}: {exc}", file=sys.stderr)
        grid = []
    if not grid:
        print("Failed to read map.")
        return 1
    print(f"Sum of all trailhead scores: {total_score(grid)}")
    print(f"Sum of all trailhead ratings: {total_rating(grid)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())