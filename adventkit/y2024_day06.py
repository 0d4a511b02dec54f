"""Guard patrol: cells the guard walks over and obstructions that trap it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

OBSTACLE = "#"
GUARD = "^"
_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))

Position = tuple[int, int]


def find_guard(grid: Sequence[str]) -> Position:
    """Row and column of the guard, who starts facing up."""
    for row_index, row in enumerate(grid):
        column = row.find(GUARD)
        if column != -1:
            return row_index, column
    raise ValueError("no guard ('^') on the map")


def _walk(
    grid: Sequence[str], start: Position, obstacle: Position | None = None
) -> tuple[set[Position], bool]:
    """Follow the guard; return the cells visited and whether the guard never leaves."""
    rows, cols = len(grid), len(grid[0])

    def blocked(row: int, col: int) -> bool:
        return (row, col) == obstacle or (
            col < len(grid[row]) and grid[row][col] == OBSTACLE
        )

    row, col = start
    direction = 0
    states = {(row, col, direction)}
    visited = {start}
    while True:
        for _ in range(4):
            d_row, d_col = _DIRECTIONS[direction]
            next_row, next_col = row + d_row, col + d_col
            if not (0 <= next_row < rows and 0 <= next_col < cols):
                return visited, False
            if not blocked(next_row, next_col):
                break
            direction = (direction + 1) % 4
        else:
            # Boxed in on all four sides: the guard turns forever.
            return visited, True
        row, col = next_row, next_col
        state = (row, col, direction)
        if state in states:
            return visited, True
        states.add(state)
        visited.add((row, col))


def visited_positions(grid: Sequence[str]) -> set[Position]:
    """Every cell the guard stands on before walking off the map."""
    visited, looped = _walk(grid, find_guard(grid))
    if looped:
        raise ValueError("the guard never leaves the map")
    return visited


def creates_loop(grid: Sequence[str], obstacle: Position, start: Position) -> bool:
    """True when an extra obstacle at ``obstacle`` keeps the guard from leaving."""
    return _walk(grid, start, obstacle)[1]


def _loop_obstructions(grid: Sequence[str]) -> Iterator[Position]:
    start = find_guard(grid)
    cols = len(grid[0])
    for row_index, row in enumerate(grid):
        for col_index, cell in enumerate(row[:cols]):
            position = (row_index, col_index)
            if cell == "." and position != start and creates_loop(grid, position, start):
                yield position


def count_loop_obstructions(grid: Sequence[str]) -> int:
    """Number of empty cells where one new obstacle traps the guard in a loop."""
    return sum(1 for _ in _loop_obstructions(grid))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Trace the guard's patrol.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            grid = handle.read().splitlines()
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    if not grid:
        print("No map was given.")
        return 0
    try:
        visited = visited_positions(grid)
    except ValueError as exc:
        print(f"Cannot trace the patrol: {exc}")
        return 0
    print(f"The guard visited {len(visited)} distinct positions.")
    positions = list(_loop_obstructions(grid))
    for row, col in positions:
        print(f"Found position at: ({row}, {col})")
    print(f"Total valid positions: {len(positions)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())