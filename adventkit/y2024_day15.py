"""Warehouse robot: push boxes around and sum their GPS coordinates."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

WALL = "#"
BOX = "O"
ROBOT = "@"
EMPTY = "."
_MOVES = {"^": (0, -1), "v": (0, 1), "<": (-1, 0), ">": (1, 0)}


def parse_warehouse(text: str) -> tuple[list[str], str]:
    """Split the map (up to the first blank line) from the joined move lines."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        return lines, ""
    return lines[:blank], "".join(lines[blank + 1:])


def _find_robot(grid: Sequence[Sequence[str]]) -> tuple[int, int]:
    for row_index, row in enumerate(grid):
        for col_index, cell in enumerate(row):
            if cell == ROBOT:
                return row_index, col_index
    raise ValueError("no robot ('@') in the warehouse")


def _cell(grid: list[list[str]], row: int, col: int) -> str:
    """Cell content; anything outside the map acts as a wall."""
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return WALL


def _push(grid: list[list[str]], row: int, col: int, dx: int, dy: int) -> bool:
    """Shift the line of boxes starting at ``(row, col)`` one step, if there is room."""
    while (cell := _cell(grid, row, col)) == BOX:
        row, col = row + dy, col + dx
    if cell == WALL:
        return False
    grid[row][col] = BOX
    return True


def run_moves(warehouse: Sequence[str], moves: str) -> list[str]:
    """The warehouse after the robot has tried every move; the input is not changed."""
    grid = [list(row) for row in warehouse]
    row, col = _find_robot(grid)
    for command in moves:
        try:
            dx, dy = _MOVES[command]
        except KeyError:
            raise ValueError(f"unknown move: {command!r}") from None
        next_row, next_col = row + dy, col + dx
        target = _cell(grid, next_row, next_col)
        if target == WALL:
            continue
        if target == BOX and not _push(grid, next_row, next_col, dx, dy):
            continue
        grid[next_row][next_col] = ROBOT
        grid[row][col] = EMPTY
        row, col = next_row, next_col
    return ["".join(cells) for cells in grid]


def box_gps_sum(warehouse: Sequence[str]) -> int:
    """Sum of ``100 * row + column`` over the boxes inside the outer wall."""
    if not warehouse:
        return 0
    max_x = len(warehouse[0])
    return sum(
        100 * i + j
        for i in range(1, len(warehouse) - 1)
        for j in range(1, min(max_x - 1, len(warehouse[i])))
        if warehouse[i][j] == BOX
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Move boxes around the warehouse.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            warehouse, moves = parse_warehouse(handle.read())
    except OSError as exc:
        print(f"Failed to open file: {args.path}: {exc}", file=sys.stderr)
        return 1
    print(f"Result:{box_gps_sum(run_moves(warehouse, moves))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())