"""Garden plots: regions of the same plant and the price of fencing them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))

Region = tuple[str, int, int]


def regions(grid: Sequence[str]) -> list[Region]:
    """Each region as ``(plant, area, perimeter)``, in order of its first cell."""
    if not grid:
        return []
    rows, cols = len(grid), len(grid[0])

    def plant_at(x: int, y: int) -> str | None:
        if 0 <= x < rows and 0 <= y < cols and y < len(grid[x]):
            return grid[x][y]
        return None

    seen: set[tuple[int, int]] = set()
    found = []
    for i, row in enumerate(grid):
        for j, plant in enumerate(row[:cols]):
            if (i, j) in seen:
                continue
            seen.add((i, j))
            stack = [(i, j)]
            area = perimeter = 0
            while stack:
                x, y = stack.pop()
                area += 1
                for dx, dy in _STEPS:
                    nx, ny = x + dx, y + dy
                    if plant_at(nx, ny) != plant:
                        perimeter += 1
                    elif (nx, ny) not in seen:
                        seen.add((nx, ny))
                        stack.append((nx, ny))
            found.append((plant, area, perimeter))
    return found


def total_fence_cost(grid: Sequence[str]) -> int:
    """Sum over regions of area times perimeter."""
    return sum(area * perimeter for _, area, perimeter in regions(grid))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Price the garden fences.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            grid = handle.read().splitlines()
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    print(f"The total price of the fences is: {total_fence_cost(grid)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())