"""Antenna frequencies: the antinodes their pairs create on the map."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import combinations

EMPTY = "."

Position = tuple[int, int]


def parse_antennas(grid: Sequence[str]) -> dict[str, list[Position]]:
    """Positions ``(x, y)`` of every antenna, grouped by frequency in reading order."""
    antennas: dict[str, list[Position]] = {}
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char != EMPTY:
                antennas.setdefault(char, []).append((x, y))
    return antennas


def _collinear(a: Position, b: Position, point: Position) -> bool:
    (x1, y1), (x2, y2), (ax, ay) = a, b, point
    return (x2 - x1) * (ay - y1) - (y2 - y1) * (ax - x1) == 0


def _squared_distance(a: Position, b: Position) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def _cells(grid: Sequence[str]):
    width = len(grid[0]) if grid else 0
    return ((x, y) for y in range(len(grid)) for x in range(width))


def _pairs(grid: Sequence[str]):
    for positions in parse_antennas(grid).values():
        yield from combinations(positions, 2)


def antinodes(grid: Sequence[str]) -> set[Position]:
    """Cells in line with two same-frequency antennas, twice as far from one as the other.

    This counts points beyond either antenna and points between them alike.
    """
    found = set()
    for a, b in _pairs(grid):
        for point in _cells(grid):
            if not _collinear(a, b, point):
                continue
            d1 = _squared_distance(point, a)
            d2 = _squared_distance(point, b)
            if d1 == 4 * d2 or d2 == 4 * d1:
                found.add(point)
    return found


def resonant_antinodes(grid: Sequence[str]) -> set[Position]:
    """Every cell in line with any two antennas of the same frequency."""
    found: set[Position] = set()
    for positions in parse_antennas(grid).values():
        if len(positions) >= 2:
            found.update(positions)
    for a, b in _pairs(grid):
        found.update(point for point in _cells(grid) if _collinear(a, b, point))
    return found


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count antenna antinodes.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            grid = handle.read().splitlines()
    except OSError as exc:
        print(f"Error: could not open {args.path}: {exc}", file=sys.stderr)
        return 1
    print(f"Total unique locations containing an antinode: {len(antinodes(grid))}")
    print(
        "Total unique locations containing a resonant antinode: "
        f"{len(resonant_antinodes(grid))}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())