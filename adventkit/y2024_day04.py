"""Word search: count XMAS in every direction and X-shaped MAS crosses."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (1, -1), (-1, 1), (-1, -1))
_MAS = ("MAS", "SAM")


def _at(grid: Sequence[str], x: int, y: int, cols: int) -> str | None:
    """Letter at row ``x``, column ``y``, or ``None`` outside the grid."""
    if 0 <= x < len(grid) and 0 <= y < cols and y < len(grid[x]):
        return grid[x][y]
    return None


def count_word(grid: Sequence[str], word: str) -> int:
    """Occurrences of ``word`` read in any of the eight directions."""
    if not word:
        raise ValueError("word must not be empty")
    if not grid:
        return 0
    cols = len(grid[0])
    return sum(
        1
        for x, row in enumerate(grid)
        for y, letter in enumerate(row[:cols])
        if letter == word[0]
        for dx, dy in _DIRECTIONS
        if all(
            _at(grid, x + k * dx, y + k * dy, cols) == char
            for k, char in enumerate(word)
        )
    )


def _reads_mas(grid: Sequence[str], cells, cols: int) -> bool:
    letters = [_at(grid, x, y, cols) for x, y in cells]
    return None not in letters and "".join(letters) in _MAS


def count_x_mas(grid: Sequence[str]) -> int:
    """Number of 'A's whose two diagonals each read MAS in either direction."""
    if not grid:
        return 0
    cols = len(grid[0])
    return sum(
        1
        for i in range(1, len(grid) - 1)
        for j in range(1, cols - 1)
        if _at(grid, i, j, cols) == "A"
        and _reads_mas(grid, ((i - 1, j - 1), (i, j), (i + 1, j + 1)), cols)
        and _reads_mas(grid, ((i - 1, j + 1), (i, j), (i + 1, j - 1)), cols)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve the XMAS word search.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            grid = handle.read().splitlines()
    except OSError as exc:
        print(f"Could not open {args.path}: {exc}", file=sys.stderr)
        return 1
    word = "XMAS"
    print(f"The word '{word}' appears {count_word(grid, word)} times in the grid.")
    print(f"The X-MAS pattern appears {count_x_mas(grid)} times in the grid.")
    return 0


if __name__ == "__main__":
    sys.exit(main())