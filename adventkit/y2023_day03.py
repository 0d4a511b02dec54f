"""Engine schematic: part numbers next to symbols and gear ratios."""

from __future__ import annotations

import argparse
import math
import re
import sys
from collections.abc import Sequence

DIGITS = "0123456789"
_NUMBER = re.compile(r"[0-9]+")
_NEIGHBOURS = [
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
]


def _cell(schematic: Sequence[str], x: int, y: int, cols: int) -> str | None:
    """Character at row ``x``, column ``y``, or ``None`` outside the grid."""
    if 0 <= x < len(schematic) and 0 <= y < cols and y < len(schematic[x]):
        return schematic[x][y]
    return None


def _number_start(line: str, pos: int) -> int:
    while pos > 0 and line[pos - 1] in DIGITS:
        pos -= 1
    return pos


def _number_at(line: str, start: int) -> int:
    match = _NUMBER.match(line, start)
    if match is None:
        raise ValueError(f"no number at column {start} of {line!r}")
    return int(match.group())


def part_number_sum(schematic: Sequence[str]) -> int:
    """Sum every number that touches a symbol (anything but a digit or '.')."""
    cols = len(schematic[0]) if schematic else 0
    total = 0
    for i, row in enumerate(schematic):
        for match in _NUMBER.finditer(row[:cols]):
            start, end = match.span()
            border = (
                _cell(schematic, x, y, cols)
                for x in range(i - 1, i + 2)
                for y in range(start - 1, end + 1)
            )
            if any(c is not None and c not in DIGITS and c != "." for c in border):
                total += int(match.group())
    return total


def gear_ratio_sum(schematic: Sequence[str]) -> int:
    """Sum of the products of the two numbers next to each '*' that has exactly two."""
    cols = len(schematic[0]) if schematic else 0
    total = 0
    for i, row in enumerate(schematic):
        for j, char in enumerate(row[:cols]):
            if char != "*":
                continue
            starts = {
                (x, _number_start(schematic[x], y))
                for x, y in ((i + dx, j + dy) for dx, dy in _NEIGHBOURS)
                if (c := _cell(schematic, x, y, cols)) is not None and c in DIGITS
            }
            if len(starts) == 2:
                total += math.prod(
                    _number_at(schematic[x], start) for x, start in sorted(starts)
                )
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyse an engine schematic.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            schematic = handle.read().splitlines()
    except OSError as exc:
        print(f"Could not open file {args.path}: {exc}", file=sys.stderr)
        return 1
    print(f"Sum of part numbers: {part_number_sum(schematic)}")
    print(f"Sum of gear ratios: {gear_ratio_sum(schematic)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())