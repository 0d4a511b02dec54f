"""Cube game records: which games are possible and how much power they need."""

from __future__ import annotations

import argparse
import math
import sys
from collections import Counter
from collections.abc import Iterable, Sequence, Mapping

LIMITS = {"red": 12, "green": 13, "blue": 14}
COLORS = ("red", "green", "blue")

CubeSet = Mapping[str, int]


def parse_game(line: str) -> tuple[int, list[Counter]]:
    """Parse ``Game N: 3 blue, 4 red; ...`` into its id and per-set colour counts.

    Counts of the same colour within one set are added together.
    """
    header, sep, body = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in game line: {line!r}")
    try:
        game_id = int(header[5:])
    except ValueError as exc:
        raise ValueError(f"bad game header: {header!r}") from exc
    sets: list[Counter] = []
    if not body.strip():
        return game_id, sets
    for chunk in body.split(";"):
        counts: Counter = Counter()
        for cube in chunk.split(","):
            fields = cube.split()
            if len(fields) < 2:
                raise ValueError(f"bad cube entry: {cube!r}")
            counts[fields[1]] += int(fields[0])
        sets.append(counts)
    return game_id, sets


def game_is_possible(sets: Iterable[CubeSet]) -> bool:
    """True when no set shows more cubes of a colour than the bag holds."""
    return all(
        cube_set.get(color, 0) <= limit
        for cube_set in sets
        for color, limit in LIMITS.items()
    )


def game_power(sets: Sequence[CubeSet]) -> int:
    """Product of the fewest red, green and blue cubes that make the game possible."""
    return math.prod(
        max((cube_set.get(color, 0) for cube_set in sets), default=0)
        for color in COLORS
    )


def _games(lines: Iterable[str]):
    return (parse_game(line) for line in lines if line.strip())


def sum_possible_ids(lines: Iterable[str]) -> int:
    """Sum of the ids of every possible game."""
    return sum(game_id for game_id, sets in _games(lines) if game_is_possible(sets))


def sum_powers(lines: Iterable[str]) -> int:
    """Sum of the power of every game."""
    return sum(game_power(sets) for _, sets in _games(lines))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyse cube game records.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        print(f"Error opening file {args.path!r}: {exc}", file=sys.stderr)
        return 1
    print(f"Sum of valid game IDs: {sum_possible_ids(lines)}")
    print(f"Total power of all games: {sum_powers(lines)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())