"""Reindeer maze: the cheapest route from S to E when turning is expensive."""

from __future__ import annotations

import argparse
import heapq
import itertools
import math
import sys
from collections.abc import Sequence
from enum import IntEnum

STEP_COST = 1
TURN_COST = 1000
WALL = "#"
START = "S"
END = "E"


class Heading(IntEnum):
    EAST = 0
    SOUTH = 1
    WEST = 2
    NORTH = 3


_STEPS = {
    Heading.EAST: (0, 1),
    Heading.SOUTH: (1, 0),
    Heading.WEST: (0, -1),
    Heading.NORTH: (-1, 0),
}


def _turns(current: Heading, target: Heading) -> int:
    diff = abs(current - target)
    return min(diff, 4 - diff)


def _find_start(maze: Sequence[str]) -> tuple[int, int]:
    for row_index, row in enumerate(maze):
        column = row.find(START)
        if column != -1:
            return row_index, column
    raise ValueError("no start ('S') in the maze")


def lowest_score(maze: Sequence[str]) -> int | None:
    """Lowest score from S, facing east, to E; ``None`` when E cannot be reached.

    Each step costs 1 and each quarter turn 1000.
    """
    start_row, start_col = _find_start(maze)
    rows, cols = len(maze), len(maze[0])
    order = itertools.count()
    queue = [(0, next(order), start_row, start_col, Heading.EAST)]
    best: dict[tuple[int, int, Heading], int] = {}
    while queue:
        score, _, row, col, heading = heapq.heappop(queue)
        if maze[row][col] == END:
            return score
        if best.get((row, col, heading), math.inf) < score:
            continue
        for new_heading in Heading:
            d_row, d_col = _STEPS[new_heading]
            new_row, new_col = row + d_row, col + d_col
            if not (0 <= new_row < rows and 0 <= new_col < min(cols, len(maze[new_row]))):
                continue
            if maze[new_row][new_col] == WALL:
                continue
            new_score = score + _turns(heading, new_heading) * TURN_COST + STEP_COST
            key = (new_row, new_col, new_heading)
            if new_score < best.get(key, math.inf):
                best[key] = new_score
                heapq.heappush(
                    queue, (new_score, next(order), new_row, new_col, new_heading)
                )
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the cheapest maze route.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            maze = handle.read().splitlines()
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    score = lowest_score(maze)
    print(f"Lowest possible score: {-1 if score is None else score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())