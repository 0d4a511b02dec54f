"""Restroom robots: move them around a wrapping grid and rate the safety factor."""

from __future__ import annotations

import argparse
import math
import re
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

WIDTH = 101
HEIGHT = 103
SECONDS = 100

_ROBOT = re.compile(
    r"p=\s*([-+]?[0-9]+),\s*([-+]?[0-9]+)\s*v=\s*([-+]?[0-9]+),\s*([-+]?[0-9]+)"
)


@dataclass
class Robot:
    """A robot's position and its velocity per second."""

    x: int
    y: int
    vx: int
    vy: int

    def move(self, width: int, height: int) -> None:
        """Advance one second, wrapping around the grid edges."""
        self.x = (self.x + self.vx) % width
        self.y = (self.y + self.vy) % height


def parse_robot(line: str) -> Robot:
    """Parse a ``p=X,Y v=VX,VY`` line."""
    match = _ROBOT.search(line)
    if match is None:
        raise ValueError(f"bad robot line: {line!r}")
    return Robot(*(int(group) for group in match.groups()))


def simulate(robots: Iterable[Robot], seconds: int, width: int, height: int) -> None:
    """Move every robot for ``seconds`` seconds, in place."""
    robots = list(robots)
    for _ in range(seconds):
        for robot in robots:
            robot.move(width, height)


def quadrant_counts(robots: Iterable[Robot], width: int, height: int) -> list[int]:
    """Robots per quadrant: top-left, top-right, bottom-left, bottom-right.

    Robots on the middle row or column belong to no quadrant.
    """
    mid_x, mid_y = width // 2, height // 2
    counts = [0, 0, 0, 0]
    for robot in robots:
        if robot.x == mid_x or robot.y == mid_y:
            continue
        counts[(robot.x > mid_x) + 2 * (robot.y > mid_y)] += 1
    return counts


def safety_factor(robots: Iterable[Robot], width: int, height: int) -> int:
    """Product of the four quadrant counts."""
    return math.prod(quadrant_counts(robots, width, height))


def render_grid(robots: Iterable[Robot], width: int, height: int) -> str:
    """The grid as text: the number of robots on a cell, or '.' for none."""
    occupied = Counter((robot.x, robot.y) for robot in robots)
    return "\n".join(
        "".join(
            str(occupied[(x, y)]) if (x, y) in occupied else "."
            for x in range(width)
        )
        for y in range(height)
    )


def _print_counts(robots: Sequence[Robot], width: int, height: int) -> None:
    for quadrant, count in enumerate(quadrant_counts(robots, width, height)):
        print(f"Quadrant {quadrant}: {count} robots")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate the restroom robots.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--seconds", type=int, default=SECONDS)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            robots = [parse_robot(line) for line in handle if line.strip()]
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    print("Initial state:")
    print(render_grid(robots, args.width, args.height))
    simulate(robots, args.seconds, args.width, args.height)
    print(f"After {args.seconds} seconds:")
    print(render_grid(robots, args.width, args.height))
    _print_counts(robots, args.width, args.height)
    print(f"Safety factor: {safety_factor(robots, args.width, args.height)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())