"""Falling memory bytes: the shortest walk across the grid and the byte that cuts it off."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Collection, Iterable

GRID_SIZE = 71
FALLEN_BYTES = 1024
_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))

Point = tuple[int, int]


def parse_bytes(text: str) -> list[Point]:
    """Parse ``X,Y`` lines into points; blank lines are skipped."""
    points = []
    for line in text.splitlines():
        if not line.strip():
            continue
        x_text, sep, y_text = line.partition(",")
        if not sep:
            raise ValueError(f"bad byte position: {line!r}")
        try:
            points.append((int(x_text), int(y_text)))
        except ValueError as exc:
            raise ValueError(f"bad byte position: {line!r}") from exc
    return points


def shortest_path(corrupted: Collection[Point], size: int = GRID_SIZE) -> int | None:
    """Fewest steps from the top-left to the bottom-right corner avoiding corrupted cells.

    Returns ``None`` when the exit cannot be reached.
    """
    if size < 1:
        raise ValueError("grid size must be positive")
    blocked = set(corrupted)
    goal = (size - 1, size - 1)
    start = (0, 0)
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        (x, y), steps = queue.popleft()
        if (x, y) == goal:
            return steps
        for dx, dy in _STEPS:
            nxt = (x + dx, y + dy)
            if (
                0 <= nxt[0] < size
                and 0 <= nxt[1] < size
                and nxt not in blocked
                and nxt not in seen
            ):
                seen.add(nxt)
                queue.append((nxt, steps + 1))
    return None


def first_blocking_byte(points: Iterable[Point], size: int = GRID_SIZE) -> Point | None:
    """The first byte whose fall leaves no path to the exit, or ``None`` if none does."""
    corrupted: set[Point] = set()
    for point in points:
        x, y = point
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"byte {point} falls outside the grid")
        corrupted.add(point)
        if shortest_path(corrupted, size) is None:
            return point
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Walk across falling memory.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--size", type=int, default=GRID_SIZE)
    parser.add_argument("--bytes", type=int, default=FALLEN_BYTES, dest="fallen")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            points = parse_bytes(handle.read())
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    steps = shortest_path(points[: args.fallen], args.size)
    if steps is None:
        print("No path found!")
    else:
        print(f"Shortest path length: {steps}")
    blocking = first_blocking_byte(points, args.size)
    if blocking is None:
        print("No blocking byte found!")
    else:
        print(f"{blocking[0]},{blocking[1]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())