"""Plutonian pebbles: a closed-form estimate of how many stones the blinks produce."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

DEFAULT_STONES = (8793800, 1629, 65, 5, 960, 0, 138983, 85629)
DEFAULT_BLINKS = 75


def stone_growth(stone: int, blinks: int) -> int:
    """Stones that one stone becomes after ``blinks`` blinks.

    A stone with an even number of digits doubles every blink; zero and
    stones with an odd number of digits stay a single stone.
    """
    if blinks == 0 or stone == 0:
        return 1
    if len(str(stone)) % 2 == 0:
        return 2**blinks
    return 1


def total_stones(stones: Iterable[int], blinks: int) -> int:
    """Total stones produced by every starting stone."""
    return sum(stone_growth(stone, blinks) for stone in stones)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count stones after blinking.")
    parser.add_argument("stones", nargs="*", type=int, default=list(DEFAULT_STONES))
    parser.add_argument("--blinks", type=int, default=DEFAULT_BLINKS)
    args = parser.parse_args(argv)
    print(f"Initial stones: {' '.join(map(str, args.stones))}")
    print(f"Initial count: {len(args.stones)} stones\n")
    total = total_stones(args.stones, args.blinks)
    print(f"Number of stones after {args.blinks} blinks: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())