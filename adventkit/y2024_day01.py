"""Two location-id lists: their total distance and their similarity score."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split whitespace-separated pairs into the left and right lists.

    Reading stops at the first token that is not an integer; an unpaired
    trailing number is dropped.
    """
    numbers = []
    for token in text.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    pairs = list(zip(numbers[0::2], numbers[1::2]))
    return [left for left, _ in pairs], [right for _, right in pairs]


def total_distance(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum of the gaps between the two lists once both are sorted."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Iterable[int], right: Iterable[int]) -> int:
    """Each left number times how often it appears in the right list, summed."""
    counts = Counter(right)
    return sum(number * counts[number] for number in left)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare two location lists.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            left, right = parse_lists(handle.read())
    except OSError as exc:
        print(f"Error opening file {args.path}: {exc}", file=sys.stderr)
        return 1
    print("Sorted Left List:   Sorted Right List:   Distance")
    print("-" * 45)
    for a, b in zip(sorted(left), sorted(right)):
        print(f"{a}\t\t{b}\t\t{abs(a - b)}")
    print("-" * 45)
    print(f"Total distance between the lists: {total_distance(left, right)}")
    print(f"Total similarity score: {similarity_score(left, right)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())