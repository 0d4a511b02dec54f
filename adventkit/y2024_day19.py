"""Towel designs: which can be built from the available patterns, and in how many ways."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable


def parse_towels(text: str) -> tuple[list[str], list[str]]:
    """Comma-separated patterns up to the first blank line, then one design per line.

    Whitespace inside a pattern is dropped, as are empty patterns and blank designs.
    """
    lines = iter(text.splitlines())
    patterns = []
    for line in lines:
        if not line.strip():
            break
        for token in line.split(","):
            pattern = "".join(token.split())
            if pattern:
                patterns.append(pattern)
    designs = [line for line in lines if line.strip()]
    return patterns, designs


def _ways(design: str, patterns: Iterable[str]) -> list[int]:
    """Arrangement counts for every suffix of ``design``, indexed by its start."""
    usable = [pattern for pattern in patterns if pattern]
    ways = [0] * len(design) + [1]
    for pos in reversed(range(len(design))):
        ways[pos] = sum(
            ways[pos + len(pattern)]
            for pattern in usable
            if design.startswith(pattern, pos)
        )
    return ways


def count_arrangements(design: str, patterns: Iterable[str]) -> int:
    """Number of ways to lay patterns end to end to form ``design`` exactly."""
    return _ways(design, patterns)[0]


def can_make(design: str, patterns: Iterable[str]) -> bool:
    """True when ``design`` can be formed from the patterns."""
    return count_arrangements(design, patterns) > 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Arrange towels into designs.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            patterns, designs = parse_towels(handle.read())
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    possible = 0
    total = 0
    for design in designs:
        ways = count_arrangements(design, patterns)
        total += ways
        if ways:
            possible += 1
            print(f"{design} is possible ({ways} arrangements)")
        else:
            print(f"{design} is impossible")
    print(f"\nTotal possible designs: {possible}")
    print(f"Total possible arrangements: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())