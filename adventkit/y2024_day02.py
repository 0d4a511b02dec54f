"""Reactor reports: which level sequences are safe, with and without a dampener."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import pairwise


def _read_ints(text: str) -> list[int]:
    numbers = []
    for token in text.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def parse_reports(text: str) -> list[list[int]]:
    """One report per line, each a list of levels."""
    return [_read_ints(line) for line in text.splitlines()]


def is_safe(report: Sequence[int]) -> bool:
    """Levels move steadily in one direction, by 1 to 3 each step."""
    diffs = [b - a for a, b in pairwise(report)]
    if not all(1 <= abs(diff) <= 3 for diff in diffs):
        return False
    return all(diff > 0 for diff in diffs) or all(diff < 0 for diff in diffs)


def dampened_report(report: Sequence[int]) -> list[int] | None:
    """The first copy of ``report`` with one level removed that is safe, if any."""
    for index in range(len(report)):
        candidate = [*report[:index], *report[index + 1:]]
        if is_safe(candidate):
            return candidate
    return None


def count_safe(reports: Iterable[Sequence[int]]) -> int:
    """Number of safe reports."""
    return sum(1 for report in reports if is_safe(report))


def count_safe_with_dampener(reports: Iterable[Sequence[int]]) -> int:
    """Number of reports that are safe, or become safe by removing one level."""
    return sum(
        1 for report in reports
        if is_safe(report) or dampened_report(report) is not None
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check reactor reports.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            reports = parse_reports(handle.read())
    except OSError as exc:
        print(f"Error: could not open {args.path!r}: {exc}", file=sys.stderr)
        return 1
    for report in reports:
        levels = " ".join(map(str, report))
        if is_safe(report):
            print(f" {levels} -> safe")
        elif (fixed := dampened_report(report)) is not None:
            print(f" {levels} -> safe once changed to: {' '.join(map(str, fixed))}")
        else:
            print(f" {levels} -> unsafe even with a removal")
    print(f"Safe reports: {count_safe(reports)}")
    print(f"Safe reports with dampener: {count_safe_with_dampener(reports)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())