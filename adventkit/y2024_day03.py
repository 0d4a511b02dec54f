"""Corrupted memory: sum the products of the ``mul(X,Y)`` instructions."""

from __future__ import annotations

import argparse
import re
import sys

_LOOSE_MUL = re.compile(r"mul\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*\)")
_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_DO = "do()"
_DONT = "don't()"


def sum_multiplications(text: str) -> int:
    """Sum of every ``mul(X,Y)`` with 1-3 digit operands, spaces allowed inside."""
    return sum(
        int(match.group(1)) * int(match.group(2))
        for line in text.splitlines()
        for match in _LOOSE_MUL.finditer(line)
    )


def sum_enabled_multiplications(text: str) -> int:
    """Sum of ``mul(X,Y)`` products, skipping those after ``don't()`` until ``do()``.

    The enabled state carries over from one line to the next.
    """
    enabled = True
    total = 0
    for line in text.splitlines():
        pos = 0
        while pos < len(line):
            if line.startswith(_DONT, pos):
                enabled = False
                pos += len(_DONT)
            elif line.startswith(_DO, pos):
                enabled = True
                pos += len(_DO)
            elif match := _MUL.match(line, pos):
                if enabled:
                    total += int(match.group(1)) * int(match.group(2))
                pos = match.end()
            else:
                pos += 1
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum multiplications in memory.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        print(f"Error opening file {args.path}: {exc}", file=sys.stderr)
        return 1
    print(f"Total sum of multiplications: {sum_multiplications(text)}")
    print(f"Total sum of enabled multiplications: {sum_enabled_multiplications(text)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())