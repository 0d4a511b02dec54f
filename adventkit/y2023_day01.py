"""Trebuchet calibration values built from the first and last digit of each line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

DIGITS = "0123456789"
DIGIT_WORDS = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)


def _digit_at(text: str, index: int, from_start: bool) -> int | None:
    """Return the digit written at ``index``, as a numeral or a spelled word."""
    char = text[index]
    if char in DIGITS:
        return int(char)
    for value, word in enumerate(DIGIT_WORDS):
        if from_start:
            if text.startswith(word, index):
                return value
        elif text.endswith(word, 0, index + 1):
            return value
    return None


def find_digit(text: str, from_start: bool) -> int | None:
    """Find the first (or last) digit in ``text``, counting spelled-out digits.

    Scanning from the end, a spelled word is recognised by where it ends.
    Returns ``None`` when the text holds no digit at all.
    """
    positions = range(len(text)) if from_start else reversed(range(len(text)))
    found = (_digit_at(text, index, from_start) for index in positions)
    return next((digit for digit in found if digit is not None), None)


def digit_calibration(line: str) -> int | None:
    """Two-digit value from the first and last numeral, or ``None`` if there is none."""
    numerals = [char for char in line if char in DIGITS]
    if not numerals:
        return None
    return int(numerals[0]) * 10 + int(numerals[-1])


def spelled_calibration(line: str) -> int | None:
    """Two-digit value counting spelled digits, or ``None`` if there is none."""
    first = find_digit(line, True)
    last = find_digit(line, False)
    if first is None or last is None:
        return None
    return first * 10 + last


def total_calibration(lines: Iterable[str]) -> int:
    """Sum of numeral-only calibration values; lines without digits add nothing."""
    return sum(value for value in map(digit_calibration, lines) if value is not None)


def total_spelled_calibration(lines: Iterable[str]) -> int:
    """Sum of calibration values that count spelled digits too."""
    return sum(value for value in map(spelled_calibration, lines) if value is not None)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum trebuchet calibration values.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        print(f"Error: could not open {args.path!r}: {exc}", file=sys.stderr)
        return 1
    print(f"The total sum of all calibration values is: {total_calibration(lines)}")
    print(
        "The total sum with spelled digits is: "
        f"{total_spelled_calibration(lines)}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())