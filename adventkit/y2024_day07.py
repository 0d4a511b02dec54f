"""Bridge calibration: which equations can be made true with the given operators."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Callable, Iterable, Sequence
from itertools import product

ADD = "+"
MULTIPLY = "*"
CONCAT = "||"
BASIC_OPERATORS = (ADD, MULTIPLY)
ALL_OPERATORS = (ADD, MULTIPLY, CONCAT)

Equation = tuple[int, list[int]]


def concatenate(a: int, b: int) -> int:
    """Join the digits of ``a`` and ``b`` into one number."""
    return int(f"{a}{b}")


_APPLY: dict[str, Callable[[int, int], int]] = {
    ADD: operator.add,
    MULTIPLY: operator.mul,
    CONCAT: concatenate,
}


def parse_equations(text: str) -> list[Equation]:
    """Parse ``target: n1 n2 ...`` lines.

    Lines whose target is not a number or that have no numbers are skipped,
    as are tokens that are not numbers.
    """
    equations = []
    for line in text.splitlines():
        if not line:
            continue
        head, _, tail = line.partition(":")
        try:
            target = int(head)
        except ValueError:
            continue
        numbers = []
        for token in tail.split():
            try:
                numbers.append(int(token))
            except ValueError:
                continue
        if numbers:
            equations.append((target, numbers))
    return equations


def evaluate(numbers: Sequence[int], operators: Sequence[str]) -> int:
    """Apply the operators strictly left to right, with no precedence."""
    if not numbers:
        raise ValueError("no numbers to evaluate")
    if len(operators) != len(numbers) - 1:
        raise ValueError("need exactly one operator between each pair of numbers")
    result = numbers[0]
    for symbol, number in zip(operators, numbers[1:]):
        try:
            apply = _APPLY[symbol]
        except KeyError:
            raise ValueError(f"unknown operator: {symbol!r}") from None
        result = apply(result, number)
    return result


def is_solvable(numbers: Sequence[int], target: int, operators: Iterable[str]) -> bool:
    """True when some choice of the operators between the numbers gives ``target``."""
    choices = tuple(operators)
    return any(
        evaluate(numbers, combination) == target
        for combination in product(choices, repeat=len(numbers) - 1)
    )


def calibration_total(equations: Iterable[Equation], operators: Iterable[str]) -> int:
    """Sum of the targets of every solvable equation."""
    choices = tuple(operators)
    return sum(
        target for target, numbers in equations if is_solvable(numbers, target, choices)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Total the solvable calibrations.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            equations = parse_equations(handle.read())
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    print(f"Total with + and *: {calibration_total(equations, BASIC_OPERATORS)}")
    print(f"Total with +, * and ||: {calibration_total(equations, ALL_OPERATORS)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())