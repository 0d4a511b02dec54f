"""Claw machines: the tokens needed to line the claw up with each prize."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass

MAX_PRESSES = 1000
A_COST = 3
B_COST = 1
_NUMBER = re.compile(r"[-+]?[0-9]+")


@dataclass(frozen=True)
class ClawMachine:
    """Moves of buttons A and B and the prize position."""

    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int


def _coordinate(line: str, axis: str) -> int:
    """First signed integer after the first ``axis`` letter in ``line``; 0 if none."""
    index = line.find(axis)
    if index == -1:
        raise ValueError(f"no {axis} coordinate in {line!r}")
    match = _NUMBER.search(line, index)
    return int(match.group()) if match else 0


def parse_machines(text: str) -> list[ClawMachine]:
    """Parse ``Button A``, ``Button B`` and ``Prize`` lines into machines."""
    machines = []
    current: dict[str, int] = {}
    for line in text.splitlines():
        if not line:
            continue
        if "Button A:" in line:
            current["ax"] = _coordinate(line, "X")
            current["ay"] = _coordinate(line, "Y")
        elif "Button B:" in line:
            current["bx"] = _coordinate(line, "X")
            current["by"] = _coordinate(line, "Y")
        elif "Prize:" in line:
            current["px"] = _coordinate(line, "X")
            current["py"] = _coordinate(line, "Y")
            try:
                machines.append(ClawMachine(**current))
            except TypeError as exc:
                raise ValueError(f"prize before both buttons: {line!r}") from exc
    return machines


def solve_machine(machine: ClawMachine) -> int | None:
    """Tokens for the first press counts found that reach the prize, or ``None``.

    Press counts are tried with A ascending, then B ascending, each up to
    ``MAX_PRESSES``, stopping early once the claw overshoots.
    """
    m = machine
    for a in range(MAX_PRESSES + 1):
        for b in range(MAX_PRESSES + 1):
            x = a * m.ax + b * m.bx
            y = a * m.ay + b * m.by
            if x == m.px and y == m.py:
                return A_COST * a + B_COST * b
            if x > m.px or y > m.py:
                break
        if a * m.ax > m.px or a * m.ay > m.py:
            break
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Win prizes from claw machines.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            machines = parse_machines(handle.read())
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    prizes = tokens = 0
    for number, machine in enumerate(machines, start=1):
        cost = solve_machine(machine)
        if cost is None:
            print(f"Machine {number} is not solvable")
        else:
            prizes += 1
            tokens += cost
            print(f"Machine {number} is solvable with {cost} tokens")
    print(f"\nTotal prizes possible: {prizes}")
    print(f"Minimum tokens needed: {tokens}")
    return 0


if __name__ == "__main__":
    sys.exit(main())