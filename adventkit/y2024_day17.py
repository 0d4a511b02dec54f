"""Three-bit computer: registers A, B and C running a program of opcodes."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import IntEnum


class Opcode(IntEnum):
    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


def _mod8(value: int) -> int:
    """Remainder by 8 that keeps the sign of ``value``."""
    remainder = abs(value) % 8
    return -remainder if value < 0 else remainder


@dataclass
class Computer:
    """Registers, program, instruction pointer and collected output."""

    a: int
    b: int
    c: int
    program: tuple[int, ...]
    pointer: int = 0
    output: list[int] = field(default_factory=list)
    halted: bool = False

    def __post_init__(self) -> None:
        self.program = tuple(self.program)
        if self.pointer >= len(self.program):
            self.halted = True

    def combo(self, operand: int) -> int:
        """Value of a combo operand: 0-3 literally, 4-6 registers A-C."""
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"Invalid operand: {operand}")

    def _operand(self) -> int:
        index = self.pointer + 1
        if index >= len(self.program):
            raise ValueError(f"opcode at {self.pointer} has no operand")
        return self.program[index]

    def _divide(self) -> int:
        shift = self.combo(self._operand())
        if shift < 0:
            raise ValueError(f"negative shift: {shift}")
        if self.a >= 0:
            return self.a >> shift
        return -((-self.a) >> shift)

    def step(self) -> None:
        """Execute the instruction at the pointer."""
        if self.halted:
            raise RuntimeError("the computer has halted")
        code = self.program[self.pointer]
        try:
            opcode = Opcode(code)
        except ValueError:
            raise ValueError(f"unknown opcode: {code}") from None
        match opcode:
            case Opcode.ADV:
                self.a = self._divide()
            case Opcode.BDV:
                self.b = self._divide()
            case Opcode.CDV:
                self.c = self._divide()
            case Opcode.BXL:
                self.b ^= self._operand()
            case Opcode.BST:
                self.b = _mod8(self.combo(self._operand()))
            case Opcode.BXC:
                self.b ^= self.c
            case Opcode.OUT:
                self.output.append(_mod8(self.combo(self._operand())))
        if opcode is Opcode.JNZ and self.a != 0:
            self.pointer = self._operand()
        else:
            if opcode is Opcode.JNZ:
                self._operand()
            self.pointer += 2
        if self.pointer >= len(self.program):
            self.halted = True

    def run(self) -> list[int]:
        """Run until the pointer leaves the program; return everything output."""
        while not self.halted:
            self.step()
        return list(self.output)


def _register(line: str) -> int:
    _, sep, value = line.partition(":")
    if not sep:
        raise ValueError(f"bad register line: {line!r}")
    return int(value)


def parse_program(text: str) -> Computer:
    """Build a computer from three register lines, a blank line and a program line."""
    lines = text.splitlines()
    if len(lines) < 5:
        raise ValueError("expected three registers, a blank line and a program")
    a, b, c = (_register(line) for line in lines[:3])
    _, sep, program = lines[4].partition(":")
    if not sep:
        raise ValueError(f"bad program line: {lines[4]!r}")
    return Computer(a, b, c, tuple(int(token) for token in program.split(",")))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run a three-bit program.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            computer = parse_program(handle.read())
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    output = computer.run()
    print(f"Registers: A={computer.a} B={computer.b} C={computer.c}")
    print(",".join(map(str, output)))
    return 0


if __name__ == "__main__":
    sys.exit(main())