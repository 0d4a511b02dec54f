"""Scratchcards: points per card and the cascade of won copies."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Card:
    """A scratchcard's winning numbers and the numbers it holds."""

    winning: tuple[int, ...]
    yours: tuple[int, ...]

    def matches(self) -> int:
        """How many of the card's numbers are winning numbers."""
        return count_matches(self.winning, self.yours)


def _read_numbers(text: str) -> tuple[int, ...]:
    """Leading whitespace-separated integers of ``text``; stops at the first non-integer."""
    numbers = []
    for token in text.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return tuple(numbers)


def parse_cards(lines: Iterable[str]) -> list[Card]:
    """Parse card lines; empty lines and lines without '|' are skipped."""
    cards = []
    for line in lines:
        if not line:
            continue
        _, sep, rest = line.partition(":")
        if not sep:
            rest = line
        winning, bar, yours = rest.partition("|")
        if not bar:
            continue
        cards.append(Card(_read_numbers(winning), _read_numbers(yours)))
    return cards


def count_matches(winning: Iterable[int], yours: Iterable[int]) -> int:
    """Count the numbers in ``yours`` that are winning numbers."""
    winning_set = set(winning)
    return sum(1 for number in yours if number in winning_set)


def card_points(winning: Iterable[int], yours: Iterable[int]) -> int:
    """One point for the first match, doubled for each further match."""
    matched = count_matches(winning, yours)
    return 0 if matched == 0 else 1 << (matched - 1)


def total_points(cards: Iterable[Card]) -> int:
    """Sum of the points of every card."""
    return sum(card_points(card.winning, card.yours) for card in cards)


def card_instances(cards: Sequence[Card]) -> list[int]:
    """Number of copies of each card once every win has been paid out."""
    counts = [1] * len(cards)
    for index, card in enumerate(cards):
        for target in range(index + 1, min(index + 1 + card.matches(), len(cards))):
            counts[target] += counts[index]
    return counts


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score scratchcards.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            cards = parse_cards(handle.read().splitlines())
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    instances = card_instances(cards)
    for number, (card, copies) in enumerate(zip(cards, instances), start=1):
        print(
            f"Card {number}: {card.matches()} matches, "
            f"{card_points(card.winning, card.yours)} points, {copies} instances"
        )
    print(f"Total Points: {total_points(cards)}")
    print(f"Total scratchcards: {sum(instances)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())