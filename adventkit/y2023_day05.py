"""Seed almanac: follow seeds through the conversion maps to their locations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import groupby

STAGES = (
    "Soil",
    "Fertilizer",
    "Water",
    "Light",
    "Temperature",
    "Humidity",
    "Location",
)


@dataclass(frozen=True)
class MapEntry:
    """One line of a conversion map: ``destination source length``."""

    destination: int
    source: int
    length: int


@dataclass(frozen=True)
class Almanac:
    """The seed list and the conversion maps, in the order they are applied."""

    seeds: tuple[int, ...]
    maps: tuple[tuple[MapEntry, ...], ...]


def _read_ints(text: str) -> list[int]:
    """Leading whitespace-separated integers of ``text``; stops at the first non-integer."""
    numbers = []
    for token in text.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def _parse_entry(line: str) -> MapEntry:
    numbers = _read_ints(line)
    if len(numbers) < 3:
        raise ValueError(f"bad map entry: {line!r}")
    return MapEntry(*numbers[:3])


def parse_almanac(text: str) -> Almanac:
    """Parse the seed line and every map block that follows it.

    Each map block starts with a header line and ends at a blank line.
    """
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty almanac")
    _, sep, seed_text = lines[0].partition(":")
    if not sep:
        raise ValueError(f"missing ':' in seed line: {lines[0]!r}")
    maps = []
    for non_blank, block in groupby(lines[1:], key=lambda line: bool(line.strip())):
        if not non_blank:
            continue
        _header, *entries = block
        maps.append(tuple(_parse_entry(line) for line in entries))
    return Almanac(tuple(_read_ints(seed_text)), tuple(maps))


def convert_number(number: int, entries: Iterable[MapEntry]) -> int:
    """Map ``number`` through the first entry whose source range holds it."""
    for entry in entries:
        if entry.source <= number < entry.source + entry.length:
            return entry.destination + (number - entry.source)
    return number


def convert_range(
    start: int, length: int, entries: Iterable[MapEntry]
) -> list[tuple[int, int]]:
    """Map the range ``[start, start + length)`` through a conversion map.

    Returns ``(start, length)`` pieces: converted pieces first, then the
    pieces no entry covered, which keep their numbers.
    """
    unconverted = [(start, length)]
    converted: list[tuple[int, int]] = []
    for entry in entries:
        src, src_end = entry.source, entry.source + entry.length
        offset = entry.destination - entry.source
        remaining = []
        for r_start, r_len in unconverted:
            r_end = r_start + r_len
            if r_start < src < r_end:
                remaining.append((r_start, src - r_start))
            if r_start < src_end and r_end > src:
                low, high = max(r_start, src), min(r_end, src_end)
                converted.append((low + offset, high - low))
            if r_start < src_end < r_end:
                remaining.append((src_end, r_end - src_end))
            if r_end <= src or r_start >= src_end:
                remaining.append((r_start, r_len))
        unconverted = remaining
    return converted + unconverted


def _chain(seed: int, maps: Sequence[Sequence[MapEntry]]) -> list[int]:
    values = [seed]
    for entries in maps:
        values.append(convert_number(values[-1], entries))
    return values


def lowest_location(almanac: Almanac) -> int:
    """Lowest location reached by any of the listed seeds."""
    if not almanac.seeds:
        raise ValueError("the almanac lists no seeds")
    return min(_chain(seed, almanac.maps)[-1] for seed in almanac.seeds)


def _seed_ranges(seeds: Sequence[int]) -> list[tuple[int, int]]:
    return list(zip(seeds[0::2], seeds[1::2]))


def lowest_location_from_ranges(almanac: Almanac) -> int:
    """Lowest location when the seed list is read as ``start length`` pairs."""
    ranges = _seed_ranges(almanac.seeds)
    if not ranges:
        raise ValueError("the almanac lists no seed ranges")
    for entries in almanac.maps:
        ranges = [
            piece for start, length in ranges
            for piece in convert_range(start, length, entries)
        ]
    return min(start for start, _ in ranges)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the lowest seed location.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            almanac = parse_almanac(handle.read())
    except OSError as exc:
        print(f"Error opening {args.path}: {exc}", file=sys.stderr)
        return 1
    for seed in almanac.seeds:
        seed_value, *values = _chain(seed, almanac.maps)
        steps = "".join(
            f" -> {name} {value}" for name, value in zip(STAGES, values)
        )
        print(f"Seed {seed_value}{steps}")
    print(f"The lowest location is: {lowest_location(almanac)}")
    print(
        "The lowest location from seed ranges is: "
        f"{lowest_location_from_ranges(almanac)}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())