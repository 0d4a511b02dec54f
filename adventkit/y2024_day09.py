"""Disk compaction: move file blocks into free space and checksum the result."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

DIGITS = "0123456789"


def parse_disk_map(text: str) -> list[int]:
    """Digits of the first whitespace-separated token of ``text``."""
    tokens = text.split()
    if not tokens:
        return []
    token = tokens[0]
    bad = [char for char in token if char not in DIGITS]
    if bad:
        raise ValueError(f"disk map holds a non-digit: {bad[0]!r}")
    return [int(char) for char in token]


def _blocks(disk_map: Sequence[int]) -> list[int | None]:
    blocks: list[int | None] = []
    for index, size in enumerate(disk_map):
        blocks.extend([index // 2 if index % 2 == 0 else None] * size)
    return blocks


def fragmented_checksum(disk_map: Sequence[int]) -> int:
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    blocks = _blocks(disk_map)
    used = sum(1 for block in blocks if block is not None)
    movers = (block for block in reversed(blocks) if block is not None)
    compacted = [
        block if block is not None else next(movers) for block in blocks[:used]
    ]
    return sum(position * file_id for position, file_id in enumerate(compacted))


def whole_file_checksum(disk_map: Sequence[int]) -> int:
    """Checksum after moving whole files, highest id first, into the leftmost gap that fits."""
    files: list[tuple[int, int]] = []
    gaps: list[list[int]] = []
    position = 0
    for index, size in enumerate(disk_map):
        if index % 2 == 0:
            files.append((position, size))
        else:
            gaps.append([position, size])
        position += size
    for file_id in reversed(range(len(files))):
        start, length = files[file_id]
        for gap in gaps:
            if gap[0] >= start:
                break
            if gap[1] >= length:
                files[file_id] = (gap[0], length)
                gap[0] += length
                gap[1] -= length
                break
    return sum(
        file_id * (2 * start + length - 1) * length // 2
        for file_id, (start, length) in enumerate(files)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compact a disk and checksum it.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            disk_map = parse_disk_map(handle.read())
    except OSError as exc:
        print(f"Unable to open file: {args.path}: {exc}", file=sys.stderr)
        return 1
    print(f"Checksum moving blocks: {fragmented_checksum(disk_map)}")
    print(f"Checksum moving whole files: {whole_file_checksum(disk_map)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())