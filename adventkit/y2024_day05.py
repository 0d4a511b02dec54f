"""Safety manual updates: page ordering rules, checks and corrections."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict, deque
from collections.abc import Iterable, Mapping, Sequence

Rules = Mapping[int, "set[int]"]


def parse_manual(text: str) -> tuple[dict[int, set[int]], list[list[int]]]:
    """Parse ``X|Y`` rules up to the first blank line, then comma-separated updates.

    Blank update lines are ignored.
    """
    lines = iter(text.splitlines())
    rules: defaultdict[int, set[int]] = defaultdict(set)
    for line in lines:
        if not line.strip():
            break
        before, sep, after = line.partition("|")
        if not sep:
            raise ValueError(f"bad ordering rule: {line!r}")
        try:
            rules[int(before)].add(int(after))
        except ValueError as exc:
            raise ValueError(f"bad ordering rule: {line!r}") from exc
    updates = []
    for line in lines:
        if not line.strip():
            continue
        try:
            updates.append([int(token) for token in line.split(",")])
        except ValueError as exc:
            raise ValueError(f"bad update: {line!r}") from exc
    return dict(rules), updates


def is_ordered(update: Sequence[int], rules: Rules) -> bool:
    """True when no rule ``X|Y`` has Y printed before X in the update."""
    position = {page: index for index, page in enumerate(update)}
    return all(
        position[first] <= position[second]
        for first, seconds in rules.items()
        if first in position
        for second in seconds
        if second in position
    )


def middle_page(update: Sequence[int]) -> int:
    """The page in the middle of the update."""
    if not update:
        raise ValueError("an empty update has no middle page")
    return update[len(update) // 2]


def topological_sort(update: Sequence[int], rules: Rules) -> list[int]:
    """Reorder the update's pages so that every applicable rule holds.

    Pages caught in a cycle of rules are left out of the result.
    """
    pages = list(dict.fromkeys(update))
    in_degree = dict.fromkeys(pages, 0)
    edges: dict[int, list[int]] = defaultdict(list)
    for first, seconds in rules.items():
        if first not in in_degree:
            continue
        for second in sorted(seconds):
            if second in in_degree:
                edges[first].append(second)
                in_degree[second] += 1
    ready = deque(page for page in pages if in_degree[page] == 0)
    ordered = []
    while ready:
        page = ready.popleft()
        ordered.append(page)
        for follower in edges[page]:
            in_degree[follower] -= 1
            if in_degree[follower] == 0:
                ready.append(follower)
    return ordered


def sum_ordered_middles(rules: Rules, updates: Iterable[Sequence[int]]) -> int:
    """Sum of the middle pages of the updates that are already in order."""
    return sum(middle_page(update) for update in updates if is_ordered(update, rules))


def sum_corrected_middles(rules: Rules, updates: Iterable[Sequence[int]]) -> int:
    """Sum of the middle pages of the out-of-order updates once corrected."""
    return sum(
        middle_page(topological_sort(update, rules))
        for update in updates
        if not is_ordered(update, rules)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check safety manual updates.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            rules, updates = parse_manual(handle.read())
    except OSError as exc:
        print(f"Error opening file {args.path}: {exc}", file=sys.stderr)
        return 1
    print(
        "Sum of middle page numbers from correctly ordered updates: "
        f"{sum_ordered_middles(rules, updates)}"
    )
    print(
        "Sum of middle page numbers from corrected updates: "
        f"{sum_corrected_middles(rules, updates)}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())