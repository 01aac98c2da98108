"""Ingredient database: check IDs against fresh ranges."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_right
from collections.abc import Iterable, Sequence
from operator import itemgetter
from pathlib import Path

Range = tuple[int, int]


def parse_database(text: str) -> tuple[list[Range], list[int]]:
    """Split the input into fresh ranges and ingredient IDs at the first blank line."""
    lines = iter(text.splitlines())
    ranges = []
    for line in lines:
        line = line.strip()
        if not line:
            break
        lower, sep, upper = line.partition("-")
        if not sep:
            raise ValueError(f"malformed range {line!r}")
        ranges.append((int(lower), int(upper)))
    ingredients = [int(line) for line in (raw.strip() for raw in lines) if line]
    return ranges, ingredients


def merge_ranges(ranges: Iterable[Range]) -> list[Range]:
    """Sort inclusive ranges and merge the ones that overlap."""
    ordered = sorted(ranges)
    if not ordered:
        return []
    merged = []
    start, end = ordered[0]
    for current_start, current_end in ordered[1:]:
        if end < current_start:
            merged.append((start, end))
            start, end = current_start, current_end
        else:
            end = max(end, current_end)
    merged.append((start, end))
    return merged


def is_fresh(merged: Sequence[Range], ingredient: int) -> bool:
    """Whether ``ingredient`` falls inside one of the sorted, merged ranges."""
    index = bisect_right(merged, ingredient, key=itemgetter(0)) - 1
    return index >= 0 and ingredient <= merged[index][1]


def part1(text: str) -> int:
    ranges, ingredients = parse_database(text)
    merged = merge_ranges(ranges)
    return sum(is_fresh(merged, ingredient) for ingredient in ingredients)


def part2(text: str) -> int:
    ranges, _ = parse_database(text)
    return sum(end - start + 1 for start, end in merge_ranges(ranges))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count fresh ingredients.")
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    solver = part1 if args.part == 1 else part2
    print(solver(text))
    return 0