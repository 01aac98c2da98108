"""Product ID ranges: find IDs made of a repeated digit block."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left
from collections.abc import Iterator
from functools import lru_cache
from itertools import accumulate
from pathlib import Path

MAX_DIGITS = 11


def parse_ranges(text: str) -> list[tuple[int, int]]:
    """Parse comma separated ``lower-upper`` ranges."""
    ranges = []
    for piece in text.split(","):
        piece = piece.strip()
        if not piece:
            continue
        lower, sep, upper = piece.partition("-")
        if not sep:
            raise ValueError(f"malformed range {piece!r}")
        ranges.append((int(lower), int(upper)))
    return ranges


def digit_count(number: int) -> int:
    """Number of decimal digits of a non-negative integer (one for zero)."""
    return len(str(abs(number)))


def _half_bound(number: int, is_upper: bool) -> int:
    digits = digit_count(number)
    if digits % 2:
        return 10 ** (digits // 2) - 1 if is_upper else 10 ** (digits // 2)
    return int(str(number)[: digits // 2])


def doubled_ids_in_range(lower: int, upper: int) -> Iterator[int]:
    """Yield IDs in ``[lower, upper]`` whose digits are one block written twice."""
    for half in range(_half_bound(lower, False), _half_bound(upper, True) + 1):
        candidate = int(str(half) * 2)
        if lower <= candidate <= upper:
            yield candidate


def repeated_ids(max_digits: int = MAX_DIGITS) -> list[int]:
    """All IDs of at most ``max_digits`` digits made of a block repeated two or more times."""
    found = set()
    for block_len in range(1, max_digits // 2 + 1):
        for block in range(10 ** (block_len - 1), 10**block_len):
            text = str(block)
            for repeats in range(2, max_digits // block_len + 1):
                found.add(int(text * repeats))
    return sorted(found)


@lru_cache(maxsize=None)
def _prefix_table(max_digits: int) -> tuple[tuple[int, ...], tuple[int, ...]]:
    ids = tuple(repeated_ids(max_digits))
    return ids, tuple(accumulate(ids, initial=0))


def part1(text: str) -> int:
    return sum(
        sum(doubled_ids_in_range(lower, upper)) for lower, upper in parse_ranges(text)
    )


def part2(text: str) -> int:
    ids, prefix = _prefix_table(MAX_DIGITS)
    total = 0
    for lower, upper in parse_ranges(text):
        start = bisect_left(ids, lower)
        end = bisect_left(ids, upper + 1)
        total += prefix[end] - prefix[start]
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum invalid product IDs.")
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    solver = part1 if args.part == 1 else part2
    print(solver(text))
    return 0