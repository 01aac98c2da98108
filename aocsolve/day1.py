"""Dial rotation puzzle: count how often the dial points at zero."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path

DIAL_SIZE = 100
START_POSITION = 50


def parse_rotations(text: str) -> list[int]:
    """Parse lines such as ``L68`` or ``R48`` into signed rotation amounts."""
    rotations = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        direction, amount = line[0], int(line[1:])
        if direction == "L":
            rotations.append(-amount)
        elif direction == "R":
            rotations.append(amount)
        else:
            raise ValueError(f"unknown rotation direction {direction!r} in {line!r}")
    return rotations


def count_zero_stops(rotations: Iterable[int]) -> int:
    """Count the rotations after which the dial rests on zero."""
    position = START_POSITION
    count = 0
    for rotation in rotations:
        position = (position + rotation) % DIAL_SIZE
        if position == 0:
            count += 1
    return count


def count_zero_passes(rotations: Iterable[int]) -> int:
    """Count every click at which the dial points at zero, including mid-rotation."""
    position = START_POSITION
    count = 0
    for rotation in rotations:
        full_turns, rest = divmod(abs(rotation), DIAL_SIZE)
        count += full_turns
        target = position - rest if rotation < 0 else position + rest
        if position != 0 and (target <= 0 or target >= DIAL_SIZE):
            count += 1
        position = target % DIAL_SIZE
    return count


def part1(text: str) -> int:
    return count_zero_stops(parse_rotations(text))


def part2(text: str) -> int:
    return count_zero_passes(parse_rotations(text))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count dial zero hits.")
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    solver = part1 if args.part == 1 else part2
    print(solver(text))
    return 0