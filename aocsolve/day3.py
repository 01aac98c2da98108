"""Battery banks: pick digits in order to form the largest joltage."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def max_joltage(bank: str, digits: int) -> int:
    """Largest number formed by choosing ``digits`` digits of ``bank`` in order."""
    if not bank.isdigit():
        raise ValueError(f"bank must contain only digits: {bank!r}")
    if digits < 1 or digits > len(bank):
        raise ValueError(f"cannot choose {digits} digits from a bank of {len(bank)}")
    stack: list[str] = []
    for index, digit in enumerate(bank):
        remaining = len(bank) - index - 1
        while stack and stack[-1] < digit and len(stack) + remaining >= digits:
            stack.pop()
        stack.append(digit)
    return int("".join(stack[:digits]))


def _banks(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    return sum(max_joltage(bank, 2) for bank in _banks(text))


def part2(text: str) -> int:
    return sum(max_joltage(bank, 12) for bank in _banks(text))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum maximum bank joltages.")
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    solver = part1 if args.part == 1 else part2
    print(solver(text))
    return 0