"""Math worksheet: evaluate column problems and sum their results."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable
from pathlib import Path

Problem = tuple[list[int], str]


def parse_worksheet(text: str) -> list[Problem]:
    """Read whitespace separated columns; the last row holds the operators."""
    rows = [line.split() for line in text.splitlines() if line.strip()]
    if not rows:
        return []
    *number_rows, operators = rows
    if any(len(row) != len(operators) for row in number_rows):
        raise ValueError("worksheet rows have different numbers of columns")
    columns = list(zip(*number_rows)) if number_rows else [()] * len(operators)
    return [
        ([int(value) for value in column], operator)
        for column, operator in zip(columns, operators)
    ]


def solve_column(numbers: Iterable[int], operator: str) -> int:
    """Combine the numbers of one column with ``+`` or ``*``."""
    if operator == "+":
        return sum(numbers)
    if operator == "*":
        return math.prod(numbers)
    raise ValueError(f"unknown operator {operator!r}")


def part1(text: str) -> int:
    return sum(solve_column(numbers, operator) for numbers, operator in parse_worksheet(text))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum worksheet column results.")
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    print(part1(text))
    return 0