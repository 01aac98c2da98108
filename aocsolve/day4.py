"""Paper roll grid: find rolls that a forklift can reach."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from pathlib import Path

Position = tuple[int, int]

ROLL = "@"
CROWD_LIMIT = 4
_DELTAS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def parse_grid(text: str) -> frozenset[Position]:
    """Positions ``(row, column)`` of every roll in the grid."""
    return frozenset(
        (row, col)
        for row, line in enumerate(text.splitlines())
        for col, cell in enumerate(line)
        if cell == ROLL
    )


def neighbours(grid: frozenset[Position]) -> dict[Position, set[Position]]:
    """Map each roll to the rolls among its eight surrounding cells."""
    return {
        (row, col): {
            (row + dr, col + dc) for dr, dc in _DELTAS if (row + dr, col + dc) in grid
        }
        for row, col in grid
    }


def accessible_rolls(grid: frozenset[Position]) -> set[Position]:
    """Rolls with fewer than four neighbouring rolls."""
    return {pos for pos, adjacent in neighbours(grid).items() if len(adjacent) < CROWD_LIMIT}


def removable_rolls(grid: frozenset[Position]) -> set[Position]:
    """Rolls that become accessible when accessible rolls are removed repeatedly."""
    adjacency = neighbours(grid)
    queue = deque(
        pos for pos in sorted(adjacency) if len(adjacency[pos]) < CROWD_LIMIT
    )
    queued = set(queue)
    removed = set()
    while queue:
        pos = queue.popleft()
        removed.add(pos)
        for other in adjacency[pos]:
            adjacency[other].discard(pos)
            if len(adjacency[other]) < CROWD_LIMIT and other not in queued:
                queue.append(other)
                queued.add(other)
    return removed


def part1(text: str) -> int:
    return len(accessible_rolls(parse_grid(text)))


def part2(text: str) -> int:
    return len(removable_rolls(parse_grid(text)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count reachable paper rolls.")
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    solver = part1 if args.part == 1 else part2
    print(solver(text))
    return 0