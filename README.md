# aocsolve

Solvers for the first six days of the 2025 Advent of Code puzzles.

Each day lives in its own module (`aocsolve.day1` to `aocsolve.day6`).
Days one to five expose `part1(text)` and `part2(text)`; day six exposes
`part1(text)` only. Each takes the raw puzzle input as a string and returns
the answer as an integer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Every day has its own command. Days one to five take the part to solve
(`1` or `2`) followed by an optional input file; without a file, or with
`-`, the input is read from standard input. Day six takes only the
optional input file.

```
aocsolve-day1 1 < day1.txt
aocsolve-day1 2 day1.txt
aocsolve-day2 1 day2.txt
aocsolve-day3 2 day3.txt
aocsolve-day4 1 day4.txt
aocsolve-day5 2 day5.txt
aocsolve-day6 day6.txt
```

The answer is printed on standard output.

## Library use

```python
from aocsolve import day1, day5

with open("day1.txt") as handle:
    text = handle.read()

print(day1.part1(text))  # times the dial stops on zero
print(day1.part2(text))  # times the dial passes or stops on zero

with open("day5.txt") as handle:
    ranges, ingredients = day5.parse_database(handle.read())
merged = day5.merge_ranges(ranges)
print(sum(day5.is_fresh(merged, item) for item in ingredients))
```

## What each day covers

- **Day 1** – a dial of 100 positions starting at 50, turned by lines such
  as `L68` or `R48` (`parse_rotations`). Part one counts the rotations that
  end on zero (`count_zero_stops`); part two counts every click that lands
  on zero, including during a rotation (`count_zero_passes`).
- **Day 2** – comma-separated `lower-upper` ranges (`parse_ranges`). Part one
  sums the IDs made of one digit block written twice
  (`doubled_ids_in_range`); part two sums the IDs of up to eleven digits made
  of a block repeated two or more times (`repeated_ids`).
- **Day 3** – the largest number formed by picking digits of a bank in order
  (`max_joltage`): two digits per bank in part one, twelve in part two.
- **Day 4** – a grid of `@` paper rolls (`parse_grid`, `neighbours`). Part one
  counts rolls with fewer than four neighbouring rolls (`accessible_rolls`);
  part two counts the rolls removed when accessible rolls are taken away
  repeatedly (`removable_rolls`).
- **Day 5** – fresh ranges and ingredient IDs separated by a blank line
  (`parse_database`). Part one counts fresh ingredients (`merge_ranges`,
  `is_fresh`); part two counts every ID covered by the merged ranges.
- **Day 6** – a whitespace-separated worksheet whose last row holds `+` or
  `*` for each column (`parse_worksheet`, `solve_column`); the column results
  are summed.

## Limits

Day six has only its first part; there is no `part2` for it. Malformed input
(an unknown rotation direction, a range without `-`, a bank with non-digit
characters, ragged worksheet rows, an unknown operator) raises `ValueError`.