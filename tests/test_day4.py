from aocsolve.day4 import (
    accessible_rolls,
    main,
    neighbours,
    parse_grid,
    part1,
    part2,
    removable_rolls,
)

EXAMPLE = """\
..@@.@@@@.
@@@.@.@@@@
@@@@@.@.@@
@.@@@@..@.
@@.@@@@.@@
.@@@@@@@.@
.@.@.@.@@@
@.@@@.@@@@
.@@@@@@@@.
@.@.@@@.@.
"""

FULL = "@@@\n@@@\n@@@\n"


def test_parse_grid_positions():
    assert parse_grid(".@\n@.\n") == frozenset({(0, 1), (1, 0)})


def test_neighbours_symmetric():
    adjacency = neighbours(parse_grid(EXAMPLE))
    for pos, adjacent in adjacency.items():
        assert pos not in adjacent
        for other in adjacent:
            assert pos in adjacency[other]


def test_single_roll_accessible():
    assert accessible_rolls(parse_grid("@")) == {(0, 0)}


def test_full_block_only_corners_accessible():
    assert accessible_rolls(parse_grid(FULL)) == {(0, 0), (0, 2), (2, 0), (2, 2)}


def test_full_block_all_removable():
    grid = parse_grid(FULL)
    assert removable_rolls(grid) == set(grid)


def test_accessible_within_removable_within_grid():
    grid = parse_grid(EXAMPLE)
    accessible = accessible_rolls(grid)
    removable = removable_rolls(grid)
    assert accessible <= removable <= set(grid)


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(FULL)
    assert main(["2", str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(part2(FULL))