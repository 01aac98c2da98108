import pytest

from aocsolve.day5 import is_fresh, main, merge_ranges, parse_database, part1, part2

EXAMPLE = "3-5\n10-14\n16-20\n12-18\n\n1\n5\n8\n11\n17\n32\n"


def test_parse_database():
    ranges, ingredients = parse_database(EXAMPLE)
    assert ranges == [(3, 5), (10, 14), (16, 20), (12, 18)]
    assert ingredients == [1, 5, 8, 11, 17, 32]


def test_parse_database_rejects_bad_range():
    with pytest.raises(ValueError):
        parse_database("35\n\n1\n")


def test_merge_example():
    assert merge_ranges([(3, 5), (10, 14), (16, 20), (12, 18)]) == [(3, 5), (10, 20)]


def test_merge_keeps_adjacent_separate():
    assert merge_ranges([(6, 8), (3, 5)]) == [(3, 5), (6, 8)]


def test_merge_contained():
    assert merge_ranges([(1, 10), (2, 3), (4, 9)]) == [(1, 10)]


def test_merge_empty():
    assert merge_ranges([]) == []


@pytest.mark.parametrize(
    "ingredient,expected",
    [(3, True), (5, True), (10, True), (20, True), (2, False), (6, False), (21, False)],
)
def test_is_fresh(ingredient, expected):
    merged = merge_ranges([(3, 5), (10, 14), (16, 20), (12, 18)])
    assert is_fresh(merged, ingredient) is expected


def test_example_part1():
    assert part1(EXAMPLE) == 3


def test_example_part2():
    assert part2(EXAMPLE) == 14


def test_part2_single_range_length():
    assert part2("7-7\n\n") == len(range(7, 8))


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main(["1", str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(part1(EXAMPLE))