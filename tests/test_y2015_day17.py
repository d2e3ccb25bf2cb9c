import pytest

from aocsolutions.y2015.day17 import combinations_by_size, part1, part2


def test_example():
    counts = combinations_by_size([20, 15, 10, 5, 5], 25)
    assert sum(counts) == 4
    assert next(c for c in counts if c) == 3


def test_full_set_is_counted():
    assert combinations_by_size([10, 15], 25) == [0, 0, 1]


def test_parts_with_150_litres():
    text = "100\n50\n150\n"
    assert part1(text) == 2
    assert part2(text) == 1


def test_part2_without_solution_raises():
    with pytest.raises(ValueError):
        part2("10\n20\n")