import pytest

from aocsolutions.y2016.day01 import part1, part2


def test_part1_example():
    assert part1("R5, L5, R5, R3") == 12


@pytest.mark.parametrize("text, expected", [("R2, L3", 5), ("R2, R2, R2", 2)])
def test_part1_more_examples(text, expected):
    assert part1(text) == expected


def test_part2_example():
    assert part2("R8, R4, R4, R8") == 4


def test_part2_without_crossing_raises():
    with pytest.raises(ValueError):
        part2("R1")