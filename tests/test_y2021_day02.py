import pytest

from aocsolutions.y2021.day02 import part1, part2

EXAMPLE = """\
forward 5
down 5
forward 8
up 3
down 8
forward 2
"""


def test_part1_example():
    assert part1(EXAMPLE) == 150


def test_part2_example():
    assert part2(EXAMPLE) == 900


def test_unknown_direction_part1():
    with pytest.raises(ValueError):
        part1("backward 3\n")


def test_unknown_direction_part2():
    with pytest.raises(ValueError):
        part2("sideways 1\n")