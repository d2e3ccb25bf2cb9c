import pytest

from aocsolutions.y2019.day03 import part1, part2

EXAMPLE = "R75,D30,R83,U83,L12,D49,R71,U7,L72\nU62,R66,U55,R34,D71,R55,D58,R83\n"
SMALL = "R8,U5,L5,D3\nU7,R6,D4,L4\n"
LARGE = (
    "R98,U47,R26,D63,R33,U87,L62,D20,R33,U53,R51\n"
    "U98,R91,D20,R16,D67,R40,U7,R15,U6,R7\n"
)


def test_part1_example():
    assert part1(EXAMPLE) == 159


def test_part2_example():
    assert part2(EXAMPLE) == 610


@pytest.mark.parametrize("text, expected", [(SMALL, 6), (LARGE, 135)])
def test_part1_more_examples(text, expected):
    assert part1(text) == expected


@pytest.mark.parametrize("text, expected", [(SMALL, 30), (LARGE, 410)])
def test_part2_more_examples(text, expected):
    assert part2(text) == expected


def test_parallel_wires_raise():
    with pytest.raises(ValueError):
        part1("R5\nU1,R5\n")


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        part1("X5\nR5\n")