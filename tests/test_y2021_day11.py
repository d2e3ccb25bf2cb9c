import pytest

from aocsolutions.y2021.day11 import OctopusGrid, part1, part2

EXAMPLE = """\
5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526
"""

SMALL = """\
11111
19991
19191
19991
11111
"""


def test_part1_example():
    assert part1(EXAMPLE) == 1656


def test_part2_example():
    assert part2(EXAMPLE) == 195


def test_small_grid_first_step():
    grid = OctopusGrid.parse(SMALL)
    assert grid.step() == 9
    assert grid.levels == [
        [3, 4, 5, 4, 3],
        [4, 0, 0, 0, 4],
        [5, 0, 0, 0, 5],
        [4, 0, 0, 0, 4],
        [3, 4, 5, 4, 3],
    ]


def test_small_grid_second_step():
    grid = OctopusGrid.parse(SMALL)
    grid.step()
    assert grid.step() == 0
    assert grid.levels[0] == [4, 5, 6, 5, 4]
    assert grid.levels[1] == [5, 1, 1, 1, 5]


def test_parse_rejects_bad_row():
    with pytest.raises(ValueError):
        OctopusGrid.parse("12\n3x\n")