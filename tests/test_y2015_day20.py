import pytest

from aocsolutions.y2015.day20 import part1, part2


@pytest.mark.parametrize(
    "target, house",
    [("10", 1), ("30", 2), ("40", 3), ("70", 4), ("120", 6), ("130", 8), ("150", 8)],
)
def test_part1_small_targets(target, house):
    assert part1(target) == house


@pytest.mark.parametrize("target, house", [("11", 1), ("33", 2), ("77", 4)])
def test_part2_small_targets(target, house):
    assert part2(target) == house


def test_trailing_whitespace_is_ignored():
    assert part1("70\n") == 4


def test_non_positive_target_is_first_house():
    assert part1("0") == 1