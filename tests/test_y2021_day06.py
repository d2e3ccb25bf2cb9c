import pytest

from aocsolutions.y2021.day06 import fish_count, part1, part2

EXAMPLE = "3,4,3,1,2\n"


def test_part1_example():
    assert part1(EXAMPLE) == 5934


def test_part2_example():
    assert part2(EXAMPLE) == 26984457539


def test_zero_days_keeps_initial_count():
    assert fish_count(EXAMPLE, 0) == 5


def test_population_never_shrinks():
    counts = [fish_count(EXAMPLE, days) for days in range(30)]
    assert counts == sorted(counts)


def test_invalid_timer_rejected():
    with pytest.raises(ValueError):
        fish_count("9", 1)