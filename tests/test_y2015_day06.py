import pytest

from aocsolutions.y2015.day06 import part1, part2


def test_part1_turn_on_everything():
    assert part1("turn on 0,0 through 999,999") == 1_000_000


def test_part1_toggle_first_row():
    assert part1("toggle 0,0 through 999,0") == 1000


def test_part1_turn_off_middle():
    text = "turn on 0,0 through 999,999\nturn off 499,499 through 500,500"
    assert part1(text) == 1_000_000 - 4


def test_part1_toggle_twice_restores():
    text = "toggle 0,0 through 9,9\ntoggle 0,0 through 9,9"
    assert part1(text) == 0


def test_part2_turn_on_single():
    assert part2("turn on 0,0 through 0,0") == 1


def test_part2_toggle_everything():
    assert part2("toggle 0,0 through 999,999") == 2_000_000


def test_part2_brightness_never_negative():
    assert part2("turn off 0,0 through 9,9\nturn on 0,0 through 0,0") == 1


def test_invalid_instruction_raises():
    with pytest.raises(ValueError):
        part1("flip 0,0 through 1,1")