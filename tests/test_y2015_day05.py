import pytest

from aocsolutions.y2015.day05 import is_nice, is_nice_v2, part1, part2

EXAMPLE1 = "ugknbfddgicrmopn\naaa\njchzalrnumimnmhp\nhaegwjzuvuyypxyu\ndvszwmarrgswjxmb\n"
EXAMPLE2 = "qjhvhtzxzqqjkmpb\nxxyxx\nuurcxstgmygtbstg\nieodomkazucvgmuy\n"


def test_part1_example():
    assert part1(EXAMPLE1) == 2


def test_part2_example():
    assert part2(EXAMPLE2) == 2


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("ugknbfddgicrmopn", True),
        ("aaa", True),
        ("jchzalrnumimnmhp", False),
        ("haegwjzuvuyypxyu", False),
        ("dvszwmarrgswjxmb", False),
    ],
)
def test_is_nice(word, expected):
    assert is_nice(word) is expected


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("qjhvhtzxzqqjkmpb", True),
        ("xxyxx", True),
        ("uurcxstgmygtbstg", False),
        ("ieodomkazucvgmuy", False),
        ("aaa", False),
    ],
)
def test_is_nice_v2(word, expected):
    assert is_nice_v2(word) is expected