import pytest

from aocsolutions.y2015.day01 import part1, part2


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("(())", 0),
        ("()()", 0),
        ("(((", 3),
        ("(()(()(", 3),
        ("))(((((", 3),
        ("())", -1),
        (")())())", -3),
    ],
)
def test_part1_examples(text, expected):
    assert part1(text) == expected


def test_part1_ignores_other_characters():
    assert part1("((\n") == 2


@pytest.mark.parametrize(("text", "expected"), [(")", 1), ("()())", 5)])
def test_part2_examples(text, expected):
    assert part2(text) == expected


def test_part2_never_reaches_basement():
    assert part2("(((") == 0