import pytest

from aocsolutions.y2020.day02 import PasswordEntry, part1, part2

EXAMPLE = """\
1-3 a: abcde
1-3 b: cdefg
2-9 c: ccccccccc
"""


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_example():
    assert part2(EXAMPLE) == 1


def test_parse_fields():
    entry = PasswordEntry.parse("2-9 c: ccccccccc")
    assert entry == PasswordEntry(2, 9, "c", "ccccccccc")


@pytest.mark.parametrize(
    "line, count_ok, position_ok",
    [
        ("1-3 a: abcde", True, True),
        ("1-3 b: cdefg", False, False),
        ("2-9 c: ccccccccc", True, False),
    ],
)
def test_policies(line, count_ok, position_ok):
    entry = PasswordEntry.parse(line)
    assert entry.is_valid_count() is count_ok
    assert entry.is_valid_position() is position_ok


def test_parse_rejects_malformed_line():
    with pytest.raises(ValueError):
        PasswordEntry.parse("1-3 ab: abcde")


def test_position_out_of_range():
    with pytest.raises(ValueError):
        PasswordEntry.parse("1-9 a: abc").is_valid_position()