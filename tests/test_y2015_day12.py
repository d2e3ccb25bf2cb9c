import pytest

from aocsolutions.y2015.day12 import part1, part2, sum_numbers


@pytest.mark.parametrize(
    "document, expected",
    [
        ("[1,2,3]", 6),
        ('{"a":2,"b":4}', 6),
        ("[[[3]]]", 3),
        ('{"a":{"b":4},"c":-1}', 3),
        ('{"a":[-1,1]}', 0),
        ('[-1,{"a":1}]', 0),
        ("[]", 0),
        ("{}", 0),
    ],
)
def test_part1(document, expected):
    assert part1(document) == expected


@pytest.mark.parametrize(
    "document, expected",
    [
        ("[1,2,3]", 6),
        ('[1,{"c":"red","b":2},3]', 4),
        ('{"d":"red","e":[1,2,3,4],"f":5}', 0),
        ('[1,"red",5]', 6),
    ],
)
def test_part2(document, expected):
    assert part2(document) == expected


def test_booleans_and_null_count_zero():
    assert sum_numbers([True, False, None, "7", 2], False) == 2


def test_red_key_does_not_exclude():
    assert sum_numbers({"red": 5}, True) == 5


def test_float_raises():
    with pytest.raises(ValueError):
        sum_numbers([1.5], False)


def test_invalid_json_raises():
    with pytest.raises(ValueError):
        part1("[1,")