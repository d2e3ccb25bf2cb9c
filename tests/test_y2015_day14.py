import pytest

from aocsolutions.y2015.day14 import parse_reindeer, race

EXAMPLE = """\
Comet can fly 14 km/s for 10 seconds, but then must rest for 127 seconds.
Dancer can fly 16 km/s for 11 seconds, but then must rest for 162 seconds.
"""


def _by_name(herd):
    return {deer.name: deer for deer in herd}


def test_example_race():
    herd = parse_reindeer(EXAMPLE)
    race(herd, 1000)
    deer = _by_name(herd)
    assert deer["Dancer"].position == 1056
    assert deer["Comet"].position == 1120
    assert deer["Dancer"].points == 689
    assert deer["Comet"].points == 312


def test_first_second():
    herd = parse_reindeer(EXAMPLE)
    race(herd, 1)
    deer = _by_name(herd)
    assert deer["Comet"].position == 14
    assert deer["Dancer"].position == 16
    assert deer["Dancer"].points == 1
    assert deer["Comet"].points == 0


def test_rest_after_flying():
    herd = parse_reindeer(EXAMPLE)
    race(herd, 20)
    assert _by_name(herd)["Comet"].position == 140


def test_parse_values():
    comet = parse_reindeer(EXAMPLE)[0]
    assert (comet.name, comet.speed, comet.fly_time, comet.rest_time) == (
        "Comet",
        14,
        10,
        127,
    )


def test_invalid_line_raises():
    with pytest.raises(ValueError):
        parse_reindeer("Comet runs fast.\n")