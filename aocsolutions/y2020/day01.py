"""Day 1 (2020): find expense entries that sum to 2020."""

from itertools import product
from math import prod

_TARGET = 2020


def _entries(text):
    return [int(line) for line in text.splitlines()]


def _find(text, count):
    entries = _entries(text)
    for chosen in product(entries, repeat=count):
        if sum(chosen) == _TARGET:
            return prod(chosen)
    raise ValueError("no answer found")


def part1(text):
    """Return the product of the two entries that sum to 2020."""
    return _find(text, 2)


def part2(text):
    """Return the product of the three entries that sum to 2020."""
    return _find(text, 3)