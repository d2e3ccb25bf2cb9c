"""Day 3 (2020): count trees hit while tobogganing down a repeating slope."""

from math import prod

_SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def _rows(text):
    return [[char == "#" for char in line] for line in text.splitlines()]


def _trees(rows, right, down):
    return sum(
        1 for i, row in enumerate(rows[::down]) if row[(i * right) % len(row)]
    )


def part1(text):
    """Return the trees hit going right 3, down 1."""
    return _trees(_rows(text), 3, 1)


def part2(text):
    """Return the product of the trees hit on each of the five slopes."""
    rows = _rows(text)
    return prod(_trees(rows, right, down) for right, down in _SLOPES)