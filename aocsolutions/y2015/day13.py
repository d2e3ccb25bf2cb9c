"""Day 13: seat guests around a round table for the most happiness."""

import re
from itertools import permutations

_PATTERN = re.compile(
    r"(\w+) would (gain|lose) (\d+) happiness units by sitting next to (\w+)."
)


def _opinions(text):
    opinions = {}
    for line in text.splitlines():
        match = _PATTERN.search(line)
        if match is None:
            raise ValueError(f"invalid opinion: {line!r}")
        person, direction, amount, target = match.groups()
        sign = 1 if direction == "gain" else -1
        opinions[person, target] = sign * int(amount)
    return opinions


def _happiness(order, opinions):
    total = 0
    for left, right in zip(order, order[1:] + order[:1]):
        total += opinions.get((left, right), 0) + opinions.get((right, left), 0)
    return total


def _solve(text, include_self):
    opinions = _opinions(text)
    people = sorted({person for person, _ in opinions})
    if include_self:
        people.append("self")
    if not people:
        return 0
    first, rest = people[0], people[1:]
    # Rotations of a round table are equivalent, so the first seat is fixed.
    return max(
        _happiness((first, *order), opinions) for order in permutations(rest)
    )


def part1(text):
    """Return the best total change in happiness."""
    return _solve(text, False)


def part2(text):
    """Return the best total with a neutral extra guest seated too."""
    return _solve(text, True)