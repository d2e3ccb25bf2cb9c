"""Day 4 (2019): count passwords meeting the digit rules in a range."""

from itertools import groupby


def _range(text):
    start, sep, end = text.strip().partition("-")
    if not sep:
        raise ValueError(f"invalid range: {text!r}")
    return range(int(start), int(end))


def is_valid(password, strict_adjacent):
    """Check the six-digit rules on ``password``.

    Digits never decrease and two adjacent digits match; with
    ``strict_adjacent`` the matching pair must not be part of a longer run.
    """
    digits = [(password // 10**power) % 10 for power in range(5, -1, -1)]
    if any(a > b for a, b in zip(digits, digits[1:])):
        return False
    runs = [sum(1 for _ in group) for _, group in groupby(digits)]
    if strict_adjacent:
        return 2 in runs
    return any(run >= 2 for run in runs)


def part1(text):
    """Return how many passwords in the range meet the basic rules."""
    return sum(1 for password in _range(text) if is_valid(password, False))


def part2(text):
    """Return how many passwords in the range meet the strict rules."""
    return sum(1 for password in _range(text) if is_valid(password, True))