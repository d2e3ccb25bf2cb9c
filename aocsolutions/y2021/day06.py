"""Day 6 (2021): simulate a growing lanternfish population."""

from collections import deque

_TIMERS = 9


def fish_count(text, days):
    """Return how many lanternfish exist after ``days`` days."""
    cohorts = deque([0] * _TIMERS)
    for token in text.strip().split(","):
        timer = int(token)
        if not 0 <= timer < _TIMERS:
            raise ValueError(f"invalid timer: {timer}")
        cohorts[timer] += 1
    for _ in range(days):
        cohorts.rotate(-1)
        cohorts[6] += cohorts[8]
    return sum(cohorts)


def part1(text):
    """Return the population after 80 days."""
    return fish_count(text, 80)


def part2(text):
    """Return the population after 256 days."""
    return fish_count(text, 256)