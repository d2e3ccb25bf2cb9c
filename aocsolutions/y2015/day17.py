"""Day 17: fill containers with exactly 150 litres of eggnog."""

from itertools import combinations

_EGGNOG = 150


def combinations_by_size(containers, target):
    """Return, for each count k, how many k-container sets hold ``target``."""
    containers = list(containers)
    return [
        sum(1 for chosen in combinations(containers, size) if sum(chosen) == target)
        for size in range(len(containers) + 1)
    ]


def _containers(text):
    return [int(line) for line in text.splitlines()]


def part1(text):
    """Return how many combinations hold exactly 150 litres."""
    return sum(combinations_by_size(_containers(text), _EGGNOG))


def part2(text):
    """Return how many combinations use the fewest containers."""
    counts = combinations_by_size(_containers(text), _EGGNOG)
    try:
        return next(count for count in counts if count)
    except StopIteration:
        raise ValueError("no combination holds the eggnog") from None