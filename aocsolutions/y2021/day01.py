"""Day 1 (2021): count increases in sonar depth readings."""


def _depths(text):
    return [int(line) for line in text.splitlines()]


def _increases(values):
    return sum(1 for a, b in zip(values, values[1:]) if b > a)


def part1(text):
    """Return how many readings are larger than the one before."""
    return _increases(_depths(text))


def part2(text):
    """Return how many three-reading window sums are larger than the one before."""
    depths = _depths(text)
    windows = [sum(triple) for triple in zip(depths, depths[1:], depths[2:])]
    return _increases(windows)