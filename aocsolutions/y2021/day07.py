"""Day 7 (2021): align crab submarines for the least fuel."""


def _positions(text):
    positions = [int(token) for token in text.strip().split(",") if token]
    if not positions:
        raise ValueError("no crab positions given")
    return positions


def _min_fuel(text, cost):
    crabs = _positions(text)
    return min(
        sum(cost(abs(target - crab)) for crab in crabs)
        for target in range(min(crabs), max(crabs) + 1)
    )


def part1(text):
    """Return the least fuel when each step costs one."""
    return _min_fuel(text, lambda n: n)


def part2(text):
    """Return the least fuel when each further step costs one more."""
    return _min_fuel(text, lambda n: n * (n + 1) // 2)