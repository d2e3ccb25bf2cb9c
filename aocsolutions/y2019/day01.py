"""Day 1 (2019): fuel required to launch modules."""


def need_fuel(mass):
    """Return the fuel for a mass: a third, rounded down, minus two, never negative."""
    return max(mass // 3 - 2, 0)


def need_fuel_recursive(mass):
    """Return the fuel for a mass including the fuel for that fuel."""
    total = 0
    fuel = need_fuel(mass)
    while fuel > 0:
        total += fuel
        fuel = need_fuel(fuel)
    return total


def _masses(text):
    return (int(line) for line in text.splitlines())


def part1(text):
    """Return the total fuel for all modules."""
    return sum(map(need_fuel, _masses(text)))


def part2(text):
    """Return the total fuel for all modules, counting fuel's own mass."""
    return sum(map(need_fuel_recursive, _masses(text)))