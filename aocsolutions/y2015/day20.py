"""Day 20: find the first house that receives enough presents."""

_SEARCH_LIMIT = 999_999_999
_START = 1024


def _first_house(target, bound, fill):
    cap = min(max(bound, 1), _SEARCH_LIMIT)
    limit = min(_START, cap)
    while True:
        presents = fill(limit)
        for house in range(1, limit + 1):
            if presents[house] >= target:
                return house
        if limit >= cap:
            raise ValueError(f"no house below {cap + 1} gets {target} presents")
        limit = min(limit * 2, cap)


def _unlimited(limit):
    presents = [0] * (limit + 1)
    for elf in range(1, limit + 1):
        for house in range(elf, limit + 1, elf):
            presents[house] += elf * 10
    return presents


def _lazy(limit):
    presents = [0] * (limit + 1)
    for elf in range(1, limit + 1):
        for house in range(elf, min(limit, elf * 50) + 1, elf):
            presents[house] += elf * 11
    return presents


def part1(text):
    """Return the lowest house number that gets at least the given presents."""
    target = int(text.strip())
    return _first_house(target, target // 10 + 1, _unlimited)


def part2(text):
    """Return the lowest house number when each elf visits only 50 houses."""
    target = int(text.strip())
    return _first_house(target, target // 11 + 1, _lazy)