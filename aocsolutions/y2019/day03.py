"""Day 3 (2019): crossed wires on a grid."""

_DIRECTIONS = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}


def _wires(text):
    lines = [line.strip() for line in text.splitlines()]
    if len(lines) < 2:
        raise ValueError("expected two wire paths")
    return lines[0], lines[1]


def _trace(path):
    """Yield (x, y, step) for every point the wire passes through."""
    x = y = step = 0
    for instruction in path.split(","):
        direction, count = instruction[:1], int(instruction[1:])
        try:
            dx, dy = _DIRECTIONS[direction]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None
        for _ in range(count):
            x += dx
            y += dy
            step += 1
            yield x, y, step


def part1(text):
    """Return the Manhattan distance of the intersection closest to the origin."""
    first, second = _wires(text)
    visited = {(x, y) for x, y, _ in _trace(first)}
    distances = [
        abs(x) + abs(y)
        for x, y, _ in _trace(second)
        if (x, y) in visited and (x, y) != (0, 0)
    ]
    if not distances:
        raise ValueError("the wires never cross")
    return min(distances)


def part2(text):
    """Return the fewest combined steps to reach an intersection."""
    first, second = _wires(text)
    first_steps = {}
    for x, y, step in _trace(first):
        first_steps[x, y] = step
    combined = {}
    for x, y, step in _trace(second):
        if (x, y) in first_steps:
            combined[x, y] = combined.get((x, y), first_steps[x, y]) + step
    if not combined:
        raise ValueError("the wires never cross")
    return min(combined.values())