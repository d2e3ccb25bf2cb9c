"""Day 1 (2016): walk a taxicab grid following turn-and-walk instructions."""

# North, east, south, west.
_HEADINGS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _moves(text):
    for token in text.strip().split(", "):
        turn, distance = token[:1], int(token[1:])
        yield (1 if turn == "R" else -1), distance


def part1(text):
    """Return the taxicab distance to the final position."""
    x = y = heading = 0
    for turn, distance in _moves(text):
        heading = (heading + turn) % 4
        dx, dy = _HEADINGS[heading]
        x += dx * distance
        y += dy * distance
    return abs(x) + abs(y)


def part2(text):
    """Return the distance to the first location visited twice."""
    x = y = heading = 0
    visited = set()
    for turn, distance in _moves(text):
        heading = (heading + turn) % 4
        dx, dy = _HEADINGS[heading]
        for _ in range(distance):
            x += dx
            y += dy
            if (x, y) in visited:
                return abs(x) + abs(y)
            visited.add((x, y))
    raise ValueError("no location is visited twice")