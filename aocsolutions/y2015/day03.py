"""Day 3: houses visited while delivering presents on an infinite grid."""

_MOVES = {">": (1, 0), "<": (-1, 0), "^": (0, 1), "v": (0, -1)}


def _step(position, char):
    dx, dy = _MOVES.get(char, (0, 0))
    return position[0] + dx, position[1] + dy


def part1(text):
    """Return how many houses receive at least one present."""
    position = (0, 0)
    seen = {position}
    for char in text.strip():
        position = _step(position, char)
        seen.add(position)
    return len(seen)


def part2(text):
    """Return how many houses are visited by Santa and the robot taking turns."""
    positions = [(0, 0), (0, 0)]
    seen = {(0, 0)}
    for index, char in enumerate(text.strip()):
        turn = index % 2
        positions[turn] = _step(positions[turn], char)
        seen.add(positions[turn])
    return len(seen)