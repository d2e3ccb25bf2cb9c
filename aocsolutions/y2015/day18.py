"""Day 18: an animated grid of lights following Game of Life rules."""

from collections import Counter

_NEIGHBORS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)
_STEPS = 100


def _parse(text):
    rows = text.splitlines()
    height = len(rows)
    width = len(rows[0]) if rows else 0
    lit = {
        (x, y)
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char == "#"
    }
    return width, height, lit


def animate(text, steps, stuck_corners):
    """Run ``steps`` animation steps and return how many lights are on.

    With ``stuck_corners`` the four corner lights are forced on after each step.
    """
    width, height, lit = _parse(text)
    corners = (
        {(0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1)}
        if width and height
        else set()
    )
    for _ in range(steps):
        counts = Counter(
            (x + dx, y + dy) for x, y in lit for dx, dy in _NEIGHBORS
        )
        lit = {
            (x, y)
            for (x, y), count in counts.items()
            if 0 <= x < width
            and 0 <= y < height
            and (count == 3 or (count == 2 and (x, y) in lit))
        }
        if stuck_corners:
            lit |= corners
    return len(lit)


def part1(text):
    """Return how many lights are on after 100 steps."""
    return animate(text, _STEPS, False)


def part2(text):
    """Return how many lights are on after 100 steps with stuck corners."""
    return animate(text, _STEPS, True)