"""Day 1: follow parentheses up and down the floors of a building."""


def part1(text):
    """Return the floor reached after following every instruction."""
    return text.count("(") - text.count(")")


def part2(text):
    """Return the 1-based position of the first step into the basement, or 0."""
    floor = 0
    for position, char in enumerate(text, start=1):
        if char == "(":
            floor += 1
        elif char == ")":
            floor -= 1
            if floor == -1:
                return position
    return 0