"""Day 2 (2021): pilot the submarine."""


def _commands(text):
    for line in text.splitlines():
        direction, _, amount = line.partition(" ")
        if direction not in ("forward", "up", "down"):
            raise ValueError(f"Unknown direction: {direction}")
        yield direction, int(amount)


def part1(text):
    """Return horizontal position times depth."""
    horizontal = depth = 0
    for direction, amount in _commands(text):
        if direction == "forward":
            horizontal += amount
        elif direction == "up":
            depth -= amount
        else:
            depth += amount
    return horizontal * depth


def part2(text):
    """Return horizontal position times depth when up and down change the aim."""
    horizontal = depth = aim = 0
    for direction, amount in _commands(text):
        if direction == "forward":
            horizontal += amount
            depth += amount * aim
        elif direction == "up":
            aim -= amount
        else:
            aim += amount
    return horizontal * depth