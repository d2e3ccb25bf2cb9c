"""Day 2: wrapping paper and ribbon for presents."""


def _boxes(text):
    for line in text.splitlines():
        length, width, height = (int(part) for part in line.split("x"))
        yield length, width, height


def part1(text):
    """Return the total square feet of wrapping paper needed."""
    total = 0
    for length, width, height in _boxes(text):
        sides = (length * width, width * height, height * length)
        total += 2 * sum(sides) + min(sides)
    return total


def part2(text):
    """Return the total feet of ribbon needed."""
    total = 0
    for length, width, height in _boxes(text):
        smallest, middle, _ = sorted((length, width, height))
        total += length * width * height + 2 * smallest + 2 * middle
    return total