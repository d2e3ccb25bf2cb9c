"""Day 10: the look-and-say sequence."""

from itertools import groupby


def _digits(text):
    if not text.isdecimal():
        raise ValueError(f"not a digit sequence: {text!r}")
    return [int(char) for char in text]


def look_and_say(digits, rounds):
    """Apply ``rounds`` look-and-say steps to ``digits`` and return the length.

    Each run of equal elements becomes two elements: the run length and the value.
    """
    sequence = _digits(digits) if isinstance(digits, str) else list(digits)
    for _ in range(rounds):
        sequence = [
            item
            for value, run in groupby(sequence)
            for item in (sum(1 for _ in run), value)
        ]
    return len(sequence)


def part1(text):
    """Return the sequence length after 40 rounds."""
    return look_and_say(text.strip(), 40)


def part2(text):
    """Return the sequence length after 50 rounds."""
    return look_and_say(text.strip(), 50)