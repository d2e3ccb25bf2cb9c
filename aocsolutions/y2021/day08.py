"""Day 8 (2021): decode scrambled seven-segment displays."""

from collections import deque

_UNIQUE_LENGTHS = frozenset({2, 3, 4, 7})


def _identify(segment, known):
    one = len(known[1] & segment) if 1 in known else None
    four = len(known[4] & segment) if 4 in known else None
    match (len(segment), one, four):
        case (2, _, _):
            return 1
        case (3, _, _):
            return 7
        case (4, _, _):
            return 4
        case (7, _, _):
            return 8
        case (6, 2, 4):
            return 9
        case (6, 2, 3):
            return 0
        case (6, 1, 3):
            return 6
        case (5, 2, 3):
            return 3
        case (5, 1, 3):
            return 5
        case (5, 1, 2):
            return 2
    return None


def decode_entry(patterns, outputs):
    """Work out the digit wiring from ``patterns`` and return the output number."""
    known = {}
    queue = deque(frozenset(pattern) for pattern in patterns)
    stalled = 0
    while queue:
        segment = queue.popleft()
        digit = _identify(segment, known)
        if digit is None:
            queue.append(segment)
            stalled += 1
            if stalled >= len(queue):
                raise ValueError("patterns cannot be resolved to digits")
        else:
            known[digit] = segment
            stalled = 0
    lookup = {segment: digit for digit, segment in known.items()}
    number = 0
    for output in outputs:
        digit = lookup.get(frozenset(output))
        if digit is not None:
            number = number * 10 + digit
    return number


def _entries(text):
    for line in text.splitlines():
        left, sep, right = line.partition("|")
        if not sep:
            raise ValueError(f"invalid entry: {line!r}")
        yield left.split(), right.split()


def part1(text):
    """Count output digits that are 1, 4, 7 or 8."""
    return sum(
        1
        for _, outputs in _entries(text)
        for output in outputs
        if len(output) in _UNIQUE_LENGTHS
    )


def part2(text):
    """Return the sum of all decoded output values."""
    return sum(decode_entry(patterns, outputs) for patterns, outputs in _entries(text))