"""Day 16: identify which aunt Sue sent the gift."""

import operator

_READINGS = {
    "children": (3, operator.eq),
    "cats": (7, operator.gt),
    "samoyeds": (2, operator.eq),
    "pomeranians": (3, operator.eq),
    "akitas": (0, operator.eq),
    "vizslas": (0, operator.eq),
    "goldfish": (5, operator.lt),
    "trees": (3, operator.gt),
    "cars": (2, operator.eq),
    "perfumes": (1, operator.lt),
}


def _sues(text):
    for line in text.splitlines():
        label, sep, rest = line.partition(": ")
        if not sep or not label.startswith("Sue "):
            raise ValueError(f"invalid line: {line!r}")
        items = {}
        for pair in rest.split(", "):
            name, sep, count = pair.partition(": ")
            if not sep:
                raise ValueError(f"invalid item: {pair!r}")
            items[name] = int(count)
        yield int(label[len("Sue ") :]), items


def _find(text, use_ranges):
    for number, items in _sues(text):
        if all(
            (compare if use_ranges else operator.eq)(count, _READINGS[item][0])
            for item, count in items.items()
            if item in _READINGS
            for compare in (_READINGS[item][1],)
        ):
            return number
    raise ValueError("no Sue matches the readings")


def part1(text):
    """Return the number of the Sue whose items match exactly."""
    return _find(text, False)


def part2(text):
    """Return the number of the Sue matching with range readings."""
    return _find(text, True)