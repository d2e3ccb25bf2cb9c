"""Day 5 (2021): overlapping hydrothermal vent lines."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum


class LineType(Enum):
    """The orientation of a vent line."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    FORWARD_DIAGONAL = "forward diagonal"
    BACKWARD_DIAGONAL = "backward diagonal"


_DIAGONALS = (LineType.FORWARD_DIAGONAL, LineType.BACKWARD_DIAGONAL)


@dataclass(frozen=True)
class Line:
    """A vent line between two (x, y) points, both ends included."""

    start: tuple
    end: tuple

    def line_type(self):
        """Classify the line by its orientation."""
        (x1, y1), (x2, y2) = sorted((self.start, self.end))
        if x1 == x2:
            return LineType.VERTICAL
        if y1 == y2:
            return LineType.HORIZONTAL
        if y1 < y2:
            return LineType.FORWARD_DIAGONAL
        return LineType.BACKWARD_DIAGONAL

    def _points(self):
        kind = self.line_type()
        (x1, y1), (x2, y2) = sorted((self.start, self.end))
        if kind is LineType.HORIZONTAL:
            return [(x, y1) for x in range(x1, x2 + 1)]
        if kind is LineType.VERTICAL:
            return [(x1, y) for y in range(min(y1, y2), max(y1, y2) + 1)]
        sign = 1 if kind is LineType.FORWARD_DIAGONAL else -1
        return [(x1 + i, y1 + sign * i) for i in range(x2 - x1 + 1)]


@dataclass
class SeaBed:
    """How many vent lines cover each point of the sea floor."""

    counts: Counter = field(default_factory=Counter)

    def plot_line(self, line, diagonals):
        """Add a line; diagonal lines are only drawn when ``diagonals`` is true."""
        if line.line_type() in _DIAGONALS and not diagonals:
            return
        self.counts.update(line._points())

    def count_danger(self):
        """Return how many points are covered by at least two lines."""
        return sum(1 for count in self.counts.values() if count >= 2)


def _point(text):
    x, sep, y = text.partition(",")
    if not sep:
        raise ValueError(f"invalid point: {text!r}")
    return int(x), int(y)


def _lines(text):
    for row in text.splitlines():
        left, sep, right = row.partition(" -> ")
        if not sep:
            raise ValueError(f"invalid line: {row!r}")
        a, b = _point(left), _point(right)
        if a == b:
            raise ValueError("Invalid line")
        yield Line(min(a, b), max(a, b))


def _danger(text, diagonals):
    bed = SeaBed()
    for line in _lines(text):
        bed.plot_line(line, diagonals)
    return bed.count_danger()


def part1(text):
    """Count overlap points of horizontal and vertical lines."""
    return _danger(text, False)


def part2(text):
    """Count overlap points including diagonal lines."""
    return _danger(text, True)