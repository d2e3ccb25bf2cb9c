"""Day 13 (2021): fold transparent paper to reveal a code."""

from dataclasses import dataclass, field
from enum import Enum


class FoldAxis(Enum):
    """The axis a fold runs along."""

    X = "x"
    Y = "y"


@dataclass(frozen=True)
class FoldCommand:
    """A single fold instruction."""

    coord: int
    axis: FoldAxis


@dataclass
class FoldablePaper:
    """A sheet of the given size with a set of marked (x, y) points."""

    width: int
    height: int
    marked: set = field(default_factory=set)

    def fold(self, command):
        """Fold the sheet in half along the command's axis."""
        if command.axis is FoldAxis.X:
            size = self.width // 2
            self.marked = {
                (self._mirror(x, self.width, size), y)
                for x, y in self.marked
                if self._mirror(x, self.width, size) is not None
            }
            self.width = size
        else:
            size = self.height // 2
            self.marked = {
                (x, self._mirror(y, self.height, size))
                for x, y in self.marked
                if self._mirror(y, self.height, size) is not None
            }
            self.height = size

    @staticmethod
    def _mirror(value, length, size):
        if value < size:
            return value
        if value >= length - size:
            return length - 1 - value
        return None

    def count_marked(self):
        """Return how many points are marked."""
        return len(self.marked)

    def render(self):
        """Return the sheet as lines of '#' and ' ', each ending in a newline."""
        return "".join(
            "".join("#" if (x, y) in self.marked else " " for x in range(self.width))
            + "\n"
            for y in range(self.height)
        )


def _parse(text):
    dots, sep, folds = text.partition("\n\n")
    if not sep:
        raise ValueError("expected dots and folds separated by a blank line")
    points = set()
    for line in dots.splitlines():
        x, comma, y = line.partition(",")
        if not comma:
            raise ValueError(f"invalid dot: {line!r}")
        points.add((int(x), int(y)))
    width = max((x for x, _ in points), default=0) + 1
    height = max((y for _, y in points), default=0) + 1
    commands = []
    prefix = "fold along "
    for line in folds.splitlines():
        if not line.startswith(prefix):
            raise ValueError(f"invalid fold: {line!r}")
        axis, eq, coord = line[len(prefix) :].partition("=")
        if not eq:
            raise ValueError(f"invalid fold: {line!r}")
        try:
            fold_axis = FoldAxis(axis)
        except ValueError:
            raise ValueError("Unexpected fold axis") from None
        commands.append(FoldCommand(int(coord), fold_axis))
    return FoldablePaper(width, height, points), commands


def part1(text):
    """Return how many dots are visible after the first fold."""
    paper, commands = _parse(text)
    paper.fold(commands[0])
    return paper.count_marked()


def part2(text):
    """Return the rendered sheet after every fold."""
    paper, commands = _parse(text)
    for command in commands:
        paper.fold(command)
    return paper.render()