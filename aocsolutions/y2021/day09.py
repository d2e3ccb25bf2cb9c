"""Day 9 (2021): low points and basins on a smoke height map."""

from dataclasses import dataclass
from math import prod

_RIM = 9


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of heights from 0 to 9."""

    rows: tuple

    @property
    def width(self):
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self):
        return len(self.rows)

    @classmethod
    def parse(cls, text):
        """Parse lines of digits into a height map."""
        rows = []
        for line in text.splitlines():
            if not line.isdecimal():
                raise ValueError(f"invalid height row: {line!r}")
            rows.append(tuple(int(char) for char in line))
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("height rows differ in length")
        return cls(tuple(rows))

    def _neighbours(self, x, y):
        for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield nx, ny

    def low_points(self):
        """Return the (x, y) points lower than every adjacent point, row by row."""
        return [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, value in enumerate(row)
            if all(self.rows[ny][nx] > value for nx, ny in self._neighbours(x, y))
        ]

    def basin(self, x, y):
        """Return the set of points reachable from (x, y) without crossing a 9."""
        inside = set()
        stack = [(x, y)]
        while stack:
            point = stack.pop()
            if point in inside:
                continue
            px, py = point
            if self.rows[py][px] == _RIM:
                continue
            inside.add(point)
            stack.extend(self._neighbours(px, py))
        return inside


def part1(text):
    """Return the sum of the risk levels of all low points."""
    heights = HeightMap.parse(text)
    return sum(heights.rows[y][x] + 1 for x, y in heights.low_points())


def part2(text):
    """Return the product of the sizes of the three largest basins."""
    heights = HeightMap.parse(text)
    sizes = sorted(
        (len(heights.basin(x, y)) for x, y in heights.low_points()), reverse=True
    )
    return prod((sizes + [0, 0, 0])[:3])