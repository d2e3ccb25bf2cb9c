"""Day 11 (2021): flashing dumbo octopuses."""

from dataclasses import dataclass


@dataclass
class OctopusGrid:
    """Energy levels of a grid of octopuses, stored row by row."""

    levels: list

    @property
    def width(self):
        return len(self.levels[0]) if self.levels else 0

    @property
    def height(self):
        return len(self.levels)

    @classmethod
    def parse(cls, text):
        """Parse lines of digits into a grid."""
        levels = []
        for line in text.splitlines():
            if not line.isdecimal():
                raise ValueError(f"invalid energy row: {line!r}")
            levels.append([int(char) for char in line])
        if any(len(row) != len(levels[0]) for row in levels):
            raise ValueError("energy rows differ in length")
        return cls(levels)

    def _around(self, x, y):
        for ny in range(max(y - 1, 0), min(y + 1, self.height - 1) + 1):
            for nx in range(max(x - 1, 0), min(x + 1, self.width - 1) + 1):
                yield nx, ny

    def step(self):
        """Advance one step and return how many octopuses flashed."""
        pending = []
        for y, row in enumerate(self.levels):
            for x in range(len(row)):
                row[x] += 1
                if row[x] > 9:
                    pending.append((x, y))
        flashed = set()
        while pending:
            point = pending.pop()
            if point in flashed:
                continue
            flashed.add(point)
            for nx, ny in self._around(*point):
                self.levels[ny][nx] += 1
                if self.levels[ny][nx] > 9 and (nx, ny) not in flashed:
                    pending.append((nx, ny))
        for row in self.levels:
            for x, value in enumerate(row):
                if value >= 10:
                    row[x] = 0
        return len(flashed)


def part1(text):
    """Return the number of flashes in the first 100 steps."""
    grid = OctopusGrid.parse(text)
    return sum(grid.step() for _ in range(100))


def part2(text):
    """Return the first step on which every octopus flashes."""
    grid = OctopusGrid.parse(text)
    total = grid.width * grid.height
    step = 1
    while grid.step() != total:
        step += 1
    return step