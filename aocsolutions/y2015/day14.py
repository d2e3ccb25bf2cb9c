"""Day 14: a race of reindeer that alternate flying and resting."""

import re
from dataclasses import dataclass, field

_PATTERN = re.compile(
    r"(\w+) can fly (\d+) km/s for (\d+) seconds, but then must rest for (\d+) seconds."
)
RACE_SECONDS = 2503


@dataclass
class Reindeer:
    """A reindeer's abilities and its progress in the race."""

    name: str
    speed: int
    fly_time: int
    rest_time: int
    position: int = 0
    points: int = 0
    flying: bool = True
    remaining: int = field(default=-1)

    def __post_init__(self):
        if self.remaining < 0:
            self.remaining = self.fly_time

    def _advance(self):
        if self.flying:
            self.position += self.speed
        if self.remaining == 1:
            self.remaining = self.rest_time if self.flying else self.fly_time
            self.flying = not self.flying
        else:
            self.remaining -= 1


def parse_reindeer(text):
    """Return the reindeer described by ``text``, one per line."""
    herd = []
    for line in text.splitlines():
        match = _PATTERN.search(line)
        if match is None:
            raise ValueError(f"invalid reindeer: {line!r}")
        name, speed, fly_time, rest_time = match.groups()
        herd.append(Reindeer(name, int(speed), int(fly_time), int(rest_time)))
    return herd


def race(reindeer, seconds):
    """Run the race for ``seconds``, updating positions and points in place.

    Each second every leader gets a point; the list ends sorted by position.
    """
    for _ in range(seconds):
        for deer in reindeer:
            deer._advance()
        reindeer.sort(key=lambda deer: deer.position)
        lead = max(deer.position for deer in reindeer)
        for deer in reindeer:
            if deer.position == lead:
                deer.points += 1


def part1(text):
    """Return the distance of the winning reindeer."""
    herd = parse_reindeer(text)
    race(herd, RACE_SECONDS)
    return max(deer.position for deer in herd)


def part2(text):
    """Return the points of the winning reindeer."""
    herd = parse_reindeer(text)
    race(herd, RACE_SECONDS)
    return max(deer.points for deer in herd)