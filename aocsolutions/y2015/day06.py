"""Day 6: a 1000x1000 grid of lights driven by instructions."""

import re
from dataclasses import dataclass
from enum import Enum

_SIZE = 1000
_PATTERN = re.compile(r"(turn on|turn off|toggle) (\d+),(\d+) through (\d+),(\d+)")


class _Op(Enum):
    TURN_ON = "turn on"
    TURN_OFF = "turn off"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class _Instruction:
    op: _Op
    x0: int
    y0: int
    x1: int  # exclusive
    y1: int  # exclusive


def _instructions(text):
    for line in text.splitlines():
        match = _PATTERN.search(line)
        if match is None:
            raise ValueError(f"invalid instruction: {line!r}")
        op, x0, y0, x1, y1 = match.groups()
        yield _Instruction(_Op(op), int(x0), int(y0), int(x1) + 1, int(y1) + 1)


def part1(text):
    """Return how many lights are lit after on/off/toggle instructions."""
    rows = [0] * _SIZE
    for ins in _instructions(text):
        mask = ((1 << (ins.x1 - ins.x0)) - 1) << ins.x0
        for y in range(ins.y0, ins.y1):
            if ins.op is _Op.TURN_ON:
                rows[y] |= mask
            elif ins.op is _Op.TURN_OFF:
                rows[y] &= ~mask
            else:
                rows[y] ^= mask
    return sum(bin(row).count("1") for row in rows)


_DELTAS = {_Op.TURN_ON: 1, _Op.TURN_OFF: -1, _Op.TOGGLE: 2}


def part2(text):
    """Return the total brightness after brightness instructions."""
    grid = [[0] * _SIZE for _ in range(_SIZE)]
    for ins in _instructions(text):
        delta = _DELTAS[ins.op]
        for row in grid[ins.y0 : ins.y1]:
            row[ins.x0 : ins.x1] = [max(v + delta, 0) for v in row[ins.x0 : ins.x1]]
    return sum(map(sum, grid))