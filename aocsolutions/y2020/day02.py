"""Day 2 (2020): check passwords against their corporate policies."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordEntry:
    """A password together with the policy it was set under."""

    low: int
    high: int
    char: str
    password: str

    @classmethod
    def parse(cls, line):
        """Parse a line such as ``1-3 a: abcde``."""
        low, sep1, rest = line.partition("-")
        high, sep2, rest = rest.partition(" ")
        char, sep3, candidate = rest.partition(":")
        if not (sep1 and sep2 and sep3) or len(char) != 1:
            raise ValueError(f"invalid password entry: {line!r}")
        return cls(int(low), int(high), char, candidate.strip())

    def is_valid_count(self):
        """Return whether the letter occurs between low and high times."""
        return self.low <= self.password.count(self.char) <= self.high

    def is_valid_position(self):
        """Return whether exactly one of the two 1-based positions holds the letter."""
        size = len(self.password)
        if not (1 <= self.low <= size and 1 <= self.high <= size):
            raise ValueError(f"position out of range for {self.password!r}")
        first = self.password[self.low - 1] == self.char
        second = self.password[self.high - 1] == self.char
        return first != second


def _entries(text):
    return [PasswordEntry.parse(line) for line in text.splitlines()]


def part1(text):
    """Count passwords valid under the occurrence-count policy."""
    return sum(1 for entry in _entries(text) if entry.is_valid_count())


def part2(text):
    """Count passwords valid under the position policy."""
    return sum(1 for entry in _entries(text) if entry.is_valid_position())