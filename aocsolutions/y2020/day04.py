"""Day 4 (2020): validate passports."""

import string
from dataclasses import dataclass, fields

_EYE_COLOURS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})
_HEX = frozenset(string.hexdigits)
_DIGITS = frozenset(string.digits)


def _parse_unsigned(value):
    """Parse a non-negative integer, allowing a leading '+'; None on failure."""
    body = value[1:] if value.startswith("+") else value
    if not body or not _DIGITS.issuperset(body):
        return None
    return int(body)


def _year_in(value, low, high):
    if value is None:
        return False
    year = _parse_unsigned(value)
    return year is not None and low <= year <= high


@dataclass(frozen=True)
class Passport:
    """The fields found in one passport record; missing ones are None."""

    byr: str | None = None
    iyr: str | None = None
    eyr: str | None = None
    hgt: str | None = None
    hcl: str | None = None
    ecl: str | None = None
    pid: str | None = None
    cid: str | None = None

    @classmethod
    def parse(cls, record):
        """Parse whitespace-separated ``key:value`` pairs."""
        known = {f.name for f in fields(cls)}
        values = {}
        for item in record.split():
            key, sep, value = item.partition(":")
            if not sep:
                raise ValueError(f"invalid field: {item!r}")
            if key not in known:
                raise ValueError(f"unknown key {key}:{value}")
            values[key] = value
        return cls(**values)

    def has_required_fields(self):
        """Return whether every field except ``cid`` is present."""
        return all(
            value is not None
            for value in (self.byr, self.iyr, self.eyr, self.hgt, self.hcl, self.ecl, self.pid)
        )

    def _height_ok(self):
        if self.hgt is None:
            return False
        for unit, low, high in (("cm", 150, 193), ("in", 59, 76)):
            if self.hgt.endswith(unit):
                height = _parse_unsigned(self.hgt[: -len(unit)])
                return height is not None and low <= height <= high
        return False

    def _hair_ok(self):
        return (
            self.hcl is not None
            and self.hcl.startswith("#")
            and _HEX.issuperset(self.hcl[1:])
        )

    def _pid_ok(self):
        return self.pid is not None and len(self.pid) == 9 and _DIGITS.issuperset(self.pid)

    def is_valid(self):
        """Return whether every required field is present and well formed."""
        return (
            _year_in(self.byr, 1920, 2002)
            and _year_in(self.iyr, 2010, 2020)
            and _year_in(self.eyr, 2020, 2030)
            and self._height_ok()
            and self._hair_ok()
            and self.ecl in _EYE_COLOURS
            and self._pid_ok()
        )


def _passports(text):
    return [Passport.parse(record) for record in text.split("\n\n")]


def part1(text):
    """Count passports with all required fields."""
    return sum(1 for passport in _passports(text) if passport.has_required_fields())


def part2(text):
    """Count passports whose required fields are all valid."""
    return sum(1 for passport in _passports(text) if passport.is_valid())