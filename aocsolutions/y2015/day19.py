"""Day 19: molecule replacements for Rudolph's medicine."""

import re

_ELEMENT = re.compile(r"[A-Z][a-z]?")


def _parse(text):
    rules_text, sep, molecule = text.partition("\n\n")
    if not sep:
        raise ValueError("expected replacements and a molecule separated by a blank line")
    rules = []
    for line in rules_text.splitlines():
        left, arrow, right = line.partition(" => ")
        if not arrow:
            raise ValueError(f"invalid replacement: {line!r}")
        rules.append((left, right))
    return rules, molecule.strip()


def part1(text):
    """Return how many distinct molecules one replacement can produce."""
    rules, molecule = _parse(text)
    produced = set()
    for match in _ELEMENT.finditer(molecule):
        element = match.group()
        for left, right in rules:
            if left == element:
                produced.add(molecule[: match.start()] + right + molecule[match.end() :])
    return len(produced)