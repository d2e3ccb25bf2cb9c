"""Day 15: find the best-scoring cookie recipe of 100 teaspoons."""

import re
from dataclasses import dataclass
from math import prod

_PATTERN = re.compile(
    r"(\w+): capacity (-?\d+), durability (-?\d+), flavor (-?\d+), "
    r"texture (-?\d+), calories (-?\d+)"
)
_SLOTS = 4
_TEASPOONS = 100
_CALORIES = 500


@dataclass(frozen=True)
class _Ingredient:
    name: str
    properties: tuple
    calories: int


def _ingredients(text):
    found = []
    for line in text.splitlines():
        match = _PATTERN.search(line)
        if match is None:
            raise ValueError(f"invalid ingredient: {line!r}")
        name, *numbers = match.groups()
        values = [int(n) for n in numbers]
        found.append(_Ingredient(name, tuple(values[:4]), values[4]))
    return found


def _mixtures(count, total, exact):
    if count == 0:
        if not exact or total == 0:
            yield ()
        return
    for first in range(total + 1):
        for rest in _mixtures(count - 1, total - first, exact):
            yield (first, *rest)


def _best(text, calorie_requirement):
    ingredients = _ingredients(text)[:_SLOTS]
    # With fewer than four ingredients the spare slots absorb leftover spoons.
    exact = len(ingredients) == _SLOTS
    scores = []
    for amounts in _mixtures(len(ingredients), _TEASPOONS, exact):
        pairs = list(zip(ingredients, amounts))
        calories = sum(ing.calories * qty for ing, qty in pairs)
        if calorie_requirement and calories != _CALORIES:
            continue
        totals = (
            sum(ing.properties[k] * qty for ing, qty in pairs) for k in range(4)
        )
        scores.append(prod(max(total, 0) for total in totals))
    if not scores:
        raise ValueError("no recipe meets the requirements")
    return max(scores)


def part1(text):
    """Return the highest cookie score."""
    return _best(text, False)


def part2(text):
    """Return the highest score among cookies of exactly 500 calories."""
    return _best(text, True)